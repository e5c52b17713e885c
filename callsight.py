#!/usr/bin/env python3
"""
callsight.py — CLI narzędzie callsight.

Pozwala sprawdzić parser listy wyjść bez pisania inquiry function:
analizuje podaną linię kodu albo linię wskazaną w pliku.

Konfiguracja: zmienne środowiskowe z prefiksem CALLSIGHT_
lub plik .env (np. CALLSIGHT_SUPPRESSION_TOKEN=_).

Podkomendy:
    parse    — sparsuj listę wyjść z podanej linii
    scan     — pokaż głębokość zagnieżdżeń nawiasów w tekście
    inspect  — sparsuj linię FILE:LINE i sprawdź zgodność z --nout

Użycie:
    python callsight.py parse --function myFunc --line "[mst(1), ~, ~, data] = myFunc();"
    python callsight.py parse -f myFunc -n 2 --line "[a, ~, c] = myFunc()"
    python callsight.py scan --pair "()" --text "a(1:2), d((3))"
    python callsight.py inspect examples/main.py:12 --function my_func --nout 2
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, NoReturn

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config import Settings
from contracts import CallFrame, ExtractionResult, OutputSuppressionError

# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _fail(message: str) -> NoReturn:
    print(f"Błąd: {message}", file=sys.stderr)
    sys.exit(1)


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(escape(str(key)), escape(str(value)))
    _console().print(table)


def _print_components(components: ExtractionResult, is_tilde: list[bool] | None) -> None:
    rows: list[tuple[str, Any]] = [
        ("raw_out", repr(components.raw_out)),
        ("reduced_output", repr(components.reduced_output)),
        ("out_names", components.out_names),
        ("inquiry_function_detected", components.inquiry_function_detected),
    ]
    if is_tilde is not None:
        rows.insert(0, ("is_tilde", is_tilde))
    _print_kv_table("Output list", rows)

    if not components.out_names:
        return
    table = Table(title="Slots", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Name")
    table.add_column("Suppressed", justify="center", no_wrap=True)
    for idx, (name, tilde) in enumerate(zip(components.out_names, components.is_tilde), 1):
        table.add_row(str(idx), escape(name), "yes" if tilde else "no")
    _console().print(table)


def _read_line_arg(args: argparse.Namespace) -> str:
    line = args.line if args.line is not None else sys.stdin.readline()
    line = line.rstrip("\r\n")
    if not line.strip():
        _fail("podaj linię kodu przez --line lub stdin")
    return line


def _split_location(location: str) -> tuple[str, int]:
    path, sep, number = location.rpartition(":")
    if not sep or not path or not number.isdigit():
        raise ValueError(f"Expected FILE:LINE, got {location!r}")
    return path, int(number)


def _analyze(
    line: str,
    function_name: str,
    nout: int | None,
    caller: CallFrame,
    settings: Settings,
    token: str | None,
) -> tuple[ExtractionResult, list[bool] | None]:
    from adapters.call_site.consistency import ConsistencyChecker
    from adapters.output_list_extractor.regex_extractor import RegexOutputListExtractor

    extractor = RegexOutputListExtractor(
        suppression_token=token or settings.suppression_token,
        escape_char=settings.escape_char,
    )
    components = extractor.extract(line, function_name)
    if nout is None:
        return components, None
    is_tilde = ConsistencyChecker().check(nout, components, caller, line, function_name)
    return components, is_tilde


# -- podkomendy ------------------------------------------------------------

def _parse(args: argparse.Namespace, settings: Settings) -> None:
    line = _read_line_arg(args)
    caller = CallFrame(function_name="<cli>")
    try:
        components, is_tilde = _analyze(
            line, args.function, args.nout, caller, settings, args.token,
        )
    except OutputSuppressionError as exc:
        _fail(f"[{exc.kind.value}] {exc}")
    _print_components(components, is_tilde)


def _scan(args: argparse.Namespace, settings: Settings) -> None:
    from adapters.output_list_extractor.bracket_scanner import scan_brackets

    text = args.text if args.text is not None else sys.stdin.readline().rstrip("\r\n")
    span = scan_brackets(text, args.pair)

    table = Table(title=f"Bracket levels {args.pair}", box=box.ASCII)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Char", justify="center", no_wrap=True)
    table.add_column("Delta", justify="right", no_wrap=True)
    table.add_column("Level", justify="right", no_wrap=True)
    for idx, (ch, delta, level) in enumerate(zip(text, span.deltas, span.levels)):
        table.add_row(str(idx), escape(repr(ch)), str(delta), str(level))
    _console().print(table)

    spans = ", ".join(f"({s}, {e})" for s, e in span.spans) or "EMPTY"
    _print_kv_table("Summary", [("spans", spans), ("balanced", span.balanced)])


def _inspect(args: argparse.Namespace, settings: Settings) -> None:
    from adapters.line_reader.linecache_reader import LinecacheLineReader

    try:
        path, number = _split_location(args.location)
        line = LinecacheLineReader().read_line(path, number)
    except (ValueError, OSError, IndexError) as exc:
        _fail(str(exc))

    caller = CallFrame(file_path=path, function_name=path, line_number=number)
    try:
        components, is_tilde = _analyze(
            line, args.function, args.nout, caller, settings, args.token,
        )
    except OutputSuppressionError as exc:
        _fail(f"[{exc.kind.value}] {exc}")
    _print_kv_table("Caller", [("location", f"{path}:{number}"), ("line", line.strip())])
    _print_components(components, is_tilde)


# -- main ------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return number


def main(argv: list[str] | None = None) -> None:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    parser = argparse.ArgumentParser(
        prog="callsight",
        description="callsight — parser list wyjść '[a, ~, c] = fun()'",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # parse
    p = sub.add_parser("parse", help="Sparsuj listę wyjść z linii kodu")
    p.add_argument("--line", "-l", help="Linia kodu (lub stdin)")
    p.add_argument("--function", "-f", required=True, help="Nazwa inquiry function")
    p.add_argument("--nout", "-n", type=_non_negative_int, default=None,
                   help="Zadeklarowana liczba wyjść (włącza kontrolę zgodności)")
    p.add_argument("--token", default=None, help="Token pominięcia (domyślnie z konfiguracji)")

    # scan
    p = sub.add_parser("scan", help="Głębokość zagnieżdżeń nawiasów")
    p.add_argument("--text", "-t", help="Tekst do analizy (lub stdin)")
    p.add_argument("--pair", default="[]", choices=["()", "[]", "{}"])

    # inspect
    p = sub.add_parser("inspect", help="Sparsuj linię FILE:LINE")
    p.add_argument("location", help="Ścieżka i numer linii, np. main.py:12")
    p.add_argument("--function", "-f", required=True, help="Nazwa inquiry function")
    p.add_argument("--nout", "-n", type=_non_negative_int, default=None)
    p.add_argument("--token", default=None)

    args = parser.parse_args(argv)

    commands = {
        "parse":   _parse,
        "scan":    _scan,
        "inspect": _inspect,
    }
    commands[args.command](args, settings)


if __name__ == "__main__":
    main()
