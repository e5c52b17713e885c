"""
Adapter: RegexOutputListExtractor
Implementuje port OutputListExtractor.

Dopasowuje elastyczny wzorzec "[a, ..., z] = fun(" w jednej linii kodu,
gdzie "fun" to nazwa inquiry function:
  1. Nazwa funkcji może wystąpić w linii tylko raz (poza wystąpieniami
     poprzedzonymi znakiem ucieczki, np. "# porównaj z \\fun()").
  2. Zawartość zewnętrznych [...] przed "= fun" to raw_out.
  3. Indeksowanie (...) i {...} jest usuwane: "mst(1)" → "mst".
  4. Nazwy rozdzielone przecinkami; token "~" oznacza pominięte wyjście.
"""
from __future__ import annotations

import re

from adapters.output_list_extractor.bracket_scanner import scan_brackets, strip_bracket_spans
from contracts import ExtractionResult, MultipleInvocationError, ParseFailureError

_WHITESPACE_RE = re.compile(r"\s+")

# Opcjonalny kwalifikator przed nazwą: "self.", "pkg.mod."
_QUALIFIER = r"(?:[A-Za-z_]\w*\s*\.\s*)*"


class RegexOutputListExtractor:
    """Parser listy wyjść oparty na regex + skanerze nawiasów."""

    def __init__(self, suppression_token: str = "~", escape_char: str = "\\") -> None:
        if not suppression_token:
            raise ValueError("suppression_token must not be empty")
        if len(escape_char) > 1:
            raise ValueError(f"escape_char must be a single character, got {escape_char!r}")
        self._token = suppression_token
        self._escape = escape_char

    # -- OutputListExtractor protocol ---------------------------------------

    def extract(self, line: str, function_name: str) -> ExtractionResult:
        name = function_name.strip()
        self._check_single_invocation(line, name)

        text = line.strip()
        pattern = (
            r"\[(.*)\] *= *" + _QUALIFIER + self._word(name) + r"( *\()?"
        )
        match = re.search(pattern, text)
        if match is None:
            detected = re.search(self._word(name), text) is not None
            return ExtractionResult(inquiry_function_detected=detected)

        raw_out = self._last_bracket_group(match.group(1), line)
        reduced = self._reduce(raw_out)
        out_names = [n.strip() for n in reduced.split(",")] if reduced else []
        return ExtractionResult(
            raw_out=raw_out,
            reduced_output=reduced,
            out_names=out_names,
            is_tilde=[n == self._token for n in out_names],
            inquiry_function_detected=True,
        )

    # -- Prywatne -----------------------------------------------------------

    @staticmethod
    def _word(name: str) -> str:
        return rf"(?<!\w){re.escape(name)}(?!\w)"

    def _check_single_invocation(self, line: str, name: str) -> None:
        if self._escape:
            unescaped = rf"(?<![\w{re.escape(self._escape)}]){re.escape(name)}(?!\w)"
        else:
            unescaped = self._word(name)
        if len(re.findall(unescaped, line)) > 1:
            raise MultipleInvocationError(
                f"Inquiry function {name!r} is called more than once on the same line. "
                f"When this is caused by a comment, place an escape character just "
                f"before the function name, e.g. # y = {self._escape}{name}(...)",
                caller_line=line,
            )

    @staticmethod
    def _last_bracket_group(interior: str, line: str) -> str:
        """
        Wzorzec jest zachłanny, więc interior może zawierać wcześniejsze grupy
        [...] z tej samej linii, np. "x = [1:5]; [a, b] = fun()" daje
        "1:5]; [a, b". Lista wyjść to ostatnia zewnętrzna grupa.
        Heurystyka: poprawna dla jednej instrukcji przypisania w linii.
        Bez wcześniejszych grup interior zostaje bez zmian, nawet
        niezbalansowany (np. "[[a] = fun()" daje "[a").
        """
        span = scan_brackets("[" + interior + "]", "[]")
        zeros = span.zero_positions()
        if len(zeros) > 1:
            if not span.balanced:
                raise ParseFailureError(
                    "The open/close bracket pattern preceding the function name "
                    "has an unexpected structure.",
                    caller_line=line,
                )
            # zeros[-2] to ostatni znak poza grupami; po nim jest "[" listy wyjść
            return interior[zeros[-2] + 1:]
        return interior

    @staticmethod
    def _reduce(raw_out: str) -> str:
        text = raw_out
        for pair in ("()", "{}"):
            text = strip_bracket_spans(text, pair)
        return _WHITESPACE_RE.sub(" ", text).strip()
