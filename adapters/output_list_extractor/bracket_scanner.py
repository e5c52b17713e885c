"""
Bracket scanner — struktura zagnieżdżeń jednej pary nawiasów.

levels[i] to głębokość po uwzględnieniu znaku i: nawias otwierający podnosi
głębokość na swojej pozycji, zamykający obniża na swojej. Zewnętrzna para
zaczyna się na głębokości 1, a jej nawias zamykający ma głębokość 0.

    "a(1:2),d((3))"  → levels [0,1,1,1,1,0,0,0,1,2,2,1,0]
                       spans  [(1,5), (8,12)]

Skaner nigdy nie rzuca wyjątku — niezbalansowany tekst (ujemna głębokość,
końcowa głębokość > 0) ocenia wywołujący (BracketSpan.balanced).
"""
from __future__ import annotations

from contracts import BracketSpan


def _check_pair(pair: str) -> tuple[str, str]:
    if len(pair) != 2 or pair[0] == pair[1]:
        raise ValueError(f"Bracket pair must be two distinct characters, got {pair!r}")
    return pair[0], pair[1]


def scan_brackets(text: str, pair: str) -> BracketSpan:
    """Zwraca BracketSpan dla `text` i pary nawiasów, np. "()" lub "[]"."""
    open_char, close_char = _check_pair(pair)

    deltas: list[int] = []
    levels: list[int] = []
    spans: list[tuple[int, int]] = []
    level = 0
    start: int | None = None

    for i, ch in enumerate(text):
        delta = 1 if ch == open_char else -1 if ch == close_char else 0
        previous = level
        level += delta
        deltas.append(delta)
        levels.append(level)

        # Przejścia 0 → 1 i 1 → 0 wyznaczają zewnętrzne pary
        if previous == 0 and level == 1:
            start = i
        elif previous == 1 and level == 0 and start is not None:
            spans.append((start, i))
            start = None

    return BracketSpan(deltas=deltas, levels=levels, spans=spans)


def strip_bracket_spans(text: str, pair: str) -> str:
    """Usuwa wszystkie zewnętrzne pary nawiasów razem z zawartością."""
    spans = scan_brackets(text, pair).spans
    if not spans:
        return text
    pieces = []
    cursor = 0
    for start, end in spans:
        pieces.append(text[cursor:start])
        cursor = end + 1
    pieces.append(text[cursor:])
    return "".join(pieces)
