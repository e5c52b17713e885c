"""
Adapter: FrameLineGuard
Implementuje port ContextGuard.

Kontrola 1 (bez live_stack): numer linii callera musi być dodatni.
Kontrola 2 (z live_stack): stos pobrany ponownie od tej samej kotwicy musi
mieć na poziomie callera identyczną ramkę. Różnica oznacza, że wykonanie
przesunęło się (np. "jump" w pdb) i odczytana linia nie jest linią wykonywaną.
"""
from __future__ import annotations

from typing import Optional, Sequence

from contracts import CallFrame


class FrameLineGuard:

    def __init__(self, caller_level: int = 2) -> None:
        self._level = caller_level

    # -- ContextGuard protocol -----------------------------------------------

    def is_safe(
        self,
        caller: CallFrame,
        live_stack: Optional[Sequence[CallFrame]] = None,
    ) -> bool:
        if live_stack is None:
            return caller.line_number is not None and caller.line_number > 0
        if len(live_stack) <= self._level:
            return False
        return live_stack[self._level] == caller
