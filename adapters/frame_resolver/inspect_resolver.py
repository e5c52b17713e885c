"""
Adapter: InspectFrameResolver
Implementuje port FrameResolver na ramkach CPython (inspect / frame.f_back).

Ramka najwyższego poziomu sesji interaktywnej ("<stdin>", "<python-input-0>",
"<ipython-input-3-...>") nie jest raportowana — odpowiada "oknu komend",
a nie funkcji. Przejście stosu kończy się na niej.
"""
from __future__ import annotations

import inspect
import os
from typing import Any, Sequence

from contracts import CallFrame

_DEFAULT_INTERACTIVE = ("<stdin>", "<python-input-", "<ipython-input-", "<pyshell#")


class InspectFrameResolver:

    def __init__(self, interactive_sources: Sequence[str] = _DEFAULT_INTERACTIVE) -> None:
        self._interactive = tuple(interactive_sources)

    # -- FrameResolver protocol ----------------------------------------------

    def call_stack(self, anchor: Any = None) -> list[CallFrame]:
        frame = anchor if anchor is not None else inspect.currentframe().f_back
        stack: list[CallFrame] = []
        try:
            while frame is not None:
                filename = frame.f_code.co_filename
                if filename.startswith(self._interactive):
                    break
                stack.append(CallFrame(
                    file_path=self._normalize_path(filename),
                    function_name=frame.f_code.co_name,
                    line_number=frame.f_lineno,
                ))
                frame = frame.f_back
        finally:
            # Ramki trzymają referencje do lokalnych zmiennych całego stosu
            del frame
        return stack

    # -- Prywatne -----------------------------------------------------------

    @staticmethod
    def _normalize_path(filename: str) -> str:
        # "<string>", "<frozen ...>" itp. nie są plikami — zostają bez zmian
        if filename.startswith("<"):
            return filename
        return os.path.abspath(filename)
