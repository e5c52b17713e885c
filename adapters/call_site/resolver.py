"""
Adapter: CallSiteResolver
Łączy porty w jeden przebieg: stos → linia wywołująca → lista wyjść.

Poziomy stosu (od kotwicy):
  0 — punkt wejścia (detect_output_suppression)
  1 — inquiry function: pyta, które z jej wyjść zostały pominięte
  2 — caller: funkcja, która wywołała inquiry function

  >= 3 ramki  → linia z pliku callera (po dwóch kontrolach ContextGuard)
  2 ramki     → caller to sesja interaktywna; ostatnia komenda z historii
  1 ramka     → NoEnclosingFunctionError
  0 ramek     → UnexpectedInternalError
"""
from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Any

from config import Settings
from contracts import (
    CallFrame,
    DebugMismatchError,
    ExtractionResult,
    NoEnclosingFunctionError,
    OutputSuppressionError,
    SuppressionReport,
    UnexpectedInternalError,
    UnsupportedSourceError,
)
from ports.context_guard import ContextGuard
from ports.frame_resolver import FrameResolver
from ports.history_reader import HistoryReader
from ports.line_reader import LineReader
from ports.output_list_extractor import OutputListExtractor

logger = logging.getLogger("callsight.call_site")

_CALLER_LEVEL = 2
_MODULE_FRAME = "<module>"


class CallSiteResolver:
    """Odnajduje linię, która wywołała inquiry function, i parsuje jej wyjścia."""

    def __init__(
        self,
        frame_resolver: FrameResolver,
        line_reader: LineReader,
        history_reader: HistoryReader,
        context_guard: ContextGuard,
        extractor: OutputListExtractor,
        settings: Settings | None = None,
    ) -> None:
        self._frames = frame_resolver
        self._lines = line_reader
        self._history = history_reader
        self._guard = context_guard
        self._extractor = extractor
        self._settings = settings or Settings()

    def resolve(self, nout: int, anchor: Any = None) -> SuppressionReport:
        stack = self._frames.call_stack(anchor)
        if not stack:
            raise UnexpectedInternalError(
                "Unexpected error: no call stack information is available. "
                "Check that the frame resolver has not been replaced or shadowed."
            )
        if len(stack) == 1 or stack[1].function_name == _MODULE_FRAME:
            raise NoEnclosingFunctionError(
                "detect_output_suppression can only be called from within a function."
            )

        function_name = stack[1].function_name
        if len(stack) > _CALLER_LEVEL:
            caller = stack[_CALLER_LEVEL]
            caller_line = self._read_caller_line(caller, anchor)
            components = self._extract(caller_line, function_name, caller)
        else:
            caller_line = self._history.last_entry()
            components = self._extract(
                caller_line, function_name,
                CallFrame(function_name=self._settings.interactive_label),
            )
            # Niepusty wynik to dobra poszlaka, że ostatnia komenda jest callerem
            if components.is_tilde:
                label = self._settings.interactive_label
            else:
                label = self._settings.unknown_label
                logger.info("Could not attribute %r to the interactive history.", function_name)
            caller = CallFrame(function_name=label)

        logger.debug("Caller of %s: %s | %r", function_name, caller.describe(), caller_line)
        return SuppressionReport(
            is_tilde=components.is_tilde,
            caller_line=caller_line,
            caller=caller,
            components=components,
            function_name=function_name,
        )

    # -- Prywatne -----------------------------------------------------------

    def _extract(self, caller_line: str, function_name: str, caller: CallFrame) -> ExtractionResult:
        try:
            return self._extractor.extract(caller_line, function_name)
        except OutputSuppressionError as exc:
            # Ekstraktor zna tylko linię; ramkę callera dopisujemy tutaj
            if exc.caller is None:
                exc.caller = caller
            if exc.caller_line is None:
                exc.caller_line = caller_line
            raise

    def _is_supported_source(self, file_path: str) -> bool:
        if not file_path:
            return False
        suffix = PurePath(file_path).suffix.lower()
        return suffix in {s.lower() for s in self._settings.source_suffixes}

    def _read_caller_line(self, caller: CallFrame, anchor: Any) -> str:
        if not self._is_supported_source(caller.file_path):
            raise UnsupportedSourceError(
                f"Only callers defined in source files "
                f"({', '.join(self._settings.source_suffixes)}) are supported; "
                f"got {caller.file_path or 'no file'!r}.",
                caller=caller,
            )
        if not self._guard.is_safe(caller):
            raise DebugMismatchError(
                f"Caller line ({caller.line_number} in {caller.function_name}) is not "
                f"a valid executing line. Only the line currently paused or executed "
                f"can be processed.",
                caller=caller,
            )

        caller_line = self._lines.read_line(caller.file_path, caller.line_number)  # type: ignore[arg-type]

        # Druga kontrola: debugger mógł przesunąć wykonanie w trakcie odczytu
        if not self._guard.is_safe(caller, self._frames.call_stack(anchor)):
            raise DebugMismatchError(
                "Mismatch between the invoked and the evaluated line, likely caused "
                "by evaluating a line in debug mode that is not the current line.",
                caller_line=caller_line,
                caller=caller,
            )
        return caller_line
