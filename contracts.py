"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w callsight.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── FrameResolver ───────────────────────────────

class CallFrame(BaseModel):
    """Jeden poziom stosu wywołań: plik, nazwa funkcji, numer linii."""
    model_config = ConfigDict(frozen=True)

    file_path: str = ""                 # "" gdy brak pliku (sesja interaktywna)
    function_name: str
    line_number: Optional[int] = None   # None = linia nieokreślona

    def describe(self) -> str:
        if self.line_number is None:
            return self.function_name
        return f"{self.function_name} (line {self.line_number})"


# ─────────────────────────── BracketScanner ──────────────────────────────

class BracketSpan(BaseModel):
    """
    Struktura zagnieżdżeń jednej pary nawiasów w tekście.
    np. "(1:2)+((2):3)" → levels [1,1,1,1,0,0,1,2,2,1,1,1,0]
    """
    model_config = ConfigDict(frozen=True)

    deltas: list[int] = Field(default_factory=list)   # +1 otwarcie, -1 zamknięcie, 0 reszta
    levels: list[int] = Field(default_factory=list)   # suma prefiksowa deltas
    spans: list[tuple[int, int]] = Field(default_factory=list)  # (start, end) włącznie

    @property
    def balanced(self) -> bool:
        if any(level < 0 for level in self.levels):
            return False
        return not self.levels or self.levels[-1] == 0

    def zero_positions(self) -> list[int]:
        return [i for i, level in enumerate(self.levels) if level == 0]


# ─────────────────────────── OutputListExtractor ─────────────────────────

class ExtractionResult(BaseModel):
    raw_out: str = ""                   # zawartość [...] przed czyszczeniem
    reduced_output: str = ""            # bez indeksowania i nadmiarowych spacji
    out_names: list[str] = Field(default_factory=list)
    is_tilde: list[bool] = Field(default_factory=list)
    inquiry_function_detected: bool = False

    @model_validator(mode="after")
    def check_lengths(self) -> "ExtractionResult":
        if len(self.out_names) != len(self.is_tilde):
            raise ValueError("is_tilde must have the same length as out_names")
        return self


# ─────────────────────────── CallSiteResolver ────────────────────────────

class SuppressionReport(BaseModel):
    """Wynik CallSiteResolver przed werdyktem ConsistencyChecker."""
    is_tilde: list[bool] = Field(default_factory=list)
    caller_line: str = ""
    caller: CallFrame
    components: ExtractionResult = Field(default_factory=ExtractionResult)
    function_name: str = ""             # oczekiwana nazwa inquiry function

    def as_tuple(self) -> tuple[list[bool], str, CallFrame, ExtractionResult]:
        # Kolejność jak w publicznym API detect_output_suppression
        return self.is_tilde, self.caller_line, self.caller, self.components

    def __iter__(self):
        # Rozpakowanie: is_tilde, caller_line, caller, components = report
        return iter(self.as_tuple())


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NO_ENCLOSING_FUNCTION = "NO_ENCLOSING_FUNCTION"
    UNEXPECTED_INTERNAL = "UNEXPECTED_INTERNAL"
    UNSUPPORTED_SOURCE = "UNSUPPORTED_SOURCE"
    DEBUG_MISMATCH = "DEBUG_MISMATCH"
    MULTIPLE_INVOCATION = "MULTIPLE_INVOCATION"
    INQUIRY_FUNCTION_NOT_FOUND = "INQUIRY_FUNCTION_NOT_FOUND"
    PARSE_FAILURE = "PARSE_FAILURE"
    UNSUPPORTED_EXPANSION = "UNSUPPORTED_EXPANSION"
    COUNT_MISMATCH = "COUNT_MISMATCH"


REQUIREMENTS_HINT = (
    "    * Multiple outputs must be separated by commas: [a, ~, c] = fun()\n"
    "    * The calling statement must fit on one line and name the inquiry "
    "function only once (escape other occurrences: # \\fun())\n"
    "    * See help(detect_output_suppression) for all requirements."
)


class OutputSuppressionError(Exception):
    """Bazowy wyjątek; niesie linię wywołującą i ramkę (jeśli znane)."""
    kind: ErrorKind = ErrorKind.UNEXPECTED_INTERNAL

    def __init__(
        self,
        message: str,
        *,
        caller_line: str | None = None,
        caller: CallFrame | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.caller_line = caller_line
        self.caller = caller

    def __str__(self) -> str:
        parts = [self.message]
        if self.caller is not None and self.caller.file_path:
            parts.append(
                f"    Caller: {self.caller.file_path}, {self.caller.describe()}"
            )
        if self.caller_line is not None:
            parts.append(f"    Evaluated line: {self.caller_line.strip()}")
        return "\n".join(parts)


class InvalidInputError(OutputSuppressionError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class NoEnclosingFunctionError(OutputSuppressionError):
    kind = ErrorKind.NO_ENCLOSING_FUNCTION


class UnexpectedInternalError(OutputSuppressionError):
    kind = ErrorKind.UNEXPECTED_INTERNAL


class UnsupportedSourceError(OutputSuppressionError):
    kind = ErrorKind.UNSUPPORTED_SOURCE


class DebugMismatchError(OutputSuppressionError):
    kind = ErrorKind.DEBUG_MISMATCH


class MultipleInvocationError(OutputSuppressionError):
    kind = ErrorKind.MULTIPLE_INVOCATION


class InquiryFunctionNotFoundError(OutputSuppressionError):
    kind = ErrorKind.INQUIRY_FUNCTION_NOT_FOUND


class ParseFailureError(OutputSuppressionError):
    kind = ErrorKind.PARSE_FAILURE


class UnsupportedExpansionError(OutputSuppressionError):
    kind = ErrorKind.UNSUPPORTED_EXPANSION


class CountMismatchError(OutputSuppressionError):
    kind = ErrorKind.COUNT_MISMATCH
