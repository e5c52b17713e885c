"""
ConsistencyChecker — porównuje wynik parsera z zadeklarowaną liczbą wyjść.

  raw_out puste, nout != 0:
    nazwa funkcji nieobecna      → InquiryFunctionNotFoundError
    nout == 1                    → [False]  (a = fun(): jedno wyjście, bez "~")
    w przeciwnym razie           → ParseFailureError
  raw_out niepuste lub nout == 0:
    "{" lub "." i różna liczba   → UnsupportedExpansionError ([A{:}] = fun())
    różna liczba                 → CountMismatchError
    zgodne                       → is_tilde
"""
from __future__ import annotations

import re

from contracts import (
    REQUIREMENTS_HINT,
    CallFrame,
    CountMismatchError,
    ExtractionResult,
    InquiryFunctionNotFoundError,
    ParseFailureError,
    UnsupportedExpansionError,
)

_EXPANSION_RE = re.compile(r"[{.]")


class ConsistencyChecker:

    def check(
        self,
        nout: int,
        components: ExtractionResult,
        caller: CallFrame,
        caller_line: str,
        function_name: str,
    ) -> list[bool]:
        if not components.raw_out and nout != 0:
            if not components.inquiry_function_detected:
                raise InquiryFunctionNotFoundError(
                    f"The expected inquiry function name {function_name!r} was not "
                    f"detected in {caller.describe()}. This can be caused by wrapping "
                    f"the inquiry function in a lambda or another indirect call.",
                    caller_line=caller_line,
                    caller=caller,
                )
            if nout == 1:
                # Jedno wyjście bez nawiasów nigdy nie jest pominięte
                return [False]
            raise ParseFailureError(
                f"Outputs could not be parsed from {caller.describe()}. "
                f"{nout} outputs were declared but none were detected.\n"
                f"{REQUIREMENTS_HINT}",
                caller_line=caller_line,
                caller=caller,
            )

        count = len(components.out_names)
        if _EXPANSION_RE.search(components.raw_out) and nout != count:
            raise UnsupportedExpansionError(
                "Assignment to a comma-separated list expansion (non-scalar "
                "indexing or field access) is not supported.",
                caller_line=caller_line,
                caller=caller,
            )
        if nout != count:
            raise CountMismatchError(
                f"Detected {count} output(s) but {nout} output(s) were declared.\n"
                f"{REQUIREMENTS_HINT}",
                caller_line=caller_line,
                caller=caller,
            )
        return list(components.is_tilde)
