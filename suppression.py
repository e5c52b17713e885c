"""
suppression.py — publiczne API callsight: detect_output_suppression().

Składa domyślne adaptery (ramki CPython, linecache, readline, FrameLineGuard,
RegexOutputListExtractor) i uruchamia CallSiteResolver + ConsistencyChecker.
"""
from __future__ import annotations

import inspect
import logging
from numbers import Integral
from typing import Optional

from adapters.call_site.consistency import ConsistencyChecker
from adapters.call_site.resolver import CallSiteResolver
from adapters.context_guard.frame_line_guard import FrameLineGuard
from adapters.frame_resolver.inspect_resolver import InspectFrameResolver
from adapters.history_reader.readline_history import ReadlineHistoryReader
from adapters.line_reader.linecache_reader import LinecacheLineReader
from adapters.output_list_extractor.regex_extractor import RegexOutputListExtractor
from config import Settings
from contracts import CallFrame, ExtractionResult, InvalidInputError

logger = logging.getLogger("callsight.suppression")


def build_call_site_resolver(
    settings: Optional[Settings] = None,
    suppression_token: Optional[str] = None,
) -> CallSiteResolver:
    settings = settings or Settings()
    extractor = RegexOutputListExtractor(
        suppression_token=suppression_token or settings.suppression_token,
        escape_char=settings.escape_char,
    )
    return CallSiteResolver(
        frame_resolver=InspectFrameResolver(settings.interactive_sources),
        line_reader=LinecacheLineReader(),
        history_reader=ReadlineHistoryReader(),
        context_guard=FrameLineGuard(),
        extractor=extractor,
        settings=settings,
    )


def _check_nout(nout: object) -> int:
    if isinstance(nout, bool) or not isinstance(nout, Integral) or nout < 0:
        raise InvalidInputError(
            f"nout must be a non-negative integer, got {nout!r}"
        )
    return int(nout)


def detect_output_suppression(
    nout: int,
    *,
    suppression_token: Optional[str] = None,
    settings: Optional[Settings] = None,
    resolver: Optional[CallSiteResolver] = None,
) -> tuple[list[bool], str, CallFrame, ExtractionResult]:
    """
    Identifies which outputs of the calling function were suppressed by its caller.

    Call it from inside the inquiry function with the number of outputs the
    caller requested:

        def my_func():
            is_tilde, *_ = detect_output_suppression(2, suppression_token="_")
            ...

        [value, _] = my_func()      # is_tilde == [False, True]

    Returns (is_tilde, caller_line, caller, components):
      is_tilde    -- one flag per declared output; True = suppression token
      caller_line -- the whole line that invoked the inquiry function
      caller      -- CallFrame of the caller (file, function, line); for an
                     interactive session the name is a label and line is None
      components  -- ExtractionResult with raw_out, reduced_output, out_names

    Requirements:
      1. Multiple outputs are bracketed and comma separated: [a, ~, c] = fun()
      2. It must be called from within a function.
      3. The caller lives in a source file, or is the latest interactive command.
      4. In a debugger only the line currently executed can be processed.
      5. Assignment to comma-separated list expansions is not supported.
      6. The calling statement fits on one line and names the inquiry function
         once, unless other occurrences are escaped: [a, ~] = fun()  # \\fun()

    Raises a subclass of contracts.OutputSuppressionError on any failure.
    """
    count = _check_nout(nout)
    resolver = resolver or build_call_site_resolver(settings, suppression_token)

    anchor = inspect.currentframe()
    try:
        report = resolver.resolve(count, anchor)
    finally:
        del anchor

    is_tilde = ConsistencyChecker().check(
        count,
        report.components,
        report.caller,
        report.caller_line,
        report.function_name,
    )
    logger.debug("%s: is_tilde=%s", report.function_name, is_tilde)
    return is_tilde, report.caller_line, report.caller, report.components
