from __future__ import annotations

import os

import pytest

from adapters.call_site.resolver import CallSiteResolver
from adapters.context_guard.frame_line_guard import FrameLineGuard
from adapters.output_list_extractor.regex_extractor import RegexOutputListExtractor
from contracts import (
    CallFrame,
    CountMismatchError,
    InquiryFunctionNotFoundError,
    InvalidInputError,
    MultipleInvocationError,
    NoEnclosingFunctionError,
    UnsupportedSourceError,
)
from suppression import detect_output_suppression


def _pair():
    is_tilde, caller_line, caller, components = detect_output_suppression(2, suppression_token="_")
    return (is_tilde, caller_line, caller, components), None


def _single():
    return detect_output_suppression(1, suppression_token="_")


def _silent():
    return detect_output_suppression(0, suppression_token="_")


def _declares_three():
    detect_output_suppression(3, suppression_token="_")
    return 1, 2


def test_detect_output_suppression_flags_suppressed_slot():
    [result, _] = _pair()

    is_tilde, caller_line, caller, components = result
    assert is_tilde == [False, True]
    assert caller_line.strip() == "[result, _] = _pair()"
    assert caller.function_name == "test_detect_output_suppression_flags_suppressed_slot"
    assert caller.file_path == os.path.abspath(__file__)
    assert caller.line_number > 0
    assert components.out_names == ["result", "_"]


def test_detect_output_suppression_single_plain_output():
    value = _single()

    is_tilde, caller_line, _caller, components = value
    assert is_tilde == [False]
    assert caller_line.strip() == "value = _single()"
    assert components.raw_out == ""


def test_detect_output_suppression_no_outputs():
    _silent()


def test_detect_output_suppression_zero_declared_outputs_returns_empty_flags():
    result = _silent()

    assert result[0] == []


def test_detect_output_suppression_count_mismatch():
    with pytest.raises(CountMismatchError):
        [a, b] = _declares_three()


def test_detect_output_suppression_wrapped_call():
    alias = _pair

    with pytest.raises(InquiryFunctionNotFoundError):
        [x, _] = alias()


def test_detect_output_suppression_duplicate_call_on_line():
    with pytest.raises(MultipleInvocationError):
        [a, _] = _pair()  # same as _pair()


def test_detect_output_suppression_escaped_duplicate_in_comment():
    [a, _] = _pair()  # same as \_pair()

    assert a[0] == [False, True]


def test_detect_output_suppression_from_module_body():
    namespace = {"detect_output_suppression": detect_output_suppression}

    with pytest.raises(NoEnclosingFunctionError):
        exec("detect_output_suppression(1)", namespace)


def test_detect_output_suppression_from_exec_source():
    namespace = {"detect_output_suppression": detect_output_suppression}
    source = "def inquiry():\n    return detect_output_suppression(1)\n\nvalue = inquiry()\n"

    with pytest.raises(UnsupportedSourceError):
        exec(source, namespace)


@pytest.mark.parametrize("nout", [-1, 1.5, "2", None, True])
def test_detect_output_suppression_rejects_invalid_nout(nout):
    with pytest.raises(InvalidInputError):
        detect_output_suppression(nout)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        detect_output_suppression(-2)


class _InteractiveFrames:
    def call_stack(self, anchor=None):
        return [
            CallFrame(file_path="/lib/suppression.py", function_name="detect_output_suppression", line_number=1),
            CallFrame(file_path="/src/funcs.py", function_name="myFunc", line_number=4),
        ]


class _History:
    def last_entry(self) -> str:
        return "[x, ~, z] = myFunc(10)"


class _NoLines:
    def read_line(self, file_path: str, line_number: int) -> str:
        raise AssertionError("interactive callers have no source line")


def test_detect_output_suppression_with_injected_resolver():
    resolver = CallSiteResolver(
        frame_resolver=_InteractiveFrames(),
        line_reader=_NoLines(),
        history_reader=_History(),
        context_guard=FrameLineGuard(),
        extractor=RegexOutputListExtractor(),
    )

    is_tilde, caller_line, caller, components = detect_output_suppression(3, resolver=resolver)

    assert is_tilde == [False, True, False]
    assert caller_line == "[x, ~, z] = myFunc(10)"
    assert caller.function_name == "interactive session"
    assert components.reduced_output == "x, ~, z"
