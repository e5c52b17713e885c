import pytest

from adapters.output_list_extractor.regex_extractor import RegexOutputListExtractor
from contracts import MultipleInvocationError, ParseFailureError


def test_extract_tilde_slots_with_indexed_name():
    extractor = RegexOutputListExtractor()

    result = extractor.extract("[mst(1), ~, ~, data] = myFunc();", "myFunc")

    assert result.raw_out == "mst(1), ~, ~, data"
    assert result.reduced_output == "mst, ~, ~, data"
    assert result.out_names == ["mst", "~", "~", "data"]
    assert result.is_tilde == [False, True, True, False]
    assert result.inquiry_function_detected is True


def test_extract_single_unbracketed_output_is_not_matched():
    result = RegexOutputListExtractor().extract("a = myFunc();", "myFunc")

    assert result.raw_out == ""
    assert result.out_names == []
    assert result.is_tilde == []
    assert result.inquiry_function_detected is True


def test_extract_reports_missing_function_name():
    result = RegexOutputListExtractor().extract("[a, b] = otherFunc();", "myFunc")

    assert result.raw_out == ""
    assert result.inquiry_function_detected is False


def test_extract_does_not_match_name_as_substring():
    result = RegexOutputListExtractor().extract("[a, b] = myFuncExtra();", "myFunc")

    assert result.raw_out == ""
    assert result.inquiry_function_detected is False


def test_extract_strips_parenthesized_ranges():
    result = RegexOutputListExtractor().extract("[a(1:5), b] = myFunc()", "myFunc")

    assert result.raw_out == "a(1:5), b"
    assert result.reduced_output == "a, b"
    assert result.out_names == ["a", "b"]


def test_extract_strips_cell_indexing_and_collapses_spaces():
    line = "   [ c{2} ,   ~ ,  s(1).x ]  =  myFunc ( 3 );"

    result = RegexOutputListExtractor().extract(line, "myFunc")

    assert result.reduced_output == "c , ~ , s.x"
    assert result.out_names == ["c", "~", "s.x"]
    assert result.is_tilde == [False, True, False]


def test_extract_uses_last_top_level_group_before_call():
    line = "x = [1:5]; [a, ~] = myFunc(x);"

    result = RegexOutputListExtractor().extract(line, "myFunc")

    assert result.raw_out == "a, ~"
    assert result.out_names == ["a", "~"]
    assert result.is_tilde == [False, True]


def test_extract_last_group_with_several_literal_arrays():
    line = "y = [1 2]; z = [3 [4]]; [p, q(2), ~] = myFunc(y, z)"

    result = RegexOutputListExtractor().extract(line, "myFunc")

    assert result.raw_out == "p, q(2), ~"
    assert result.out_names == ["p", "q", "~"]


def test_extract_keeps_nested_square_brackets_inside_output_list():
    result = RegexOutputListExtractor().extract("[a[0], ~] = myFunc()", "myFunc")

    assert result.raw_out == "a[0], ~"
    assert result.out_names == ["a[0]", "~"]
    assert result.is_tilde == [False, True]


def test_extract_rejects_unbalanced_bracket_pattern():
    with pytest.raises(ParseFailureError):
        RegexOutputListExtractor().extract("[a]b] = myFunc()", "myFunc")


def test_extract_keeps_unbalanced_interior_without_earlier_groups():
    result = RegexOutputListExtractor().extract("[[a] = myFunc()", "myFunc")

    assert result.raw_out == "[a"
    assert result.out_names == ["[a"]
    assert result.is_tilde == [False]


def test_extractor_rejects_multi_character_escape():
    with pytest.raises(ValueError):
        RegexOutputListExtractor(escape_char="\\#")


def test_extract_rejects_multiple_invocations_on_one_line():
    with pytest.raises(MultipleInvocationError) as info:
        RegexOutputListExtractor().extract("[a, ~] = myFunc(); % myFunc()", "myFunc")

    assert "myFunc" in str(info.value)
    assert info.value.caller_line == "[a, ~] = myFunc(); % myFunc()"


def test_extract_ignores_escaped_occurrence():
    line = "y = myFunc(); % compare with \\myFunc()"

    result = RegexOutputListExtractor().extract(line, "myFunc")

    assert result.raw_out == ""
    assert result.inquiry_function_detected is True


def test_extract_with_custom_token_and_escape():
    extractor = RegexOutputListExtractor(suppression_token="_", escape_char="!")

    result = extractor.extract("[value, _] = fetch()  # like !fetch()", "fetch")

    assert result.out_names == ["value", "_"]
    assert result.is_tilde == [False, True]


def test_extract_tilde_requires_exact_token():
    result = RegexOutputListExtractor().extract("[~a, ~, b~] = myFunc()", "myFunc")

    assert result.is_tilde == [False, True, False]


def test_extract_accepts_qualified_call():
    result = RegexOutputListExtractor(suppression_token="_").extract(
        "        [rows, _] = self.store.fetch_rows(query)", "fetch_rows",
    )

    assert result.raw_out == "rows, _"
    assert result.is_tilde == [False, True]


def test_extract_without_call_parenthesis():
    result = RegexOutputListExtractor().extract("[a, ~] = myFunc", "myFunc")

    assert result.out_names == ["a", "~"]


def test_extract_empty_bracket_list_has_no_names():
    result = RegexOutputListExtractor().extract("[] = myFunc()", "myFunc")

    assert result.raw_out == ""
    assert result.out_names == []
    assert result.inquiry_function_detected is True


def test_extract_is_stable_on_repeated_input():
    extractor = RegexOutputListExtractor()
    line = "[mst(1), ~, {x}, data] = myFunc();"

    assert extractor.extract(line, "myFunc") == extractor.extract(line, "myFunc")


def test_reduction_keeps_number_of_top_level_names():
    extractor = RegexOutputListExtractor()
    line = "[a(1, 2), b{3, 4}, ~, d(f(1), 2)] = myFunc()"

    result = extractor.extract(line, "myFunc")

    assert result.out_names == ["a", "b", "~", "d"]
    assert len(result.out_names) == 4


def test_extractor_rejects_empty_token():
    with pytest.raises(ValueError):
        RegexOutputListExtractor(suppression_token="")
