"""
Output list extractor package.

Public import:
    from adapters.output_list_extractor import RegexOutputListExtractor, scan_brackets
"""

from adapters.output_list_extractor.bracket_scanner import scan_brackets, strip_bracket_spans
from adapters.output_list_extractor.regex_extractor import RegexOutputListExtractor

__all__ = ["RegexOutputListExtractor", "scan_brackets", "strip_bracket_spans"]
