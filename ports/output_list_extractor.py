"""
Port: OutputListExtractor
Odpowiedzialność: z jednej linii kodu wyciąga listę wyjść "[a, ~, c] = fun(".
"""
from typing import Protocol, runtime_checkable

from contracts import ExtractionResult


@runtime_checkable
class OutputListExtractor(Protocol):
    def extract(self, line: str, function_name: str) -> ExtractionResult:
        """
        Parses the output-binding list that precedes `function_name` on `line`.
        Returns an empty ExtractionResult (raw_out == "") when no bracketed
        list is found; inquiry_function_detected tells whether the name
        occurs on the line at all.
        Raises MultipleInvocationError when the name occurs more than once
        (escaped occurrences excluded).
        """
        ...
