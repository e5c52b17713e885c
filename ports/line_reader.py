"""
Port: LineReader
Odpowiedzialność: odczyt jednej linii pliku źródłowego.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class LineReader(Protocol):
    def read_line(self, file_path: str, line_number: int) -> str:
        """
        Returns the text of line `line_number` (1-based) without the newline.
        Raises OSError when the file cannot be read and IndexError when
        the line does not exist.
        """
        ...
