"""
Adapter: LinecacheLineReader
Implementuje port LineReader przez linecache (ten sam mechanizm co traceback).
"""
from __future__ import annotations

import linecache
from pathlib import Path


class LinecacheLineReader:
    """Odczyt jednej linii pliku; cache odświeżany przy zmianie pliku."""

    def read_line(self, file_path: str, line_number: int) -> str:
        if line_number is None or line_number < 1:
            raise IndexError(f"Line number must be positive, got {line_number!r}")

        linecache.checkcache(file_path)
        line = linecache.getline(file_path, line_number)
        if line:
            return line.rstrip("\r\n")

        # getline() zwraca "" zarówno dla braku pliku, jak i linii poza zakresem
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Source file not found: {file_path}")
        raise IndexError(f"{file_path} has no line {line_number}")
