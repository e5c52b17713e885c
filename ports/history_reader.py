"""
Port: HistoryReader
Odpowiedzialność: ostatnia komenda z historii sesji interaktywnej.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class HistoryReader(Protocol):
    def last_entry(self) -> str:
        """
        Returns the most recent interactive command as text.
        Returns "" when no history is available.
        """
        ...
