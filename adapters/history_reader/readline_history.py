"""
Adapter: ReadlineHistoryReader
Implementuje port HistoryReader — ostatnia pozycja historii modułu readline.
"""
from __future__ import annotations

import logging

logger = logging.getLogger("callsight.history_reader")


class ReadlineHistoryReader:

    def last_entry(self) -> str:
        try:
            import readline
        except ImportError:
            # Brak readline (np. Windows bez pyreadline) — brak historii
            logger.info("readline is not available; interactive history is empty.")
            return ""

        length = readline.get_current_history_length()
        if length < 1:
            return ""
        return readline.get_history_item(length) or ""
