"""
Port: ContextGuard
Odpowiedzialność: czy odczytana linia to linia faktycznie wykonywana
(np. nie "stara" linia po skoku debuggera).
"""
from typing import Optional, Protocol, Sequence, runtime_checkable

from contracts import CallFrame


@runtime_checkable
class ContextGuard(Protocol):
    def is_safe(
        self,
        caller: CallFrame,
        live_stack: Optional[Sequence[CallFrame]] = None,
    ) -> bool:
        """
        Without live_stack: checks that the caller frame itself is usable
        (e.g. a positive line number).
        With live_stack: checks that a freshly resolved stack still holds
        the same caller frame at the caller's depth.
        """
        ...
