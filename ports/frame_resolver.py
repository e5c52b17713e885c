"""
Port: FrameResolver
Odpowiedzialność: dostarcza stos wywołań (od najgłębszej ramki do najpłytszej).
"""
from typing import Any, Protocol, runtime_checkable

from contracts import CallFrame


@runtime_checkable
class FrameResolver(Protocol):
    def call_stack(self, anchor: Any = None) -> list[CallFrame]:
        """
        Returns the call stack starting at `anchor` (index 0), innermost first.
        Index 1 is the function that called the anchor, index 2 its caller.
        anchor=None means the frame that called call_stack().
        Returns an empty or short list when the stack is not deep enough.
        """
        ...
