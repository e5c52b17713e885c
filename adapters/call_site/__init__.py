from .consistency import ConsistencyChecker
from .resolver import CallSiteResolver

__all__ = [
    "CallSiteResolver",
    "ConsistencyChecker",
]
