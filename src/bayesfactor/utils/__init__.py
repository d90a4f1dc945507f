from .logging import log, warn, timestamp

__all__ = [
    "log",
    "warn",
    "timestamp",
]
