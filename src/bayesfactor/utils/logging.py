from __future__ import annotations

from datetime import datetime


def timestamp() -> str:
    """Return local time as 'YYYY-MM-DD HH:MM:SS.mmm' (milliseconds, no timezone)."""
    try:
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")
        return ts[:-3]
    except Exception:
        return datetime.now().isoformat(timespec="milliseconds")


def log(message: str) -> None:
    """Print a message prefixed with a timestamp.

    Callers tag messages with a bracketed component prefix, e.g.
    ``[bayesfactor.integrate] Warning: ...``.
    """
    print(f"[{timestamp()}] {message}")


def warn(component: str, message: str) -> None:
    """Log a warning line for a component."""
    log(f"[{component}] Warning: {message}")
