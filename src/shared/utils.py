"""Shared utility functions."""
from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePosixPath


def now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def relative_posix(path: str, base: str) -> str:
    """Return *path* relative to *base* in POSIX form.

    Backslashes are treated as separators.  When *path* does not live
    under *base* it is returned with normalised separators only.
    """
    if not path:
        return ""
    target = PurePosixPath(path.replace("\\", "/"))
    root = PurePosixPath(base.replace("\\", "/"))
    try:
        return target.relative_to(root).as_posix()
    except ValueError:
        return target.as_posix()
