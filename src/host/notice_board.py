"""Process-wide list of deferred host callbacks.

Callbacks are registered now and run later, when the host fires the event
they were registered under (typically while rendering admin notices).
Registration never invokes a callback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from src.shared.utils import now_iso

logger = logging.getLogger(__name__)


@dataclass
class PendingCallback:
    """A callback registered for an event that has not fired yet."""
    event: str
    callback: Callable[[], Any]
    registered_at: str = field(default_factory=now_iso)


class NoticeBoard:
    """Ordered store of pending callbacks, flushed per event by :meth:`fire`."""

    def __init__(self) -> None:
        self._pending: list[PendingCallback] = []

    def register(self, event: str, callback: Callable[[], Any]) -> None:
        entry = PendingCallback(event=event, callback=callback)
        self._pending.append(entry)
        logger.debug(
            "Registered deferred callback %s for event %s at %s",
            getattr(callback, "__qualname__", repr(callback)),
            event,
            entry.registered_at,
        )

    def pending(self, event: str | None = None) -> list[PendingCallback]:
        """Return callbacks still waiting to run, in registration order."""
        if event is None:
            return list(self._pending)
        return [p for p in self._pending if p.event == event]

    def fire(self, event: str) -> int:
        """Run and remove every callback pending for *event*.

        A callback that raises is logged and the remaining callbacks
        still run.

        Returns:
            Number of callbacks invoked.
        """
        due = [p for p in self._pending if p.event == event]
        self._pending = [p for p in self._pending if p.event != event]

        for entry in due:
            try:
                entry.callback()
            except Exception:
                logger.exception(
                    "Deferred callback for event %s (registered at %s) failed",
                    event,
                    entry.registered_at,
                )
        return len(due)

    def clear(self, event: str | None = None) -> int:
        """Drop pending callbacks without running them."""
        if event is None:
            count = len(self._pending)
            self._pending.clear()
            return count
        before = len(self._pending)
        self._pending = [p for p in self._pending if p.event != event]
        return before - len(self._pending)


_board = NoticeBoard()


def get_notice_board() -> NoticeBoard:
    """Return the process-wide notice board."""
    return _board


def reset_notice_board() -> NoticeBoard:
    """Replace the process-wide notice board with an empty one."""
    global _board
    _board = NoticeBoard()
    return _board
