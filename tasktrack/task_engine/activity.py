"""Append-only activity log shown by the ``log`` command."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from tasktrack.task_engine.types import LogEntry

logger = logging.getLogger(__name__)


class ActivityLog:
    """Ordered, append-only sequence of timestamped actions."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._entries: list[LogEntry] = []
        self._clock = clock

    def append(self, action: str) -> LogEntry:
        """Record an action stamped with the current time."""
        entry = LogEntry(timestamp=self._clock(), action=action)
        self._entries.append(entry)
        logger.debug("Activity: %s", action)
        return entry

    def entries(self) -> list[LogEntry]:
        """Return all entries, oldest first."""
        return list(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
