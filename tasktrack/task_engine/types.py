"""Core types for the task engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True, eq=False)
class Task:
    """A pending task with an ordered tree of subtasks.

    Tasks compare and hash by identity: two tasks with the same title are
    still different tasks. Title, time and priority never change after
    construction; only the subtask list grows.
    """

    title: str
    added_time: datetime
    priority: int  # lower = more urgent
    _subtasks: list[Task] = field(default_factory=list, init=False, repr=False)

    def add_subtask(self, sub: Task) -> Task:
        """Append a subtask and return it."""
        self._subtasks.append(sub)
        return sub

    @property
    def subtasks(self) -> tuple[Task, ...]:
        return tuple(self._subtasks)

    def find_subtask(self, search_title: str) -> Task | None:
        """Depth-first search for a task titled ``search_title``, ignoring case.

        Checks this task first, then each subtask in insertion order, so the
        first positional match wins when titles repeat at different depths.
        """
        if self.title.casefold() == search_title.casefold():
            return self
        for sub in self._subtasks:
            found = sub.find_subtask(search_title)
            if found is not None:
                return found
        return None


@dataclass(frozen=True)
class LogEntry:
    """A single activity log line."""

    timestamp: datetime
    action: str


@dataclass(frozen=True)
class User:
    """A known user. Equal by username only."""

    username: str
    credential: str = field(compare=False, repr=False)

    def check(self, credential: str) -> bool:
        # Plain string comparison, the stored value is not a hash.
        return self.credential == credential
