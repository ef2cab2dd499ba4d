"""Fixed-size ring of the most recently completed tasks."""

from __future__ import annotations

from tasktrack.task_engine.types import Task

DEFAULT_CAPACITY = 10


class RecentCompletedRing:
    """Circular buffer keeping the last ``capacity`` completed tasks.

    The write cursor only grows; the slot written is ``cursor % capacity``,
    so older completions are silently overwritten.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._slots: list[Task | None] = [None] * capacity
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def cursor(self) -> int:
        return self._cursor

    def record(self, task: Task) -> None:
        """Store a completed task, overwriting the oldest slot when full."""
        self._slots[self._cursor % self.capacity] = task
        self._cursor += 1

    def retract(self, task: Task) -> bool:
        """Undo the newest write if it holds ``task``.

        Returns False and changes nothing otherwise. A slot that was
        overwritten by the retracted write is not restored.
        """
        if self._cursor == 0:
            return False
        slot = (self._cursor - 1) % self.capacity
        if self._slots[slot] is not task:
            return False
        self._slots[slot] = None
        self._cursor -= 1
        return True

    def items(self) -> list[Task]:
        """Return held tasks, oldest first."""
        if self._cursor <= self.capacity:
            ordered = self._slots[:self._cursor]
        else:
            start = self._cursor % self.capacity
            ordered = self._slots[start:] + self._slots[:start]
        return [t for t in ordered if t is not None]

    def __len__(self) -> int:
        return len(self.items())
