"""Priority queue of pending tasks with removal by identity.

Built on ``heapq`` using lazy deletion: removed entries stay in the heap
marked dead and are skipped on extraction. An index from task to its live
entry makes removal O(1) without touching the order of the other entries.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator

from tasktrack.task_engine.types import Task

# Heap entries are [priority, sequence, task]; task is None once removed.
_PRIORITY, _SEQ, _TASK = 0, 1, 2


class TaskQueue:
    """Min-heap of tasks keyed by ascending priority."""

    def __init__(self):
        self._heap: list[list] = []
        self._entries: dict[Task, list] = {}
        self._counter = itertools.count()
        self._dead = 0

    def insert(self, task: Task) -> None:
        """Add a task. Re-inserting a live task replaces its old entry."""
        if task in self._entries:
            self.remove(task)
        entry = [task.priority, next(self._counter), task]
        self._entries[task] = entry
        heapq.heappush(self._heap, entry)

    def extract_min(self) -> Task | None:
        """Remove and return the most urgent task, or None when empty."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            task = entry[_TASK]
            if task is None:
                self._dead -= 1
                continue
            del self._entries[task]
            return task
        return None

    def peek(self) -> Task | None:
        """Return the most urgent task without removing it."""
        while self._heap and self._heap[0][_TASK] is None:
            heapq.heappop(self._heap)
            self._dead -= 1
        return self._heap[0][_TASK] if self._heap else None

    def remove(self, task: Task) -> bool:
        """Remove ``task`` by identity. Returns False if it was not queued."""
        entry = self._entries.pop(task, None)
        if entry is None:
            return False
        entry[_TASK] = None
        self._dead += 1
        if self._dead > len(self._entries):
            self._compact()
        return True

    def snapshot_sorted(self) -> list[Task]:
        """Return pending tasks by ascending priority, ties in insertion order."""
        live = sorted(self._entries.values(), key=lambda e: (e[_PRIORITY], e[_SEQ]))
        return [e[_TASK] for e in live]

    def _compact(self):
        """Drop dead entries once they outnumber live ones."""
        self._heap = [e for e in self._heap if e[_TASK] is not None]
        heapq.heapify(self._heap)
        self._dead = 0

    def __iter__(self) -> Iterator[Task]:
        """Yield live tasks in heap order (not sorted)."""
        for entry in self._heap:
            if entry[_TASK] is not None:
                yield entry[_TASK]

    def __contains__(self, task: object) -> bool:
        return task in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
