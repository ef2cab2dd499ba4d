"""Undo/redo history for task mutations.

Each mutation is recorded as an ``UndoAction``: a tag saying what happened
plus the task it happened to. The history only moves actions between the
two stacks; ``TaskManager`` decides what reverting or reapplying a given
kind means.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from tasktrack.task_engine.types import Task


class ActionKind(str, Enum):
    """What a recorded mutation did."""

    ADD = "add"
    COMPLETE = "complete"


@dataclass(frozen=True)
class UndoAction:
    """A reversible mutation of the pending queue."""

    kind: ActionKind
    task: Task


class UndoEngine:
    """Undo and redo stacks. An action lives in exactly one of them.

    ``max_size`` caps the undo stack (oldest entries are dropped); 0 means
    unlimited.
    """

    def __init__(self, max_size: int = 0):
        self._undo: list[UndoAction] = []
        self._redo: list[UndoAction] = []
        self._max_size = max_size

    def record(self, action: UndoAction) -> None:
        """Push a fresh action. Any pending redo history is discarded."""
        self._undo.append(action)
        self._redo.clear()

        # Trim to max size
        if self._max_size and len(self._undo) > self._max_size:
            self._undo = self._undo[-self._max_size:]

    def undo(self) -> UndoAction | None:
        """Move the newest undo action to the redo stack and return it."""
        if not self._undo:
            return None
        action = self._undo.pop()
        self._redo.append(action)
        return action

    def redo(self) -> UndoAction | None:
        """Move the newest redo action back to the undo stack and return it."""
        if not self._redo:
            return None
        action = self._redo.pop()
        self._undo.append(action)
        return action

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    @property
    def undo_size(self) -> int:
        return len(self._undo)

    @property
    def redo_size(self) -> int:
        return len(self._redo)
