"""Task manager: the pending queue, its undo history and the activity log."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from tasktrack.config import AppConfig
from tasktrack.task_engine import ActivityLog, LogEntry, RecentCompletedRing, Task, TaskQueue, User
from tasktrack.undo import ActionKind, UndoAction, UndoEngine

logger = logging.getLogger(__name__)


class TaskManager:
    """Owns every container and exposes the tracker's operations.

    None of the operations raise for ordinary failures. An empty queue, empty
    history or unknown user comes back as ``None``, ``False`` or a status
    message for the caller to show.
    """

    def __init__(self, config: AppConfig | None = None,
                 clock: Callable[[], datetime] = datetime.now):
        config = config or AppConfig()
        self._clock = clock
        self.users: dict[str, User] = {
            name: User(name, credential) for name, credential in config.users.items()
        }
        self.queue = TaskQueue()
        self.log = ActivityLog(clock=clock)
        self.history = UndoEngine(max_size=config.undo_limit)
        self.recent = RecentCompletedRing(config.recent_capacity)

    def now(self) -> datetime:
        """Current time truncated to whole seconds, for new tasks."""
        return self._clock().replace(microsecond=0)

    def login(self, username: str, credential: str) -> bool:
        """Check a credential against the user directory."""
        user = self.users.get(username)
        if user is None or not user.check(credential):
            logger.warning("Login rejected for %r", username)
            return False
        self.log.append(f"Logged in: {username}")
        logger.info("User %s logged in", username)
        return True

    def add_task(self, task: Task) -> Task:
        """Queue a task and record how to take it back out."""
        self.queue.insert(task)
        self.log.append(f"Added: {task.title}")
        self.history.record(UndoAction(ActionKind.ADD, task))
        return task

    def complete_task(self) -> Task | None:
        """Complete the most urgent task. Returns None if nothing is pending."""
        task = self.queue.extract_min()
        if task is None:
            return None
        self.recent.record(task)
        self.log.append(f"Completed: {task.title}")
        self.history.record(UndoAction(ActionKind.COMPLETE, task))
        return task

    def undo(self) -> str:
        """Revert the last mutation. Returns the resulting status message."""
        action = self.history.undo()
        if action is None:
            return "Nothing to undo."
        return self._apply(action, revert=True)

    def redo(self) -> str:
        """Reapply the last undone mutation. Returns the status message."""
        action = self.history.redo()
        if action is None:
            return "Nothing to redo."
        return self._apply(action, revert=False)

    def _apply(self, action: UndoAction, revert: bool) -> str:
        task = action.task
        if action.kind is ActionKind.ADD:
            if revert:
                self.queue.remove(task)
                message = f"Undo add: {task.title}"
            else:
                self.queue.insert(task)
                message = f"Redo add: {task.title}"
        elif action.kind is ActionKind.COMPLETE:
            if revert:
                self.queue.insert(task)
                self.recent.retract(task)
                message = f"Undo complete: {task.title}"
            else:
                self.queue.remove(task)
                self.recent.record(task)
                message = f"Redo complete: {task.title}"
        else:
            raise ValueError(f"Unknown action kind: {action.kind}")
        self.log.append(message)
        return message

    def list_tasks(self) -> list[Task]:
        """Pending tasks sorted by priority."""
        return self.queue.snapshot_sorted()

    def show_log(self) -> list[LogEntry]:
        """The full activity log, oldest first."""
        return self.log.entries()

    def search_subtasks(self, title: str) -> Task | None:
        """Find a task or nested subtask by title across all pending tasks."""
        for task in self.queue:
            found = task.find_subtask(title)
            if found is not None:
                return found
        return None

    def add_subtask(self, parent_title: str, sub: Task) -> Task | None:
        """Attach ``sub`` under the first task titled ``parent_title``.

        Subtasks are never removed, so this is not recorded for undo.
        """
        parent = self.search_subtasks(parent_title)
        if parent is None:
            return None
        parent.add_subtask(sub)
        self.log.append(f"Added subtask: {sub.title} -> {parent.title}")
        return sub

    def recent_completed(self) -> list[Task]:
        """Recently completed tasks, oldest first."""
        return self.recent.items()
