"""In-memory task engine: tasks, priority queue, activity log and recent ring."""

from tasktrack.task_engine.types import Task, LogEntry, User
from tasktrack.task_engine.activity import ActivityLog
from tasktrack.task_engine.queue import TaskQueue
from tasktrack.task_engine.recent import RecentCompletedRing

__all__ = [
    "Task",
    "LogEntry",
    "User",
    "ActivityLog",
    "TaskQueue",
    "RecentCompletedRing",
]
