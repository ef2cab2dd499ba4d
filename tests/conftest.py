"""Shared fixtures for tasktrack tests."""

import io
from datetime import datetime, timedelta

import pytest
from rich.console import Console

from tasktrack.config import AppConfig
from tasktrack.task_engine import Task
from tasktrack.task_manager import TaskManager
from tasktrack.ui import renderer


class FakeClock:
    """Deterministic clock that advances one second per call."""

    def __init__(self, start: datetime = datetime(2026, 3, 14, 9, 26, 53, 589793)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        return value


class ScriptedSession:
    """Stand-in for a prompt_toolkit session that replays canned input."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts: list[tuple[str, bool]] = []

    def prompt(self, message, is_password=False, **kwargs):
        self.prompts.append((message, is_password))
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException):
            raise line
        return line


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def manager(clock) -> TaskManager:
    """Fresh task manager with the default seeded user."""
    return TaskManager(AppConfig(), clock=clock)


@pytest.fixture
def make_task():
    """Build tasks with a fixed added time."""
    def _make(title: str, priority: int = 1) -> Task:
        return Task(title, datetime(2026, 1, 1, 12, 0, 0), priority)
    return _make


@pytest.fixture
def output(monkeypatch) -> io.StringIO:
    """Capture everything the renderer prints, without colors."""
    buf = io.StringIO()
    monkeypatch.setattr(
        renderer, "console",
        Console(file=buf, width=120, color_system=None, force_terminal=False),
    )
    return buf


@pytest.fixture
def scripted():
    """Factory for scripted prompt sessions."""
    return ScriptedSession
