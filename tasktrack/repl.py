"""Main REPL orchestration - connects input, the task manager, and display."""

from __future__ import annotations

import logging

from tasktrack.config import AppConfig
from tasktrack.task_engine import Task
from tasktrack.task_manager import TaskManager
from tasktrack.ui import renderer
from tasktrack.ui.prompts import create_prompt_session, get_prompt_text

logger = logging.getLogger(__name__)


class REPL:
    """Interactive command loop over a single TaskManager."""

    def __init__(self, manager: TaskManager, config: AppConfig | None = None,
                 prompt_session=None):
        self.manager = manager
        self.config = config or AppConfig()
        self.prompt_session = prompt_session or create_prompt_session()
        self.username = ""
        self._running = True

    def _ask(self, prompt: str, password: bool = False) -> str:
        return self.prompt_session.prompt(prompt, is_password=password)

    def login(self) -> bool:
        """Prompt for credentials once. No retry on failure."""
        try:
            username = self._ask("Username: ").strip()
            credential = self._ask("Password: ", password=True)
        except (EOFError, KeyboardInterrupt):
            return False
        if not self.manager.login(username, credential):
            return False
        self.username = username
        return True

    def _read_task(self, title_prompt: str = "Title: ") -> Task | None:
        """Prompt for a title and priority. Returns None on invalid input."""
        title = self._ask(title_prompt).strip()
        if not title:
            renderer.show_error("Title must not be empty.")
            return None
        raw = self._ask("Priority (int): ").strip()
        try:
            priority = int(raw)
        except ValueError:
            renderer.show_error(f"Priority must be an integer, got {raw!r}.")
            return None
        return Task(title, self.manager.now(), priority)

    def handle_command(self, text: str) -> bool:
        """Run one command. Returns False when the loop should stop."""
        cmd = text.strip().lower()
        logger.debug("Command: %s", cmd, extra={"command": cmd})

        if cmd == "add":
            task = self._read_task()
            if task is not None:
                self.manager.add_task(task)
                renderer.show_info(f"Added: {task.title}")

        elif cmd == "next":
            renderer.show_completed(self.manager.complete_task())

        elif cmd == "undo":
            renderer.show_info(self.manager.undo())

        elif cmd == "redo":
            renderer.show_info(self.manager.redo())

        elif cmd == "list":
            renderer.show_tasks(self.manager.list_tasks())

        elif cmd == "log":
            renderer.show_log(self.manager.show_log())

        elif cmd == "search":
            title = self._ask("Search title: ").strip()
            renderer.show_search_result(title, self.manager.search_subtasks(title))

        elif cmd == "sub":
            parent_title = self._ask("Parent title: ").strip()
            sub = self._read_task("Subtask title: ")
            if sub is not None:
                if self.manager.add_subtask(parent_title, sub) is None:
                    renderer.show_info(f"Not found: {parent_title}")
                else:
                    renderer.show_info(f"Added subtask: {sub.title}")

        elif cmd == "recent":
            renderer.show_recent(self.manager.recent_completed(), self.manager.recent.capacity)

        elif cmd == "help":
            renderer.show_help()

        elif cmd in ("exit", "quit"):
            return False

        else:
            renderer.show_info("Unknown command.")

        return True

    def run(self) -> None:
        """Main REPL loop. Call after a successful login."""
        renderer.show_welcome(self.username)

        while self._running:
            try:
                user_input = self.prompt_session.prompt(get_prompt_text(self.username)).strip()

                if not user_input:
                    continue

                self._running = self.handle_command(user_input)

            except KeyboardInterrupt:
                renderer.console.print()
                continue
            except EOFError:
                # Ctrl+D
                renderer.console.print()
                break
            except Exception as e:
                logger.exception("Command failed: %s", e)
                renderer.show_error(f"Unexpected error: {e}")
                continue

        renderer.show_goodbye()
