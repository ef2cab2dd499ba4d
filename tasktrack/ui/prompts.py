"""prompt_toolkit input configuration."""

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from tasktrack.config import COMMANDS


def create_prompt_session() -> PromptSession:
    """Create a configured prompt_toolkit session.

    History is kept in memory only; nothing survives the process.
    """
    return PromptSession(
        history=InMemoryHistory(),
        completer=WordCompleter(COMMANDS, ignore_case=True),
        complete_while_typing=False,
        multiline=False,
    )


def get_prompt_text(username: str) -> str:
    """Build the command prompt string showing the logged in user."""
    return f"{username} > "
