"""Configuration constants and AppConfig dataclass."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

# Base directory for optional tasktrack files (config, logs). Nothing is
# written here unless a log file is requested.
DATA_DIR = Path.home() / ".tasktrack"
CONFIG_FILE = DATA_DIR / "config.toml"

# Display format for every timestamp shown to the user
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# Capacity of the recently completed ring
RECENT_CAPACITY = 10

# Seeded credentials (plain text, not a hash)
DEFAULT_USERS: dict[str, str] = {"alice": "1234"}

COMMANDS = ["add", "next", "undo", "redo", "list", "log", "search", "sub", "recent", "help", "exit"]


class ConfigError(ValueError):
    """Raised when the config file is unreadable or has bad values."""


def load_config_file(path: Path = CONFIG_FILE) -> dict:
    """Load settings from a TOML file. Returns empty dict if not found."""
    if not path.exists():
        return {}
    try:
        return tomllib.loads(path.read_text())
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e


@dataclass
class AppConfig:
    """Runtime configuration for the application."""

    recent_capacity: int = RECENT_CAPACITY
    undo_limit: int = 0  # 0 means unlimited
    users: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_USERS))
    verbose: bool = False
    log_file: str | None = None

    def __post_init__(self):
        if not isinstance(self.recent_capacity, int) or self.recent_capacity < 1:
            raise ConfigError(f"recent_capacity must be a positive integer, got {self.recent_capacity!r}")
        if not isinstance(self.undo_limit, int) or self.undo_limit < 0:
            raise ConfigError(f"undo_limit must be a non-negative integer, got {self.undo_limit!r}")
        if not self.users or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in self.users.items()
        ):
            raise ConfigError("users must be a non-empty table of username = \"credential\"")

    @classmethod
    def from_file_and_cli(cls, cli_overrides: dict, path: Path = CONFIG_FILE) -> "AppConfig":
        """Create AppConfig by merging config file defaults with CLI overrides.

        Priority: CLI flags > config.toml > dataclass defaults
        """
        file_config = load_config_file(path)

        merged: dict = {}
        for name in ("recent_capacity", "undo_limit", "users", "verbose", "log_file"):
            if name in file_config:
                merged[name] = file_config[name]

        # CLI overrides take priority (only non-None values)
        for key, value in cli_overrides.items():
            if value is not None:
                merged[key] = value

        return cls(**merged)
