"""Diagnostic logging for tasktrack.

Provides:
- JSON file handler with rotation (only when a log file is configured)
- Console handler on stderr respecting verbose mode

This is separate from the in-app activity log shown by the ``log`` command.
"""

import json
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path

# Maximum log file size (5 MB) and backup count
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        # Include extra fields
        for key in ("command", "task_title", "priority"):
            if hasattr(record, key):
                entry[key] = getattr(record, key)
        return json.dumps(entry)


def setup_logging(verbose: bool = False, log_file: str | Path | None = None) -> None:
    """Configure the ``tasktrack`` logger.

    - File handler: JSON lines to ``log_file`` (with rotation), if given
    - Console handler: only if verbose=True, DEBUG+ level on stderr
    """
    root = logging.getLogger("tasktrack")
    root.setLevel(logging.DEBUG)

    # Remove existing handlers (idempotent)
    root.handlers.clear()
    root.addHandler(logging.NullHandler())

    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            str(path),
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        root.addHandler(file_handler)

    if verbose:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
        root.addHandler(console_handler)
