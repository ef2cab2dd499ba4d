"""tasktrack - interactive priority task tracker. Entry point."""

import sys
from pathlib import Path

import click

from tasktrack.config import CONFIG_FILE, AppConfig, ConfigError
from tasktrack.logging_config import setup_logging
from tasktrack.repl import REPL
from tasktrack.task_manager import TaskManager
from tasktrack.ui import renderer


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging on stderr")
@click.option("--log-file", default=None, help="Write JSON debug logs to this file")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              default=CONFIG_FILE, show_default=True, help="Config file (read only if present)")
@click.option("--recent-capacity", type=click.IntRange(min=1), default=None,
              help="How many completed tasks to remember")
@click.version_option(package_name="tasktrack")
def main(verbose: bool, log_file: str | None, config_path: Path, recent_capacity: int | None):
    """tasktrack - track tasks by priority with undo/redo."""
    try:
        config = AppConfig.from_file_and_cli(
            {
                "verbose": verbose or None,
                "log_file": log_file,
                "recent_capacity": recent_capacity,
            },
            path=config_path,
        )
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    setup_logging(verbose=config.verbose, log_file=config.log_file)

    manager = TaskManager(config)
    repl = REPL(manager, config)

    if not repl.login():
        renderer.console.print("Login failed.")
        sys.exit(1)

    repl.run()


if __name__ == "__main__":
    main()
