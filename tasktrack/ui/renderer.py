"""Rich-based terminal UI rendering."""

from datetime import datetime

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from tasktrack.config import TIMESTAMP_FORMAT
from tasktrack.task_engine import LogEntry, Task


console = Console()


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ``yyyy-MM-dd HH:mm:ss``."""
    return value.strftime(TIMESTAMP_FORMAT)


def show_welcome(username: str):
    """Display welcome banner."""
    console.print()
    console.print(
        Panel(
            f"[bold cyan]tasktrack[/bold cyan] - Priority Task Tracker\n"
            f"Logged in as [green]{escape(username)}[/green]\n"
            f"Type [bold]help[/bold] for commands, [bold]exit[/bold] or [bold]Ctrl+D[/bold] to quit",
            border_style="cyan",
            padding=(1, 2),
        )
    )
    console.print()


def show_help():
    """Display help table."""
    table = Table(title="Commands", border_style="dim")
    table.add_column("Command", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_row("add", "Add a task (prompts for title and priority)")
    table.add_row("next", "Complete the most urgent task")
    table.add_row("undo", "Undo the last add or completion")
    table.add_row("redo", "Redo the last undone action")
    table.add_row("list", "List pending tasks by priority")
    table.add_row("log", "Show the activity log")
    table.add_row("search", "Find a task or subtask by title")
    table.add_row("sub", "Add a subtask under an existing task")
    table.add_row("recent", "Show recently completed tasks")
    table.add_row("help", "Show this help message")
    table.add_row("exit", "Exit tasktrack")
    console.print(table)
    console.print()


def show_tasks(tasks: list[Task]):
    """Display pending tasks in priority order."""
    if not tasks:
        console.print("No pending tasks.")
        return
    console.print("Pending tasks:")
    table = Table(border_style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Priority", justify="right")
    table.add_column("Added", style="dim", no_wrap=True)
    table.add_column("Subtasks", justify="right", style="dim")
    for task in tasks:
        table.add_row(
            escape(task.title),
            str(task.priority),
            format_timestamp(task.added_time),
            str(len(task.subtasks)) if task.subtasks else "",
        )
    console.print(table)


def show_log(entries: list[LogEntry]):
    """Display the activity log, oldest first."""
    if not entries:
        console.print("[dim]Activity log is empty.[/dim]")
        return
    for entry in entries:
        console.print(f"[dim]{format_timestamp(entry.timestamp)}[/dim] - {escape(entry.action)}")


def show_recent(tasks: list[Task], capacity: int):
    """Display recently completed tasks, oldest first."""
    if not tasks:
        console.print("No completed tasks yet.")
        return
    console.print(f"Recently completed (last {capacity}):")
    for i, task in enumerate(tasks, 1):
        console.print(f"  {i}. {escape(task.title)} [dim](prior:{task.priority})[/dim]")


def show_completed(task: Task | None):
    """Display the result of completing the next task."""
    if task is None:
        console.print("No tasks to complete.")
    else:
        console.print(f"[green]Completed:[/green] {escape(task.title)}")


def show_search_result(title: str, found: Task | None):
    """Display the outcome of a subtask search."""
    if found is None:
        console.print(f"Not found: {escape(title)}")
    else:
        console.print(f"[green]Found:[/green] {escape(found.title)} [dim](prior:{found.priority})[/dim]")


def show_error(message: str):
    """Display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def show_info(message: str):
    """Display an info message."""
    console.print(escape(message))


def show_goodbye():
    console.print("[dim]Goodbye![/dim]")
