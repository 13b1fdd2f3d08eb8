"""taskjournal - a persistent task journal stored as a JSON file."""

from .core import CorruptJournalError, InvalidPositionError, JournalError, Task
from .journal import add_task, complete_task, list_tasks, render_tasks

__all__ = [
    "Task",
    "JournalError",
    "CorruptJournalError",
    "InvalidPositionError",
    "add_task",
    "complete_task",
    "list_tasks",
    "render_tasks",
]
