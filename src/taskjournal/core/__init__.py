"""Functional core - pure business logic with no I/O."""

from .errors import CorruptJournalError, InvalidPositionError, JournalError
from .tasks import Task, decode_tasks, encode_tasks, format_task_line

__all__ = [
    # Tasks
    "Task",
    "encode_tasks",
    "decode_tasks",
    "format_task_line",
    # Errors
    "JournalError",
    "CorruptJournalError",
    "InvalidPositionError",
]
