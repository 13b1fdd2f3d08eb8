"""Journal operations shared by the CLI and library callers.

Each operation is a complete cycle over the file: open, load, mutate, store,
close. Nothing is cached between calls.
"""

import logging
from datetime import tzinfo
from pathlib import Path
from typing import Iterator

from .adapters.file_journal import FileJournalStore
from .core.errors import InvalidPositionError
from .core.tasks import Task, format_task_line
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)

EMPTY_MESSAGE = "Task list is empty!"


def get_store(path: Path | str) -> JournalStore:
    return FileJournalStore(path)


def add_task(path: Path | str, task: Task) -> None:
    """Append a task, creating the journal if it does not exist."""
    store = get_store(path)
    with store.open(write=True, create=True) as handle:
        tasks = store.load(handle)
        tasks.append(task)
        store.store(handle, tasks)
    logger.info(f"Added task #{len(tasks)}")


def complete_task(path: Path | str, position: int) -> Task:
    """
    Remove the task at a 1-based position and return it.

    The journal must already exist. An out-of-range position raises
    InvalidPositionError and leaves the file untouched.
    """
    store = get_store(path)
    with store.open(write=True) as handle:
        tasks = store.load(handle)
        if position < 1 or position > len(tasks):
            raise InvalidPositionError(position, len(tasks))
        removed = tasks.pop(position - 1)
        store.store(handle, tasks)
    logger.info(f"Completed task #{position}")
    return removed


def list_tasks(path: Path | str) -> Iterator[tuple[int, Task]] | None:
    """
    Load the journal and return (position, task) pairs in file order.

    Returns None when the journal is empty. The journal must already exist.
    """
    store = get_store(path)
    with store.open() as handle:
        tasks = store.load(handle)

    if not tasks:
        return None
    return ((position, task) for position, task in enumerate(tasks, start=1))


def render_tasks(path: Path | str, tz: tzinfo | None = None) -> Iterator[str]:
    """Yield display lines for the journal, or the empty-journal message."""
    entries = list_tasks(path)
    if entries is None:
        return iter([EMPTY_MESSAGE])
    return (format_task_line(position, task, tz) for position, task in entries)
