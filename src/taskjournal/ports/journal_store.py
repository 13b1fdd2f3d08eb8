"""Journal storage interface."""

from contextlib import AbstractContextManager
from typing import IO, Protocol

from taskjournal.core.tasks import Task


class JournalStore(Protocol):
    """Interface for loading and rewriting a task journal."""

    def open(self, *, write: bool = False, create: bool = False) -> AbstractContextManager[IO[str]]:
        """Open and lock the journal. The handle is closed when the context exits."""
        ...

    def load(self, handle: IO[str]) -> list[Task]:
        """Read every task. Leaves the cursor at offset 0."""
        ...

    def store(self, handle: IO[str], tasks: list[Task]) -> None:
        """Replace the entire journal content with tasks."""
        ...
