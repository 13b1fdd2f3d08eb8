"""File-based journal storage adapter."""

import fcntl
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from taskjournal.core.errors import CorruptJournalError
from taskjournal.core.tasks import Task, decode_tasks, encode_tasks

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. The whole journal is one JSON array in a
    single file, rewritten in full on every mutation.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    @contextmanager
    def open(self, *, write: bool = False, create: bool = False) -> Iterator[IO[str]]:
        """
        Open the journal and hold an advisory lock until the handle closes.

        Writers take an exclusive lock, readers a shared one. Without `create`
        a missing file raises FileNotFoundError.
        """
        flags = os.O_RDWR if write else os.O_RDONLY
        if create:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            flags |= os.O_CREAT

        fd = os.open(self.path, flags, 0o644)
        handle = os.fdopen(fd, "r+" if write else "r", encoding="utf-8")
        with handle:
            fcntl.flock(handle.fileno(), fcntl.LOCK_EX if write else fcntl.LOCK_SH)
            logger.debug(f"Opened journal {self.path} (write={write})")
            try:
                yield handle
            finally:
                fcntl.flock(handle.fileno(), fcntl.LOCK_UN)

    def load(self, handle: IO[str]) -> list[Task]:
        """Read every task. Leaves the cursor at offset 0."""
        handle.seek(0)
        try:
            raw = handle.read()
        except UnicodeDecodeError as e:
            raise CorruptJournalError(f"invalid UTF-8 ({e})", self.path) from e
        finally:
            handle.seek(0)
        try:
            tasks = decode_tasks(raw)
        except CorruptJournalError as e:
            raise CorruptJournalError(e.reason, self.path) from e
        logger.debug(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def store(self, handle: IO[str], tasks: list[Task]) -> None:
        """Replace the entire journal content with tasks."""
        handle.seek(0)
        # Truncate first: a shorter array must not leave stale bytes behind.
        handle.truncate()
        handle.write(encode_tasks(tasks))
        handle.flush()
        os.fsync(handle.fileno())
        logger.debug(f"Stored {len(tasks)} task(s) to {self.path}")
