"""Journal error types."""

from pathlib import Path


class JournalError(Exception):
    """Base class for journal failures."""

    pass


class CorruptJournalError(JournalError):
    """Raised when journal content is not empty and not a JSON array of tasks."""

    def __init__(self, reason: str, path: Path | None = None):
        self.reason = reason
        self.path = path
        where = f" in {path}" if path else ""
        super().__init__(f"Corrupt journal{where}: {reason}")


class InvalidPositionError(JournalError):
    """Raised when a task position is outside 1..length."""

    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        if length:
            msg = f"Invalid task position {position} (journal has {length} task(s))"
        else:
            msg = f"Invalid task position {position} (journal is empty)"
        super().__init__(msg)
