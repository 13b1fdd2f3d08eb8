"""Pure task domain logic - no I/O dependencies."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Iterable

from .errors import CorruptJournalError

TEXT_WIDTH = 50


@dataclass(frozen=True)
class Task:
    """A journal entry: free text plus a UTC creation timestamp."""

    text: str
    created_at: datetime

    def __post_init__(self):
        # Stored form is whole seconds, so drop anything finer up front.
        created = self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        created = created.astimezone(timezone.utc).replace(microsecond=0)
        object.__setattr__(self, "created_at", created)

    @classmethod
    def new(cls, text: str, now: datetime | None = None) -> "Task":
        """Create a task stamped with the current UTC time."""
        return cls(text=text, created_at=now or datetime.now(timezone.utc))

    @property
    def timestamp(self) -> int:
        """Seconds since the Unix epoch."""
        return int(self.created_at.timestamp())

    def to_dict(self) -> dict:
        return {"text": self.text, "created_at": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its stored JSON object."""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        text = data.get("text")
        if not isinstance(text, str):
            raise ValueError("'text' must be a string")
        created_at = data.get("created_at")
        # bool is an int subclass
        if not isinstance(created_at, int) or isinstance(created_at, bool):
            raise ValueError("'created_at' must be integer seconds")
        try:
            created = datetime.fromtimestamp(created_at, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"'created_at' out of range: {created_at}") from e
        return cls(text=text, created_at=created)


def encode_tasks(tasks: Iterable[Task]) -> str:
    """Serialize tasks as a single JSON array."""
    return json.dumps([t.to_dict() for t in tasks])


def decode_tasks(raw: str) -> list[Task]:
    """
    Parse journal content.

    Empty (or whitespace-only) content is an empty journal. Anything that is
    not a JSON array of task objects raises CorruptJournalError.
    """
    if not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CorruptJournalError(f"invalid JSON ({e})") from e
    except RecursionError as e:
        raise CorruptJournalError("JSON nested too deeply") from e

    if not isinstance(data, list):
        raise CorruptJournalError(f"expected a JSON array, got {type(data).__name__}")

    tasks = []
    for index, item in enumerate(data):
        try:
            tasks.append(Task.from_dict(item))
        except ValueError as e:
            raise CorruptJournalError(f"entry {index}: {e}") from e
    return tasks


def format_task_line(position: int, task: Task, tz: tzinfo | None = None) -> str:
    """Format a task for display, with the timestamp in local time."""
    created = task.created_at.astimezone(tz)
    return f"{position}: {task.text:<{TEXT_WIDTH}} [{created.strftime('%Y-%m-%d %H:%M')}]"
