"""Tests for core task logic."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from taskjournal.core.errors import CorruptJournalError
from taskjournal.core.tasks import (
    Task,
    decode_tasks,
    encode_tasks,
    format_task_line,
)


# Fixtures
@pytest.fixture
def now():
    return datetime(2025, 1, 15, 9, 30, 12, tzinfo=timezone.utc)


@pytest.fixture
def sample_tasks(now):
    return [
        Task("Write report", now),
        Task("", now + timedelta(minutes=5)),
        Task("Call the bank ✓", now + timedelta(hours=2)),
    ]


class TestTask:
    def test_drops_subsecond_precision(self, now):
        task = Task("x", now.replace(microsecond=987654))
        assert task.created_at == now

    def test_naive_datetime_treated_as_utc(self):
        task = Task("x", datetime(2025, 1, 15, 9, 30))
        assert task.created_at.tzinfo == timezone.utc
        assert task.created_at.hour == 9

    def test_aware_datetime_converted_to_utc(self):
        tz = timezone(timedelta(hours=-5))
        task = Task("x", datetime(2025, 1, 15, 4, 30, tzinfo=tz))
        assert task.created_at == datetime(2025, 1, 15, 9, 30, tzinfo=timezone.utc)

    def test_new_uses_injected_now(self, now):
        assert Task.new("hello", now=now) == Task("hello", now)

    def test_new_defaults_to_current_time(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        task = Task.new("hello")
        assert before <= task.created_at <= datetime.now(timezone.utc)

    def test_is_immutable(self, now):
        task = Task("x", now)
        with pytest.raises(AttributeError):
            task.created_at = now + timedelta(days=1)

    def test_to_dict(self, now):
        assert Task("Write report", now).to_dict() == {
            "text": "Write report",
            "created_at": 1736933412,
        }

    def test_from_dict(self, now):
        task = Task.from_dict({"text": "Write report", "created_at": 1736933412})
        assert task == Task("Write report", now)

    def test_from_dict_ignores_extra_keys(self, now):
        task = Task.from_dict({"text": "a", "created_at": 1736933412, "extra": 1})
        assert task == Task("a", now)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "text",
            {"created_at": 1},
            {"text": 5, "created_at": 1},
            {"text": "a"},
            {"text": "a", "created_at": "2025-01-15"},
            {"text": "a", "created_at": 1.5},
            {"text": "a", "created_at": True},
        ],
    )
    def test_from_dict_rejects_bad_shapes(self, data):
        with pytest.raises(ValueError):
            Task.from_dict(data)


class TestCodec:
    def test_round_trip(self, sample_tasks):
        assert decode_tasks(encode_tasks(sample_tasks)) == sample_tasks

    def test_encode_is_json_array(self, sample_tasks):
        data = json.loads(encode_tasks(sample_tasks))
        assert isinstance(data, list)
        assert [d["text"] for d in data] == ["Write report", "", "Call the bank ✓"]
        assert all(isinstance(d["created_at"], int) for d in data)

    def test_encode_empty(self):
        assert encode_tasks([]) == "[]"

    @pytest.mark.parametrize("raw", ["", "   ", "\n"])
    def test_decode_empty_content(self, raw):
        assert decode_tasks(raw) == []

    def test_decode_empty_array(self):
        assert decode_tasks("[]") == []

    @pytest.mark.parametrize(
        "raw",
        [
            "not-json",
            '"not-json"',
            '{"text": "a", "created_at": 1}',
            "[1, 2]",
            '[{"text": "a", "created_at": 1}',
            '[{"text": "a"}]',
            "[" * 100000 + "]" * 100000,
        ],
    )
    def test_decode_corrupt(self, raw):
        with pytest.raises(CorruptJournalError):
            decode_tasks(raw)

    def test_decode_reports_bad_entry_index(self):
        raw = '[{"text": "a", "created_at": 1}, {"text": "b"}]'
        with pytest.raises(CorruptJournalError, match="entry 1"):
            decode_tasks(raw)


class TestFormatTaskLine:
    def test_utc(self, now):
        line = format_task_line(1, Task("Write report", now), timezone.utc)
        assert line == f"1: {'Write report':<50} [2025-01-15 09:30]"

    def test_converts_to_given_timezone(self, now):
        tz = timezone(timedelta(hours=-5))
        line = format_task_line(3, Task("Write report", now), tz)
        assert line.startswith("3: Write report")
        assert line.endswith("[2025-01-15 04:30]")

    def test_long_text_not_truncated(self, now):
        text = "x" * 80
        line = format_task_line(1, Task(text, now), timezone.utc)
        assert text in line

    def test_defaults_to_local_time(self, now):
        task = Task("a", now)
        local = now.astimezone().strftime("%Y-%m-%d %H:%M")
        assert format_task_line(1, task).endswith(f"[{local}]")
