# tests/test_task_entity.py
from __future__ import annotations

from datetime import date

import pytest

from todoz.models.entities import Task
from todoz.models.errors import MalformedRecord
from todoz.models.priority import Priority


def test_toggle_done_flips_flag():
    t = Task(1, "Buy milk")
    assert t.done is False
    t.toggle_done()
    assert t.done is True
    t.toggle_done()
    assert t.done is False


def test_id_is_immutable_and_positive():
    t = Task(3, "x")
    with pytest.raises(AttributeError):
        t.id = 4
    assert t.id == 3
    with pytest.raises(ValueError):
        Task(0, "zero")
    with pytest.raises(ValueError):
        Task(-2, "negative")


def test_is_due_today_uses_injected_clock():
    t = Task(1, "Pay rent", due_date=date(2025, 1, 10))
    assert t.is_due_today(clock=lambda: date(2025, 1, 10)) is True
    assert t.is_due_today(clock=lambda: date(2025, 1, 11)) is False
    assert Task(2, "No deadline").is_due_today(clock=lambda: date(2025, 1, 10)) is False


def test_to_line_plain_record():
    t = Task(1, "Buy milk", False, Priority.HIGH, date(2025, 1, 10))
    assert t.to_line() == "1,Buy milk,false,high,2025-01-10"
    assert Task(2, "Call Bob", True).to_line() == "2,Call Bob,true,,"


def test_to_line_flattens_line_breaks():
    t = Task(5, "first\nsecond\r\nthird")
    assert t.to_line() == "5,first second third,false,,"


@pytest.mark.parametrize("task", [
    Task(1, "Buy milk", False, Priority.HIGH, date(2025, 1, 10)),
    Task(2, "Call Bob", True),
    Task(7, "Taxes", False, Priority.LOW, None),
    Task(8, "", True, None, date(2024, 2, 29)),
    Task(9, "eggs, bread, butter", False, Priority.MEDIUM, date(2025, 3, 1)),
])
def test_line_round_trip(task):
    assert Task.from_line(task.to_line()) == task


def test_parse_line_keeps_trailing_empty_fields():
    t = Task.parse_line("2,Call Bob,true,,")
    assert (t.id, t.title, t.done, t.priority, t.due_date) == (2, "Call Bob", True, None, None)


def test_parse_line_accepts_display_labels_and_padded_id():
    t = Task.parse_line(" 4,Plan trip,TRUE,High,2025-06-01\r\n")
    assert t.id == 4
    assert t.done is True
    assert t.priority is Priority.HIGH
    assert t.due_date == date(2025, 6, 1)


@pytest.mark.parametrize("line", [
    "",
    "1,too,few,fields",
    "x,Title,false,,",
    "0,Title,false,,",
    "1,Title,false,urgent,",
    "1,Title,false,,2025-13-40",
    "1,Title,false,,tomorrow",
])
def test_malformed_lines(line):
    with pytest.raises(MalformedRecord):
        Task.parse_line(line)
    assert Task.from_line(line) is None


def test_str_shows_checkbox_and_due():
    assert str(Task(1, "Buy milk", True, Priority.HIGH, date(2025, 1, 10))).startswith("[✓] Buy milk")
    assert str(Task(2, "Call Bob")).endswith("Due: none")


def test_apply_replaces_all_mutable_fields():
    t = Task(1, "old", False, Priority.LOW, None)
    t.apply(title="new", done=True, priority=None, due_date=date(2025, 5, 5))
    assert t == Task(1, "new", True, None, date(2025, 5, 5))
