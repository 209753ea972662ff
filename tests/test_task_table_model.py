# tests/test_task_table_model.py
from __future__ import annotations

from datetime import date, datetime

import pytest
from PySide6.QtCore import Qt

from todoz.models.entities import Task
from todoz.models.errors import IndexOutOfRange
from todoz.models.priority import Priority
from todoz.repositories.task_file_store import TaskFileStore
from todoz.viewmodels.task_table_model import (
    COL_DONE, COL_DUE, COL_PRIORITY, COL_TITLE, SORT_ROLE, TaskTableModel,
)


@pytest.fixture()
def tasks():
    return [
        Task(1, "Buy milk", False, Priority.HIGH, date(2025, 1, 10)),
        Task(2, "Call Bob", True),
    ]


@pytest.fixture()
def model(tasks):
    return TaskTableModel(tasks)


@pytest.fixture()
def edits(model):
    seen = []
    model.cellEdited.connect(lambda r, c: seen.append((r, c)))
    return seen


def test_shape_and_metadata(model):
    assert model.row_count() == 2
    assert model.column_count() == 4
    assert [model.column_name(i) for i in range(4)] == ["Done", "Title", "Due", "Priority"]
    assert [model.column_kind(i) for i in range(4)] == [bool, str, date, Priority]
    assert model.column_name(9) == ""
    assert model.column_kind(9) is None


def test_value_at(model):
    assert model.value_at(0, COL_DONE) is False
    assert model.value_at(0, COL_TITLE) == "Buy milk"
    assert model.value_at(0, COL_DUE) == "2025-01-10"
    assert model.value_at(0, COL_PRIORITY) is Priority.HIGH
    assert model.value_at(1, COL_DUE) == ""
    assert model.value_at(1, COL_PRIORITY) is None
    assert model.value_at(0, 7) is None


@pytest.mark.parametrize("row", [-1, 2, 10])
def test_invalid_row_raises(model, row):
    with pytest.raises(IndexOutOfRange):
        model.value_at(row, COL_TITLE)
    with pytest.raises(IndexOutOfRange):
        model.set_value_at(row, COL_DONE, True)
    with pytest.raises(IndexOutOfRange):
        model.task_at(row)


def test_defensive_copy_both_ways(tasks):
    model = TaskTableModel(tasks)
    tasks.append(Task(3, "late"))
    assert model.row_count() == 2

    replacement = [Task(4, "only")]
    model.set_tasks(replacement)
    replacement.clear()
    assert model.row_count() == 1
    assert model.task_at(0).id == 4


def test_set_tasks_emits_reset(model):
    resets = []
    model.modelReset.connect(lambda: resets.append(True))
    model.set_tasks([])
    assert resets == [True]
    assert model.row_count() == 0


def test_task_at_shares_task_objects(model, tasks):
    assert model.task_at(1) is tasks[1]


def test_only_done_column_is_editable(model):
    assert model.is_editable(0, COL_DONE) is True
    assert [model.is_editable(0, c) for c in (COL_TITLE, COL_DUE, COL_PRIORITY)] == [False, False, False]


def test_set_done_bool_mutates_and_notifies(model, tasks, edits):
    changed = []
    model.dataChanged.connect(lambda tl, br, roles=None: changed.append((tl.row(), tl.column())))
    assert model.set_value_at(0, COL_DONE, True) is True
    assert tasks[0].done is True
    assert edits == [(0, COL_DONE)]
    assert changed == [(0, COL_DONE)]


@pytest.mark.parametrize("value", ["true", 1, None, "yes"])
def test_set_done_non_bool_is_ignored_without_notification(model, tasks, edits, value):
    assert model.set_value_at(0, COL_DONE, value) is False
    assert tasks[0].done is False
    assert edits == []


def test_set_title_stringifies(model, tasks, edits):
    assert model.set_value_at(1, COL_TITLE, 42) is True
    assert tasks[1].title == "42"
    assert model.set_value_at(1, COL_TITLE, None) is False
    assert tasks[1].title == "42"
    assert edits == [(1, COL_TITLE)]


def test_set_due_date(model, tasks, edits):
    assert model.set_value_at(1, COL_DUE, "2025-03-04") is True
    assert tasks[1].due_date == date(2025, 3, 4)
    assert model.set_value_at(1, COL_DUE, date(2025, 5, 6)) is True
    assert tasks[1].due_date == date(2025, 5, 6)
    assert model.set_value_at(1, COL_DUE, "   ") is True
    assert tasks[1].due_date is None
    assert edits == [(1, COL_DUE)] * 3


def test_set_due_datetime_keeps_calendar_date_through_save_and_load(tasks_file, store):
    store.add_task(store.new_task("a"))
    model = TaskTableModel(store.list_tasks())
    assert model.set_value_at(0, COL_DUE, datetime(2025, 1, 10, 9, 30)) is True
    assert type(store.list_tasks()[0].due_date) is date
    assert model.value_at(0, COL_DUE) == "2025-01-10"
    assert store.save() is True
    assert tasks_file.read_text(encoding="utf-8") == "1,a,false,,2025-01-10\n"

    fresh = TaskFileStore(tasks_file)
    assert len(fresh) == 1
    assert fresh.list_tasks()[0].due_date == date(2025, 1, 10)


def test_set_due_date_unparseable_is_logged_and_ignored(model, tasks, edits, caplog):
    assert model.set_value_at(0, COL_DUE, "next tuesday") is False
    assert tasks[0].due_date == date(2025, 1, 10)
    assert edits == []
    assert "Invalid date format" in caplog.text


def test_set_priority_requires_priority(model, tasks, edits):
    assert model.set_value_at(1, COL_PRIORITY, "high") is False
    assert tasks[1].priority is None
    assert model.set_value_at(1, COL_PRIORITY, Priority.LOW) is True
    assert tasks[1].priority is Priority.LOW
    assert edits == [(1, COL_PRIORITY)]


def test_edits_do_not_touch_callers_list(tasks):
    model = TaskTableModel(tasks)
    model.set_value_at(0, COL_DONE, True)
    assert len(tasks) == 2


# --- Qt surface --------------------------------------------------------------

def test_qt_counts_and_headers(model):
    assert model.rowCount() == 2
    assert model.columnCount() == 4
    assert model.headerData(COL_PRIORITY, Qt.Orientation.Horizontal) == "Priority"
    assert model.headerData(0, Qt.Orientation.Vertical) is None


def test_qt_data_roles(model):
    done_ix = model.index(1, COL_DONE)
    assert model.data(done_ix, Qt.ItemDataRole.CheckStateRole) == Qt.CheckState.Checked
    assert model.data(done_ix, Qt.ItemDataRole.DisplayRole) is None
    assert model.data(model.index(0, COL_PRIORITY)) == "High"
    assert model.data(model.index(0, COL_PRIORITY), Qt.ItemDataRole.EditRole) is Priority.HIGH
    assert model.data(model.index(0, COL_DUE)) == "2025-01-10"
    assert model.data(model.index(1, COL_DUE), SORT_ROLE) == "9999-12-31"
    assert model.data(model.index(0, COL_PRIORITY), SORT_ROLE) == Priority.HIGH.rank


def test_qt_set_data_check_state(model, tasks, edits):
    ix = model.index(0, COL_DONE)
    assert model.setData(ix, Qt.CheckState.Checked.value, Qt.ItemDataRole.CheckStateRole) is True
    assert tasks[0].done is True
    assert model.setData(ix, Qt.CheckState.Unchecked, Qt.ItemDataRole.CheckStateRole) is True
    assert tasks[0].done is False
    assert edits == [(0, COL_DONE), (0, COL_DONE)]


def test_qt_set_data_rejects_read_only_columns(model, tasks):
    assert model.setData(model.index(0, COL_TITLE), "changed") is False
    assert tasks[0].title == "Buy milk"


def test_qt_flags(model):
    assert model.flags(model.index(0, COL_DONE)) & Qt.ItemFlag.ItemIsUserCheckable
    assert not (model.flags(model.index(0, COL_TITLE)) & Qt.ItemFlag.ItemIsUserCheckable)
