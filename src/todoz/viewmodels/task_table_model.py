# Rev 0.1.0 — Done | Title | Due | Priority
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Sequence

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt, Signal

from todoz.models.entities import Task
from todoz.models.errors import IndexOutOfRange
from todoz.models.priority import Priority

log = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
SORT_ROLE = Qt.ItemDataRole.UserRole + 1

COL_DONE, COL_TITLE, COL_DUE, COL_PRIORITY = range(4)


# ---- per-column handlers; setters return True when the task changed
def _get_done(task: Task) -> Any:
    return task.done

def _set_done(task: Task, value: Any) -> bool:
    if not isinstance(value, bool):
        return False
    task.done = value
    return True

def _get_title(task: Task) -> Any:
    return task.title

def _set_title(task: Task, value: Any) -> bool:
    if value is None:
        return False
    task.title = str(value)
    return True

def _get_due(task: Task) -> Any:
    return task.due_date.strftime(DATE_FORMAT) if task.due_date else ""

def _set_due(task: Task, value: Any) -> bool:
    if value is None or (isinstance(value, str) and not value.strip()):
        task.due_date = None
        return True
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        task.due_date = value
        return True
    try:
        task.due_date = date.fromisoformat(str(value).strip())
    except ValueError:
        log.warning("Invalid date format: %r", value)
        return False
    return True

def _get_priority(task: Task) -> Any:
    return task.priority

def _set_priority(task: Task, value: Any) -> bool:
    if not isinstance(value, Priority):
        return False
    task.priority = value
    return True


@dataclass(frozen=True)
class _Column:
    name: str
    kind: type
    get: Callable[[Task], Any]
    set: Callable[[Task, Any], bool]
    sort_key: Callable[[Task], Any]


_COLUMNS: Sequence[_Column] = (
    _Column("Done", bool, _get_done, _set_done, lambda t: t.done),
    _Column("Title", str, _get_title, _set_title, lambda t: t.title.casefold()),
    # undated tasks sort last
    _Column("Due", date, _get_due, _set_due, lambda t: t.due_date.isoformat() if t.due_date else "9999-12-31"),
    _Column("Priority", Priority, _get_priority, _set_priority, lambda t: t.priority.rank if t.priority else 0),
)


class TaskTableModel(QAbstractTableModel):
    """
    Table model over a private copy of a task list.

    The copy is only replaced by set_tasks() (which resets the model); the
    Task objects themselves are shared with whoever supplied them, so a cell
    edit changes the caller's Task but never the caller's list.
    Only the Done column is editable in place.
    """

    cellEdited = Signal(int, int)  # row, column

    def __init__(self, tasks: Sequence[Task] = (), parent=None):
        super().__init__(parent)
        self._tasks: List[Task] = list(tasks)

    def set_tasks(self, tasks: Sequence[Task]) -> None:
        self.beginResetModel()
        self._tasks = list(tasks)
        self.endResetModel()

    # ---- plain accessors
    def row_count(self) -> int:
        return len(self._tasks)

    def column_count(self) -> int:
        return len(_COLUMNS)

    def column_name(self, column: int) -> str:
        col = self._column(column)
        return self.tr(col.name) if col else ""

    def column_kind(self, column: int) -> Optional[type]:
        col = self._column(column)
        return col.kind if col else None

    def task_at(self, row: int) -> Task:
        if row < 0 or row >= len(self._tasks):
            raise IndexOutOfRange(row, len(self._tasks))
        return self._tasks[row]

    def value_at(self, row: int, column: int) -> Any:
        task = self.task_at(row)
        col = self._column(column)
        return col.get(task) if col else None

    def set_value_at(self, row: int, column: int, value: Any) -> bool:
        task = self.task_at(row)
        col = self._column(column)
        if col is None or not col.set(task, value):
            return False
        ix = self.index(row, column)
        self.dataChanged.emit(ix, ix, [])
        self.cellEdited.emit(row, column)
        return True

    def is_editable(self, row: int, column: int) -> bool:
        return column == COL_DONE

    # ---- Qt overrides
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else self.row_count()

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        return 0 if parent.isValid() else self.column_count()

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.ItemDataRole.DisplayRole):
        if role == Qt.ItemDataRole.DisplayRole and orientation == Qt.Orientation.Horizontal:
            return self.column_name(section)
        return None

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        if not index.isValid() or not (0 <= index.row() < len(self._tasks)):
            return None
        row, column = index.row(), index.column()
        task = self._tasks[row]

        if role == SORT_ROLE:
            col = self._column(column)
            return col.sort_key(task) if col else None
        if column == COL_DONE:
            if role == Qt.ItemDataRole.CheckStateRole:
                return Qt.CheckState.Checked if task.done else Qt.CheckState.Unchecked
            if role == Qt.ItemDataRole.EditRole:
                return task.done
            return None
        if role == Qt.ItemDataRole.DisplayRole:
            value = self.value_at(row, column)
            return value.label() if isinstance(value, Priority) else value
        if role == Qt.ItemDataRole.EditRole:
            return self.value_at(row, column)
        if role == Qt.ItemDataRole.ToolTipRole and column == COL_TITLE:
            return str(task)
        return None

    def setData(self, index: QModelIndex, value, role: int = Qt.ItemDataRole.EditRole) -> bool:
        if not index.isValid() or not self.is_editable(index.row(), index.column()):
            return False
        if role == Qt.ItemDataRole.CheckStateRole:
            value = _is_checked(value)
        elif role != Qt.ItemDataRole.EditRole:
            return False
        return self.set_value_at(index.row(), index.column(), value)

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        f = Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
        if self.is_editable(index.row(), index.column()):
            f |= Qt.ItemFlag.ItemIsUserCheckable
        return f

    @staticmethod
    def _column(column: int) -> Optional[_Column]:
        return _COLUMNS[column] if 0 <= column < len(_COLUMNS) else None


def _is_checked(value: Any) -> bool:
    if isinstance(value, Qt.CheckState):
        return value == Qt.CheckState.Checked
    return int(value) == Qt.CheckState.Checked.value
