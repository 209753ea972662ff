# src/todoz/ui/task_editor_dialog.py
# Rev 0.1.0
from __future__ import annotations
from datetime import date
from typing import Any, Dict, Optional

from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QLineEdit, QCheckBox,
    QDialogButtonBox, QComboBox, QDateEdit, QHBoxLayout, QWidget
)

from todoz.models.entities import Task
from todoz.models.priority import Priority


class TaskEditorDialog(QDialog):
    """
    Values returned (see values()):
      title: str
      done: bool
      priority: Priority | None
      due_date: date | None

    Passing a task pre-fills the form (edit mode); the task itself is not touched.
    """

    def __init__(self, parent: QWidget | None = None, task: Optional[Task] = None):
        super().__init__(parent)
        self.setWindowTitle("Edit Task" if task else "New Task")

        # --- fields
        self._title = QLineEdit(task.title if task else "")
        self._done = QCheckBox("Completed")
        self._done.setChecked(bool(task and task.done))

        self._cmb_priority = QComboBox()
        self._cmb_priority.addItem("(none)", None)
        for p in Priority:
            self._cmb_priority.addItem(p.label(), p)
        ix = self._cmb_priority.findData(task.priority if task else None)
        self._cmb_priority.setCurrentIndex(max(ix, 0))

        self._due = QDateEdit()
        self._due.setCalendarPopup(True)
        self._due.setDisplayFormat("yyyy-MM-dd")
        self._no_due = QCheckBox("No due date")
        due = task.due_date if task else None
        self._due.setDate(_to_qdate(due or date.today()))
        self._no_due.setChecked(task is not None and due is None)
        self._due.setEnabled(not self._no_due.isChecked())
        self._no_due.toggled.connect(lambda on: self._due.setEnabled(not on))

        due_row = QHBoxLayout()
        due_row.addWidget(self._due, 1)
        due_row.addWidget(self._no_due)

        form = QFormLayout()
        form.addRow("Title:", self._title)
        form.addRow("Due:", due_row)
        form.addRow("Priority:", self._cmb_priority)
        form.addRow("", self._done)

        buttons = QDialogButtonBox(QDialogButtonBox.Save | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def values(self) -> Dict[str, Any]:
        return {
            "title": self._title.text().strip(),
            "done": self._done.isChecked(),
            "priority": self._cmb_priority.currentData(),
            "due_date": None if self._no_due.isChecked() else self._due.date().toPython(),
        }


def _to_qdate(d: date) -> QDate:
    return QDate(d.year, d.month, d.day)
