# src/todoz/ui/main_window.py
# Rev 0.1.0
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QCheckBox,
    QTableView, QHeaderView, QMessageBox, QDialog, QAbstractItemView
)

from todoz.models.entities import Task
from todoz.repositories.task_file_store import TaskFileStore
from todoz.ui.task_editor_dialog import TaskEditorDialog
from todoz.viewmodels.task_filter_proxy import DoneFilterProxyModel
from todoz.viewmodels.task_table_model import COL_DONE, COL_DUE, COL_PRIORITY, COL_TITLE
from todoz.viewmodels.tasks_viewmodel import TasksViewModel

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: TaskFileStore, settings: Optional[Dict[str, Any]] = None, parent=None):
        super().__init__(parent)
        settings = settings or {}
        self.setWindowTitle("todoZ")
        geo = settings.get("main_window", {})
        self.resize(geo.get("width", 600), geo.get("height", 400))

        self._vm = TasksViewModel(store, self)
        self._vm.persistFailed.connect(self._on_persist_failed)

        self._proxy = DoneFilterProxyModel(self)
        self._proxy.setSourceModel(self._vm.table_model)

        # ---------- Table: Done | Title | Due | Priority ----------
        self._table = QTableView(self)
        self._table.setModel(self._proxy)
        self._table.setSortingEnabled(True)
        self._table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self._table.setSelectionMode(QAbstractItemView.SingleSelection)
        self._table.setAlternatingRowColors(True)
        self._table.verticalHeader().setVisible(False)
        self._table.doubleClicked.connect(lambda _ix: self._on_edit())

        hdr = self._table.horizontalHeader()
        hdr.setSectionResizeMode(COL_DONE, QHeaderView.ResizeToContents)
        hdr.setSectionResizeMode(COL_TITLE, QHeaderView.Stretch)
        hdr.setSectionResizeMode(COL_DUE, QHeaderView.ResizeToContents)
        hdr.setSectionResizeMode(COL_PRIORITY, QHeaderView.ResizeToContents)

        # ---------- Controls ----------
        self._btn_add = QPushButton("Add")
        self._btn_edit = QPushButton("Edit")
        self._btn_delete = QPushButton("Delete")
        self._chk_hide_done = QCheckBox("Hide completed")
        self._chk_hide_done.setChecked(bool(settings.get("ui", {}).get("hide_done")))
        self._proxy.set_hide_done(self._chk_hide_done.isChecked())

        self._btn_add.clicked.connect(self._on_add)
        self._btn_edit.clicked.connect(self._on_edit)
        self._btn_delete.clicked.connect(self._on_delete)
        self._chk_hide_done.toggled.connect(self._proxy.set_hide_done)

        bar = QHBoxLayout()
        bar.addWidget(self._btn_add)
        bar.addWidget(self._btn_edit)
        bar.addWidget(self._btn_delete)
        bar.addStretch(1)
        bar.addWidget(self._chk_hide_done)

        central = QWidget(self)
        root = QVBoxLayout(central)
        root.addWidget(self._table, 1)
        root.addLayout(bar)
        self.setCentralWidget(central)

    def hide_done(self) -> bool:
        return self._chk_hide_done.isChecked()

    # ---- selection
    def _selected_task(self) -> Optional[Task]:
        rows = self._table.selectionModel().selectedRows()
        if not rows:
            return None
        src = self._proxy.mapToSource(rows[0])
        return self._vm.table_model.task_at(src.row())

    # ---- actions
    def _on_add(self) -> None:
        values = self._run_editor(None)
        if values is None:
            return
        self._vm.create_task(**values)
        self.statusBar().showMessage("Task added", 3000)

    def _on_edit(self) -> None:
        task = self._selected_task()
        if task is None:
            QMessageBox.information(self, "todoZ", "Select a task to edit.")
            return
        values = self._run_editor(task)
        if values is None:
            return
        self._vm.edit_task(task, **values)
        self.statusBar().showMessage("Task updated", 3000)

    def _on_delete(self) -> None:
        task = self._selected_task()
        if task is None:
            QMessageBox.information(self, "todoZ", "Select a task to delete.")
            return
        answer = QMessageBox.question(self, "Confirm", f"Delete task “{task.title}”?")
        if answer != QMessageBox.Yes:
            return
        self._vm.delete_task(task)
        self.statusBar().showMessage("Task deleted", 3000)

    def _run_editor(self, task: Optional[Task]) -> Optional[Dict[str, Any]]:
        dlg = TaskEditorDialog(self, task)
        while dlg.exec() == QDialog.Accepted:
            values = dlg.values()
            if not values["title"]:
                QMessageBox.critical(dlg, "Input error", "Please enter a task title.")
                continue
            if values["due_date"] is None:
                answer = QMessageBox.question(dlg, "Confirm", "No due date set. Save without one?")
                if answer != QMessageBox.Yes:
                    continue
            return values
        return None

    def _on_persist_failed(self, message: str) -> None:
        log.error("Persist failed: %s", message)
        QMessageBox.warning(self, "Save failed", f"Tasks could not be saved.\n\n{message}")
