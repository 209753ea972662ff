# Rev 0.1.0 — store commands + persist + table refresh
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from PySide6.QtCore import QObject, Signal

from todoz.models.entities import Task
from todoz.models.priority import Priority
from todoz.repositories.task_file_store import TaskFileStore
from todoz.viewmodels.task_table_model import TaskTableModel

log = logging.getLogger(__name__)


class TasksViewModel(QObject):
    tasksReloaded = Signal(int)
    persistFailed = Signal(str)

    def __init__(self, store: TaskFileStore, parent=None):
        super().__init__(parent)
        self._store = store
        self._table = TaskTableModel(store.list_tasks(), self)
        # in-place cell edits go through the same persist hook as dialog edits
        self._table.cellEdited.connect(self._on_cell_edited)

    @property
    def store(self) -> TaskFileStore:
        return self._store

    @property
    def table_model(self) -> TaskTableModel:
        return self._table

    # ---- queries
    def reload(self) -> None:
        self._table.set_tasks(self._store.list_tasks())
        self.tasksReloaded.emit(self._table.row_count())

    # ---- commands
    def create_task(self, title: str, done: bool = False, priority: Optional[Priority] = None, due_date: Optional[date] = None) -> Task:
        title = self._clean_title(title)
        task = self._store.new_task(title, done, priority, due_date)
        self._store.add_task(task)
        log.info("Created task %d", task.id)
        self._persist()
        self.reload()
        return task

    def edit_task(self, task: Task, *, title: str, done: bool, priority: Optional[Priority], due_date: Optional[date]) -> Task:
        title = self._clean_title(title)
        self._store.update_task(task, title=title, done=done, priority=priority, due_date=due_date)
        log.info("Edited task %d", task.id)
        self._persist()
        self.reload()
        return task

    def delete_task(self, task: Task) -> bool:
        ok = self._store.remove_task(task)
        if ok:
            log.info("Deleted task %d", task.id)
            self._persist()
            self.reload()
        return ok

    def toggle_task(self, index: int) -> Task:
        task = self._store.toggle_task(index)
        if self._store.last_error is not None:
            self.persistFailed.emit(str(self._store.last_error))
        self.reload()
        return task

    # ---- internals
    @staticmethod
    def _clean_title(title: Optional[str]) -> str:
        title = (title or "").strip()
        if not title:
            raise ValueError("Task title must not be empty")
        return title

    def _on_cell_edited(self, row: int, column: int) -> None:
        log.debug("Cell edited: row=%d column=%d", row, column)
        self._persist()

    def _persist(self) -> bool:
        ok = self._store.save()
        if not ok:
            self.persistFailed.emit(str(self._store.last_error))
        return ok
