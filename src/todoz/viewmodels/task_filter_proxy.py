# Rev 0.1.0
from __future__ import annotations

from PySide6.QtCore import QModelIndex, QSortFilterProxyModel

from todoz.viewmodels.task_table_model import SORT_ROLE, TaskTableModel


class DoneFilterProxyModel(QSortFilterProxyModel):
    """Sort on SORT_ROLE keys; optionally hide completed tasks."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._hide_done = False
        self.setSortRole(SORT_ROLE)

    def hide_done(self) -> bool:
        return self._hide_done

    def set_hide_done(self, hide: bool) -> None:
        if hide == self._hide_done:
            return
        self._hide_done = hide
        self.invalidateFilter()

    def filterAcceptsRow(self, source_row: int, source_parent: QModelIndex) -> bool:
        if not self._hide_done:
            return True
        model = self.sourceModel()
        if not isinstance(model, TaskTableModel):
            return True
        return not model.task_at(source_row).done
