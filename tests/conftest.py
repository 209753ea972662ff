# Rev 0.1.0

"""Pytest fixtures for todoZ (Rev 0.1.0)"""
from __future__ import annotations
import pytest
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from todoz.repositories.task_file_store import TaskFileStore


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "task.txt"


@pytest.fixture()
def store(tasks_file: Path) -> TaskFileStore:
    return TaskFileStore(tasks_file, skip_loading=True)


@pytest.fixture()
def write_tasks(tasks_file: Path):
    def _write(*lines: str) -> Path:
        tasks_file.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return tasks_file
    return _write
