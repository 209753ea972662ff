# Rev 0.1.0
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from todoz.models.entities import Task
from todoz.models.errors import IndexOutOfRange, MalformedRecord, PersistenceIOFailure
from todoz.models.priority import Priority
from todoz.utils.paths import DEFAULT_TASKS_FILE


class TaskFileStore:
    """
    Authoritative in-memory task list backed by a flat text file
    (one `id,title,done,priority,dueDate` record per line, UTF-8).

    I/O failures are logged and kept in `last_error`; save()/load() report
    them through their return value and never raise.
    """

    def __init__(
        self,
        path: Union[Path, str] = DEFAULT_TASKS_FILE,
        *,
        skip_loading: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._path = Path(path)
        self._log = logger or logging.getLogger(__name__)
        self._tasks: List[Task] = []
        self._next_id = 1
        self.last_error: Optional[PersistenceIOFailure] = None
        if not skip_loading:
            self.load()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    # -------------------------
    # CRUD
    # -------------------------
    def new_task(
        self,
        title: str,
        done: bool = False,
        priority: Optional[Priority] = None,
        due_date: Optional[date] = None,
    ) -> Task:
        """Allocate an id and build a Task. The task is not added until add_task()."""
        task = Task(self._next_id, title, done, priority, due_date)
        self._next_id += 1
        return task

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)
        if task.id >= self._next_id:
            self._next_id = task.id + 1
        self._log.debug("add_task: id=%s, %d task(s)", task.id, len(self._tasks))

    def remove_task(self, task: Task) -> bool:
        for i, t in enumerate(self._tasks):
            if t is task:
                del self._tasks[i]
                return True
        try:
            self._tasks.remove(task)
        except ValueError:
            return False
        return True

    def list_tasks(self) -> List[Task]:
        # live list; callers that need isolation must copy it
        return self._tasks

    def update_task(
        self,
        task: Task,
        *,
        title: str,
        done: bool,
        priority: Optional[Priority],
        due_date: Optional[date],
    ) -> Task:
        if not any(t is task for t in self._tasks):
            raise KeyError(f"task {task.id} is not in this store")
        task.apply(title=title, done=done, priority=priority, due_date=due_date)
        return task

    def toggle_task(self, index: int) -> Task:
        if index < 0 or index >= len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))
        task = self._tasks[index]
        task.toggle_done()
        self.save()
        return task

    # -------------------------
    # Persistence
    # -------------------------
    def save(self) -> bool:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8", newline="\n") as f:
                for task in self._tasks:
                    f.write(task.to_line() + "\n")
        except OSError as e:
            self._fail("write", e)
            return False
        self.last_error = None
        self._log.debug("Saved %d task(s) to %s", len(self._tasks), self._path)
        return True

    def load(self) -> bool:
        if not self._path.exists():
            self._tasks.clear()
            self._next_id = 1
            self.last_error = None
            self._log.info("No task file at %s; starting empty", self._path)
            return True

        try:
            with self._path.open("r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            # previous in-memory state stays as it was
            self._fail("read", e)
            return False

        loaded: List[Task] = []
        seen_ids = set()
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                task = Task.parse_line(line)
            except MalformedRecord as e:
                self._log.warning("%s:%d: skipping record: %s", self._path, lineno, e)
                continue
            if task.id in seen_ids:
                self._log.warning("%s:%d: skipping duplicate task id %d", self._path, lineno, task.id)
                continue
            seen_ids.add(task.id)
            loaded.append(task)

        self._tasks.clear()
        self._tasks.extend(loaded)
        self._next_id = max(seen_ids, default=0) + 1
        self.last_error = None
        self._log.info("Loaded %d task(s) from %s", len(self._tasks), self._path)
        return True

    def _fail(self, action: str, cause: BaseException) -> None:
        self.last_error = PersistenceIOFailure(action, self._path, cause)
        self._log.error("%s", self.last_error)
