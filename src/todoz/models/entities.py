# Rev 0.1.0
"""Task entity and its one-line file record: id,title,done,priority,dueDate"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from todoz.models.errors import InvalidPriority, MalformedRecord
from todoz.models.priority import Priority

DELIMITER = ","
FIELD_COUNT = 5

Clock = Callable[[], date]


@dataclass
class Task:
    id: int
    title: str
    done: bool = False
    priority: Optional[Priority] = None
    due_date: Optional[date] = None

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"Task id must be a positive integer, got {self.id!r}")

    def __setattr__(self, name, value):
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Task.id is immutable once assigned")
        super().__setattr__(name, value)

    def toggle_done(self) -> None:
        self.done = not self.done

    def is_due_today(self, clock: Clock = date.today) -> bool:
        return self.due_date is not None and self.due_date == clock()

    def apply(
        self,
        *,
        title: str,
        done: bool,
        priority: Optional[Priority],
        due_date: Optional[date],
    ) -> None:
        """Replace every mutable field in one step (editor dialog path)."""
        self.title = title
        self.done = done
        self.priority = priority
        self.due_date = due_date

    def __str__(self) -> str:
        box = "[✓]" if self.done else "[ ]"
        prio = self.priority.label() if self.priority else ""
        due = self.due_date.isoformat() if self.due_date else "none"
        return f"{box} {self.title:<20} Priority: {prio:<6} Due: {due}"

    # ---- file record
    def to_line(self) -> str:
        # one task per line; the title is written as-is otherwise
        title = " ".join(self.title.splitlines())
        return DELIMITER.join((
            str(self.id),
            title,
            "true" if self.done else "false",
            self.priority.token if self.priority else "",
            self.due_date.isoformat() if self.due_date else "",
        ))

    @classmethod
    def parse_line(cls, line: str) -> "Task":
        parts = line.rstrip("\r\n").split(DELIMITER)
        if len(parts) < FIELD_COUNT:
            raise MalformedRecord(line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

        # an unquoted title may itself contain the delimiter
        id_text, title_parts, done_text, prio_text, due_text = (
            parts[0], parts[1:-3], parts[-3], parts[-2], parts[-1],
        )

        try:
            task_id = int(id_text.strip())
        except ValueError:
            raise MalformedRecord(line, f"bad id {id_text!r}") from None
        if task_id < 1:
            raise MalformedRecord(line, f"bad id {id_text!r}")

        priority: Optional[Priority] = None
        if prio_text.strip():
            try:
                priority = Priority.parse(prio_text)
            except InvalidPriority as e:
                raise MalformedRecord(line, str(e)) from e

        due_date: Optional[date] = None
        if due_text.strip():
            try:
                due_date = date.fromisoformat(due_text.strip())
            except ValueError as e:
                raise MalformedRecord(line, f"bad due date {due_text!r}") from e

        return cls(
            id=task_id,
            title=DELIMITER.join(title_parts),
            done=done_text.strip().lower() == "true",
            priority=priority,
            due_date=due_date,
        )

    @classmethod
    def from_line(cls, line: str) -> Optional["Task"]:
        try:
            return cls.parse_line(line)
        except MalformedRecord:
            return None
