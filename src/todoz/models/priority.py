# Rev 0.1.0

"""Task priority (High / Medium / Low).

The enum value is the machine token written to the task file; label() is the
translatable text shown to the user.
"""
from __future__ import annotations
from enum import Enum
from typing import Dict

from PySide6.QtCore import QCoreApplication

from todoz.models.errors import InvalidPriority


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def token(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def label(self) -> str:
        return QCoreApplication.translate("Priority", _LABELS[self])

    def __str__(self) -> str:
        return self.label()

    @classmethod
    def parse(cls, text: object) -> "Priority":
        """Match a machine token or display label, ignoring case and padding."""
        if text is None:
            raise InvalidPriority(text)
        key = str(text).strip().lower()
        for p in cls:
            if key in (p.value, _LABELS[p].lower(), p.label().strip().lower()):
                return p
        if key in _ALIASES:
            return _ALIASES[key]
        raise InvalidPriority(text)


_LABELS: Dict[Priority, str] = {
    Priority.HIGH: "High",
    Priority.MEDIUM: "Medium",
    Priority.LOW: "Low",
}

_RANKS: Dict[Priority, int] = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}

# Japanese labels, still found in older task files
_ALIASES: Dict[str, Priority] = {"高": Priority.HIGH, "中": Priority.MEDIUM, "低": Priority.LOW}
