# Rev 0.1.0

"""Error kinds raised by the todoZ model layer.

- InvalidPriority: bad priority text, propagated to the caller.
- MalformedRecord: a task file line that does not parse; load() skips it.
- IndexOutOfRange: bad row/position, a programmer error.
- PersistenceIOFailure: task file could not be read/written; recorded, never fatal.
"""
from __future__ import annotations
from typing import Optional


class TodozError(Exception):
    """Base class for todoZ errors."""


class InvalidPriority(TodozError, ValueError):
    def __init__(self, text: object):
        self.text = text
        super().__init__(f"Invalid priority: {text!r}")


class MalformedRecord(TodozError, ValueError):
    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed task record ({reason}): {line!r}")


class IndexOutOfRange(TodozError, IndexError):
    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Index {index} out of range [0, {size})")


class PersistenceIOFailure(TodozError, OSError):
    def __init__(self, action: str, path: object, cause: Optional[BaseException] = None):
        self.action = action
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Could not {action} task file {path}{detail}")
