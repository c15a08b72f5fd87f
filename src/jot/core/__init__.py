"""Functional core - pure business logic with no I/O."""

from .errors import (
    JotError,
    CommandError,
    ValidationError,
    UnknownCommandError,
    TaskIndexError,
    NotFoundError,
    StorageError,
)
from .tasks import Task, TaskKind, TaskList
from .parser import ParsedLine, parse_line, split_on_delimiter, parse_task_number

__all__ = [
    # Errors
    "JotError",
    "CommandError",
    "ValidationError",
    "UnknownCommandError",
    "TaskIndexError",
    "NotFoundError",
    "StorageError",
    # Tasks
    "Task",
    "TaskKind",
    "TaskList",
    # Parsing
    "ParsedLine",
    "parse_line",
    "split_on_delimiter",
    "parse_task_number",
]
