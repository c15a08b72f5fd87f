"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

from .errors import TaskIndexError, ValidationError


class TaskKind(Enum):
    """The closed set of task variants."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def code(self) -> str:
        """One-letter tag used when rendering."""
        return {"todo": "T", "deadline": "D", "event": "E"}[self.value]

    @property
    def time_label(self) -> str | None:
        """Label shown before the time value, or None for kinds without one."""
        return {"todo": None, "deadline": "by", "event": "at"}[self.value]

    @property
    def delimiter(self) -> str | None:
        """Command-line token separating description from time."""
        label = self.time_label
        return f"/{label}" if label else None

    @property
    def has_time(self) -> bool:
        return self.time_label is not None


@dataclass
class Task:
    """A trackable item: description, completion state, and kind-specific time."""

    kind: TaskKind
    description: str
    time: str | None = None
    done: bool = False

    def __post_init__(self) -> None:
        self.description = self.description.strip()
        if not self.description:
            raise ValidationError(f"The description of a {self.kind.value} cannot be empty.")

        if self.kind.has_time:
            self.time = (self.time or "").strip()
            if not self.time:
                raise ValidationError(
                    f"The time of a {self.kind.value} cannot be empty "
                    f"(use {self.kind.delimiter} <time>)."
                )
        elif self.time is not None:
            raise ValidationError(f"A {self.kind.value} does not take a time.")

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: str) -> "Task":
        return cls(TaskKind.DEADLINE, description, by)

    @classmethod
    def event(cls, description: str, at: str) -> "Task":
        return cls(TaskKind.EVENT, description, at)

    def mark_done(self) -> None:
        """Mark as done. Marking an already-done task is a no-op."""
        self.done = True

    def matches(self, term: str) -> bool:
        """Case-sensitive substring match against the description."""
        return term in self.description


class TaskList:
    """
    Ordered, 0-based collection that owns every task of a session.

    Indices are never wrapped: negative or too-large values raise
    TaskIndexError instead of reaching from the end.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self):
        return iter(self.all())

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(
                f"Task index {index} is out of range for a list of {len(self._tasks)}."
            )

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        """Remove and return the task at index; later tasks shift down by one."""
        self._check_index(index)
        return self._tasks.pop(index)

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def all(self) -> tuple[Task, ...]:
        """Read-only view of the tasks in order."""
        return tuple(self._tasks)

    def find(self, term: str) -> list[Task]:
        """Tasks whose description contains term, in list order."""
        return [t for t in self._tasks if t.matches(term)]
