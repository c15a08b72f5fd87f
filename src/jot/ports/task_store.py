"""Task storage interface."""

from typing import Protocol

from jot.core.tasks import Task


class TaskStore(Protocol):
    """Interface for durably mirroring the task list."""

    def load(self) -> list[Task]:
        """Load all stored tasks in order."""
        ...

    def append(self, task: Task) -> None:
        """Persist a newly added task."""
        ...

    def rewrite_all(self, tasks: tuple[Task, ...] | list[Task]) -> None:
        """Replace stored contents with the given tasks."""
        ...
