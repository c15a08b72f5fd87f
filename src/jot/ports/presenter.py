"""Presenter interface."""

from typing import Protocol, Sequence

from jot.core.tasks import Task


class Presenter(Protocol):
    """Interface for turning tasks into user-facing text. Pure, no side effects."""

    def render_line(self, task: Task) -> str:
        ...

    def render_list(self, tasks: Sequence[Task]) -> str:
        ...

    def render_added(self, task: Task, tasks: Sequence[Task]) -> str:
        """Confirm an added task, with the updated count."""
        ...

    def render_removed(self, task: Task, tasks: Sequence[Task]) -> str:
        """Confirm a removed task, with the updated count."""
        ...

    def render_done(self, task: Task) -> str:
        ...

    def render_matches(self, tasks: Sequence[Task]) -> str:
        ...

    def render_error(self, message: str) -> str:
        ...

    def farewell(self) -> str:
        ...
