"""Plain-text presenter adapter."""

from typing import Sequence

from jot.core.tasks import Task

FAREWELL = "Bye. Hope to see you again soon!"


def _count_line(tasks: Sequence[Task]) -> str:
    noun = "task" if len(tasks) == 1 else "tasks"
    return f"Now you have {len(tasks)} {noun} in the list."


class TextPresenter:
    """
    Plain-text rendering.

    Implements Presenter protocol. A task renders as
    ``[D][X] submit report (by: Friday)``.
    """

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def render_line(self, task: Task) -> str:
        mark = "X" if task.done else " "
        line = f"[{task.kind.code}][{mark}] {task.description}"
        if task.kind.has_time:
            line += f" ({task.kind.time_label}: {task.time})"
        return line

    def render_list(self, tasks: Sequence[Task]) -> str:
        if not tasks:
            return "Your list is empty."
        lines = ["Here are the tasks in your list:"]
        lines += [f"{i}.{self.render_line(t)}" for i, t in enumerate(tasks, start=1)]
        return "\n".join(lines)

    def render_added(self, task: Task, tasks: Sequence[Task]) -> str:
        return (
            "Got it. I've added this task:\n"
            f"{self.indent}{self.render_line(task)}\n"
            f"{_count_line(tasks)}"
        )

    def render_removed(self, task: Task, tasks: Sequence[Task]) -> str:
        return (
            "Noted. I've removed this task:\n"
            f"{self.indent}{self.render_line(task)}\n"
            f"{_count_line(tasks)}"
        )

    def render_done(self, task: Task) -> str:
        return f"Nice! I've marked this task as done:\n{self.indent}{self.render_line(task)}"

    def render_matches(self, tasks: Sequence[Task]) -> str:
        return "\n".join(self.render_line(t) for t in tasks)

    def render_error(self, message: str) -> str:
        return f"OOPS!!! {message}"

    def farewell(self) -> str:
        return FAREWELL
