"""Tests for plain-text rendering."""

import pytest

from jot.adapters.text_presenter import TextPresenter
from jot.core.tasks import Task


@pytest.fixture
def presenter():
    return TextPresenter()


class TestRenderLine:
    def test_todo(self, presenter):
        assert presenter.render_line(Task.todo("read book")) == "[T][ ] read book"

    def test_done_deadline(self, presenter):
        task = Task.deadline("submit report", "Friday")
        task.mark_done()
        assert presenter.render_line(task) == "[D][X] submit report (by: Friday)"

    def test_event(self, presenter):
        assert presenter.render_line(Task.event("dinner", "8pm")) == "[E][ ] dinner (at: 8pm)"


class TestMessages:
    def test_empty_list(self, presenter):
        assert presenter.render_list([]) == "Your list is empty."

    def test_added_counts(self, presenter):
        task = Task.todo("read book")
        assert presenter.render_added(task, [task]) == (
            "Got it. I've added this task:\n  [T][ ] read book\nNow you have 1 task in the list."
        )

    def test_removed_counts_plural(self, presenter):
        task = Task.todo("a")
        reply = presenter.render_removed(task, [Task.todo("b"), Task.todo("c")])
        assert reply.startswith("Noted. I've removed this task:\n  [T][ ] a")
        assert reply.endswith("Now you have 2 tasks in the list.")

    def test_error(self, presenter):
        assert presenter.render_error("bad") == "OOPS!!! bad"
