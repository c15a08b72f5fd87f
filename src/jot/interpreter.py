"""Command interpreter - turns one input line into a task list change and a reply."""

import logging

from .core.errors import NotFoundError, UnknownCommandError, ValidationError
from .core.parser import parse_line, parse_task_number, split_on_delimiter
from .core.tasks import Task, TaskKind, TaskList
from .ports.presenter import Presenter
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

COMMANDS = ("list", "done", "todo", "deadline", "event", "delete", "find", "bye")
EXIT_COMMAND = "bye"


class CommandInterpreter:
    """
    Interprets one command line at a time against a session's task list.

    Every mutating command syncs the store exactly once, after the
    in-memory change and before the reply is built. A store failure
    surfaces as StorageError without undoing the in-memory change.
    """

    def __init__(self, tasks: TaskList, store: TaskStore, presenter: Presenter):
        self.tasks = tasks
        self.store = store
        self.presenter = presenter
        self._handlers = {
            "list": self._list,
            "done": self._done,
            "todo": self._todo,
            "deadline": self._deadline,
            "event": self._event,
            "delete": self._delete,
            "find": self._find,
            "bye": self._bye,
        }

    @staticmethod
    def is_exit(line: str) -> bool:
        """True if the line is the command that ends a session."""
        return parse_line(line).keyword == EXIT_COMMAND

    def interpret(self, line: str) -> str:
        """
        Run one command line and return the reply text.

        Raises a CommandError subclass for malformed input and
        StorageError if the store could not be updated.
        """
        parsed = parse_line(line)
        handler = self._handlers.get(parsed.keyword)
        if handler is None:
            raise UnknownCommandError(
                f"unknown command '{parsed.keyword}'. Try one of: {', '.join(COMMANDS)}."
                if parsed.keyword
                else "unknown command. Please type a command."
            )
        logger.debug(f"Dispatching '{parsed.keyword}'")
        return handler(parsed.argument)

    # ============== Queries ==============

    def _list(self, argument: str) -> str:
        return self.presenter.render_list(self.tasks.all())

    def _find(self, argument: str) -> str:
        if not argument:
            raise ValidationError("Please give something to search for.")
        matches = self.tasks.find(argument)
        if not matches:
            raise NotFoundError(f"no matching task for '{argument}'.")
        return self.presenter.render_matches(matches)

    def _bye(self, argument: str) -> str:
        return self.presenter.farewell()

    # ============== Mutations ==============

    def _done(self, argument: str) -> str:
        index = parse_task_number(argument, self.tasks.size())
        task = self.tasks.mark_done(index)
        logger.info(f"Marked task {index + 1} done")
        self.store.rewrite_all(self.tasks.all())
        return self.presenter.render_done(task)

    def _delete(self, argument: str) -> str:
        index = parse_task_number(argument, self.tasks.size())
        task = self.tasks.delete(index)
        logger.info(f"Deleted task {index + 1}")
        self.store.rewrite_all(self.tasks.all())
        return self.presenter.render_removed(task, self.tasks.all())

    def _todo(self, argument: str) -> str:
        return self._add(Task.todo(argument))

    def _deadline(self, argument: str) -> str:
        return self._add(self._timed_task(TaskKind.DEADLINE, argument))

    def _event(self, argument: str) -> str:
        return self._add(self._timed_task(TaskKind.EVENT, argument))

    def _timed_task(self, kind: TaskKind, argument: str) -> Task:
        if not argument:
            raise ValidationError(f"The description of a {kind.value} cannot be empty.")
        description, time = split_on_delimiter(argument, kind.delimiter)
        return Task(kind, description, time)

    def _add(self, task: Task) -> str:
        self.tasks.add(task)
        logger.info(f"Added {task.kind.value} '{task.description}'")
        self.store.append(task)
        return self.presenter.render_added(task, self.tasks.all())
