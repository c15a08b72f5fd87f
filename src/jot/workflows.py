"""Shared workflow layer between CLI and Telegram.

Builds a session (task list + store + presenter) and turns every
command outcome, including recognized failures, into a reply string.
"""

import logging

from .adapters.file_store import FileTaskStore
from .adapters.text_presenter import TextPresenter
from .config import Config
from .core.errors import CommandError, StorageError
from .core.tasks import TaskList
from .interpreter import CommandInterpreter

logger = logging.getLogger(__name__)

GREETING = "Hello! I'm jot.\nWhat can I do for you?"


def open_session(config: Config) -> CommandInterpreter:
    """Load the task list from the configured file and wire up an interpreter."""
    store = FileTaskStore(config.data_path)
    tasks = TaskList(store.load())
    logger.info(f"Loaded {tasks.size()} tasks from {store.path}")
    return CommandInterpreter(tasks, store, TextPresenter())


def respond(interpreter: CommandInterpreter, line: str) -> str:
    """Run one line and always return a reply, never raising for known failures."""
    try:
        return interpreter.interpret(line)
    except CommandError as e:
        return interpreter.presenter.render_error(str(e))
    except StorageError as e:
        # The in-memory change stays applied; the file catches up on the next sync.
        logger.error(f"Task file is out of date: {e}")
        return interpreter.presenter.render_error(f"The change was made but could not be saved: {e}")
