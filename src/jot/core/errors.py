"""Error hierarchy shared by the core, the store, and the surfaces."""


class JotError(Exception):
    """Base class for all jot errors."""

    pass


class CommandError(JotError):
    """A command line could not be carried out. Safe to report back as a reply."""

    pass


class ValidationError(CommandError):
    """Malformed command: empty description, missing delimiter, bad index."""

    pass


class UnknownCommandError(CommandError):
    """The first token of the line is not a known command keyword."""

    pass


class TaskIndexError(CommandError, IndexError):
    """Task number outside the current list."""

    pass


class NotFoundError(CommandError):
    """A search matched no task."""

    pass


class StorageError(JotError):
    """Reading or writing the task file failed."""

    pass
