"""File-based task storage adapter."""

import json
import logging
import os
from pathlib import Path

from jot.core.errors import StorageError, ValidationError
from jot.core.tasks import Task, TaskKind

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict:
    """Serialize a task to a JSON-ready dict."""
    return {
        "kind": task.kind.value,
        "description": task.description,
        "done": task.done,
        "time": task.time,
    }


def task_from_record(data: dict) -> Task:
    """Rebuild a task from a stored dict. Raises ValueError/KeyError on bad data."""
    kind = TaskKind(data["kind"])
    done = data.get("done", False)
    if not isinstance(done, bool):
        raise ValueError(f"done must be true or false, not {done!r}")
    return Task(
        kind=kind,
        description=data["description"],
        time=data.get("time") if kind.has_time else None,
        done=done,
    )


class FileTaskStore:
    """
    File-based task storage.

    Implements TaskStore protocol. One JSON object per line, so adding a
    task appends a line and only done/delete rewrite the file.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> list[Task]:
        """Read all tasks. Missing file -> empty list; bad lines are skipped."""
        if not self.path.exists():
            return []

        try:
            lines = self.path.read_bytes().splitlines()
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e

        tasks = []
        for lineno, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                tasks.append(task_from_record(json.loads(line.decode("utf-8"))))
            except (KeyError, TypeError, AttributeError, ValueError, ValidationError) as e:
                logger.warning(f"Skipping unreadable record at {self.path}:{lineno}: {e}")
        return tasks

    def append(self, task: Task) -> None:
        """Append one task to the end of the file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(task_to_record(task)) + "\n")
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def rewrite_all(self, tasks: tuple[Task, ...] | list[Task]) -> None:
        """Replace the file with the given tasks via a temp file swap."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        content = "".join(json.dumps(task_to_record(t)) + "\n" for t in tasks)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
