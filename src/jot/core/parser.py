"""Command-line tokenizing - turns a raw line into keyword and arguments."""

import re
from dataclasses import dataclass

from .errors import TaskIndexError, ValidationError

_INDEX_RE = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class ParsedLine:
    """A line split into its command keyword and the raw remainder."""

    keyword: str
    argument: str = ""


def parse_line(line: str) -> ParsedLine:
    """
    Split off the first whitespace-delimited token.

    The remainder keeps its inner spacing but loses surrounding whitespace.
    An empty or blank line gives an empty keyword.
    """
    parts = line.strip().split(None, 1)
    if not parts:
        return ParsedLine("")
    if len(parts) == 1:
        return ParsedLine(parts[0])
    return ParsedLine(parts[0], parts[1].strip())


def split_on_delimiter(argument: str, delimiter: str) -> tuple[str, str]:
    """
    Partition argument at the first whole-word occurrence of delimiter.

    Returns (description, time), both stripped. Later occurrences of the
    delimiter stay inside the time. Raises ValidationError if the
    delimiter is absent.
    """
    pattern = re.compile(r"(?<!\S)" + re.escape(delimiter) + r"(?!\S)")
    match = pattern.search(argument)
    if match is None:
        raise ValidationError(f"Missing '{delimiter}' in the command.")
    return argument[: match.start()].strip(), argument[match.end():].strip()


def parse_task_number(argument: str, size: int) -> int:
    """
    Translate a 1-based task number into a 0-based list index.

    Raises ValidationError for anything that is not an integer and
    TaskIndexError for numbers outside 1..size.
    """
    text = argument.strip()
    if not text:
        raise ValidationError("Please give a task number.")
    if not _INDEX_RE.fullmatch(text):
        raise ValidationError(f"'{text}' is not a task number.")

    try:
        number = int(text)
    except ValueError:
        # Too many digits to convert; certainly past the end of the list.
        raise TaskIndexError(f"There is no such task; pick a number from 1 to {size}.") from None
    if not 1 <= number <= size:
        if size == 0:
            raise TaskIndexError(f"There is no task {number}; the list is empty.")
        raise TaskIndexError(f"There is no task {number}; pick a number from 1 to {size}.")
    return number - 1
