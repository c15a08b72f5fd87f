"""Adapters - I/O implementations of ports."""

from .file_store import FileTaskStore
from .text_presenter import TextPresenter

__all__ = [
    "FileTaskStore",
    "TextPresenter",
]
