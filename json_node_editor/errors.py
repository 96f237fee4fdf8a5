from __future__ import annotations

from typing import Any, Optional, Sequence


class EditorError(ValueError):
    """Base class for errors surfaced to the user while editing a node."""


class MalformedInput(EditorError):
    """The edit buffer is not valid JSON."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class PathConflict(EditorError):
    """A path segment needs a container but the document holds something else there."""

    def __init__(self, path: Sequence[Any], index: int, message: str):
        self.path = tuple(path)
        self.index = index
        super().__init__(message)


class DocumentParseFailure(EditorError):
    """The stored document text could not be parsed."""
