"""Error types raised while reading, parsing, and writing stylesheets."""

from __future__ import annotations

from pathlib import Path


class VarifyError(Exception):
    """Base class for every fatal varify error."""


class InputMissingError(VarifyError):
    """Raised when the source stylesheet cannot be obtained."""

    def __init__(self, path: str | Path, reason: str = "file not found"):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class ParseError(VarifyError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class WriteError(VarifyError):
    """Raised when the rewritten stylesheet cannot be persisted."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot write {self.path}: {reason}")
