"""Exceptions raised by the localization data source.

Both lookup errors below are precondition violations: they mean the caller
held a group name or row number across a rebuild without re-validating it.
"""

from __future__ import annotations


class LocalizationEditorError(Exception):
    """Base class for all localization editor errors."""


class UnknownGroupError(LocalizationEditorError, LookupError):
    """Raised when a group name does not match any discovered group."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No localization group named {name!r}")
        self.name = name


class RowOutOfRangeError(LocalizationEditorError, IndexError):
    """Raised when a row is outside the current filtered key list.

    Attributes:
        row: The offending row number.
        row_count: Number of rows at the time of the call.
    """

    def __init__(self, row: int, row_count: int) -> None:
        super().__init__(f"No key for row {row} (row count is {row_count})")
        self.row = row
        self.row_count = row_count


class NoSelectionError(LocalizationEditorError, RuntimeError):
    """Raised when an operation needs a selected group and none is selected."""


__all__ = [
    "LocalizationEditorError",
    "NoSelectionError",
    "RowOutOfRangeError",
    "UnknownGroupError",
]
