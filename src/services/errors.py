"""Error taxonomy for the sketch browser."""

from __future__ import annotations


class NameValidationError(ValueError):
    """A proposed sketch name broke one of the naming rules.

    Carries the message to show in the create dialog and the name to
    pre-fill when re-prompting.
    """

    def __init__(self, message: str, suggested_name: str):
        super().__init__(message)
        self.message = message
        self.suggested_name = suggested_name


class PersistenceUnavailable(RuntimeError):
    """Listing, creating, reading or deleting sketches failed in storage."""


class SelectionOutOfRange(IndexError):
    """A row index does not exist in the currently displayed list."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Row {index} is out of range for {size} visible sketches")
        self.index = index
        self.size = size
