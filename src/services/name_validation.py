"""Rules gating the name of a new sketch.

Rules run in a fixed order and the first failure wins, so a name that is
both a duplicate and contains spaces is reported as a duplicate.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

from config.sketch_defaults import EXTRA_NAME_CHARACTERS
from services.errors import NameValidationError

EMPTY_NAME_MESSAGE = "Name should be at least one character."
SPACES_MESSAGE = "File name should not contain spaces."
SYMBOLS_MESSAGE = "File name should contain no fancy symbols."


def duplicate_name_message(name: str) -> str:
    return (
        f"File with name '{name}' already exists. "
        "Please choose another name or delete the existing one first."
    )


def is_allowed_character(char: str) -> bool:
    # Letters and combining marks of any script, ASCII digits, '-' and '_'
    if char in EXTRA_NAME_CHARACTERS:
        return True
    return unicodedata.category(char)[0] in ("L", "M")


def validate_sketch_name(name: str, existing_names: Iterable[str]) -> str:
    """Return ``name`` if acceptable, else raise :class:`NameValidationError`."""
    if name == "":
        raise NameValidationError(EMPTY_NAME_MESSAGE, name)

    if name in set(existing_names):
        raise NameValidationError(duplicate_name_message(name), name)

    if " " in name:
        raise NameValidationError(SPACES_MESSAGE, name.replace(" ", "_"))

    if not all(is_allowed_character(char) for char in name):
        raise NameValidationError(SYMBOLS_MESSAGE, name)

    return name
