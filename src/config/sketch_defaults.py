"""Static defaults for sketches and the sketch browser."""

from __future__ import annotations

from typing import Final

SKETCH_FILE_EXTENSION: Final[str] = ".pde"

DEFAULT_SKETCH_SOURCE: Final[str] = (
    "void setup() {\n   size(screen.width, screen.height);\n}\n\n"
    "void draw() {\n   background(0,0,255);\n}"
)

# Characters accepted in a sketch name besides Unicode letters
EXTRA_NAME_CHARACTERS: Final[str] = "-_0123456789"

CREATE_DIALOG_TITLE: Final[str] = "New Processing Project"
SEARCH_PLACEHOLDER: Final[str] = "Search Projects"
DELETE_DIALOG_TITLE: Final[str] = "Delete Project"


def delete_confirmation_text(name: str) -> str:
    return (
        f'Are you sure that you want to delete the project "{name}"? '
        "This cannot be undone."
    )

APP_NAME: Final[str] = "Sketchbook"
APP_VERSION: Final[str] = "0.1.0"
