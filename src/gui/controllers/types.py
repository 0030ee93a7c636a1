"""Typed interfaces for controller dependencies to enforce layering."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

from services.sketch_service import SketchRecord


@dataclass(frozen=True)
class DisplayRow:
    name: str
    created_at_display: Optional[str] = None


class SketchStoreProtocol(Protocol):
    """Persistence calls consumed by the project list controller."""

    def list_projects(self) -> List[SketchRecord]:
        ...

    def delete_project(self, name: str) -> bool:
        ...

    def create_project(self, name: str, default_source: str) -> None:
        ...


class SketchListPresenter(Protocol):
    """Presentation layer driven by the project list controller."""

    def render_rows(self, rows: List[DisplayRow]) -> None:
        ...

    def set_count(self, label: str) -> None:
        ...

    def prompt_create(self, initial_name: str, message: str) -> Optional[str]:
        """Return the submitted name, or None when the user cancels."""
        ...

    def confirm_delete(self, name: str) -> bool:
        ...

    def open_editor(self, project: SketchRecord) -> None:
        ...

    def select_row(self, index: int) -> None:
        ...


class TaskRunner(Protocol):
    """Runs a storage call off the UI thread and reports back on it."""

    def submit(
        self,
        task: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        ...
