"""Immutable state of the sketch list: canonical sketches plus the active filter."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Tuple

from services.sketch_service import SketchRecord


@dataclass(frozen=True)
class ProjectListState:
    all_projects: Tuple[SketchRecord, ...] = ()
    filter_text: str = ""
    search_active: bool = False
    loaded: bool = False

    @property
    def is_filter_active(self) -> bool:
        return self.search_active and self.filter_text != ""

    @property
    def visible_projects(self) -> Tuple[SketchRecord, ...]:
        if not self.is_filter_active:
            return self.all_projects
        return filter_projects(self.all_projects, self.filter_text)

    def names(self) -> Tuple[str, ...]:
        return tuple(project.name for project in self.all_projects)

    def with_projects(self, projects: Iterable[SketchRecord]) -> "ProjectListState":
        """Replace the canonical list wholesale."""
        return replace(self, all_projects=tuple(projects), loaded=True)

    def with_filter(self, text: str, search_active: bool) -> "ProjectListState":
        return replace(self, filter_text=text, search_active=search_active)


def filter_projects(projects: Iterable[SketchRecord], text: str) -> Tuple[SketchRecord, ...]:
    """Case-insensitive substring match on name; keeps the original order."""
    needle = text.lower()
    return tuple(project for project in projects if needle in project.name.lower())
