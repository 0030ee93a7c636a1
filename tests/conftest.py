"""Pytest configuration and fixtures."""

import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable, List, Optional

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from database.catalog_base import dispose_catalog_engines
from services.errors import PersistenceUnavailable
from services.sketch_service import SketchRecord, SketchStore


# ---------------------------------------------------------------------------
# Storage Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch) -> Path:
    """Point the application data directory at a temp folder."""
    target = tmp_path / "data"
    monkeypatch.setenv("SKETCHBOOK_DATA_DIR", str(target))
    return target


@pytest.fixture
def sketch_store(data_dir: Path):
    """SQLite-backed store rooted in a temp data directory."""
    store = SketchStore(data_dir)
    yield store
    dispose_catalog_engines()


class FakeSketchStore:
    """In-memory stand-in for SketchStore with switchable failures."""

    def __init__(self, names: Optional[List[str]] = None):
        base = datetime(2018, 5, 15, 9, 41, 0)
        self.sketches: List[SketchRecord] = [
            SketchRecord(name=name, creation_date=base + timedelta(minutes=i))
            for i, name in enumerate(names or [])
        ]
        self.sources = {sketch.name: "" for sketch in self.sketches}
        self.fail_list = False
        self.fail_create = False
        self.fail_delete = False
        self.created: List[tuple] = []
        self.deleted: List[str] = []

    def list_projects(self) -> List[SketchRecord]:
        if self.fail_list:
            raise PersistenceUnavailable("catalog offline")
        return list(self.sketches)

    def create_project(self, name: str, default_source: str) -> None:
        if self.fail_create:
            raise PersistenceUnavailable("disk full")
        self.created.append((name, default_source))
        self.sketches.append(SketchRecord(name=name, creation_date=datetime(2020, 1, 1)))
        self.sources[name] = default_source

    def delete_project(self, name: str) -> bool:
        if self.fail_delete:
            raise PersistenceUnavailable("catalog locked")
        self.deleted.append(name)
        self.sketches = [sketch for sketch in self.sketches if sketch.name != name]
        self.sources.pop(name, None)
        return True

    def read_source(self, name: str) -> str:
        if name not in self.sources:
            raise PersistenceUnavailable(f"no sketch {name}")
        return self.sources[name]


class FakePresenter:
    """Records everything the controller asks the presentation layer to do."""

    def __init__(self):
        self.rendered: List[list] = []
        self.counts: List[str] = []
        self.prompts: List[tuple] = []
        self.prompt_answers: List[Optional[str]] = []
        self.confirm_answer = True
        self.confirmations: List[str] = []
        self.opened: List[SketchRecord] = []
        self.selected: List[int] = []

    @property
    def last_rows(self) -> list:
        return self.rendered[-1] if self.rendered else []

    def render_rows(self, rows) -> None:
        self.rendered.append(list(rows))

    def set_count(self, label: str) -> None:
        self.counts.append(label)

    def prompt_create(self, initial_name: str, message: str) -> Optional[str]:
        self.prompts.append((initial_name, message))
        return self.prompt_answers.pop(0) if self.prompt_answers else None

    def confirm_delete(self, name: str) -> bool:
        self.confirmations.append(name)
        return self.confirm_answer

    def open_editor(self, project: SketchRecord) -> None:
        self.opened.append(project)

    def select_row(self, index: int) -> None:
        self.selected.append(index)


class ImmediateRunner:
    """Runs storage calls inline and reports back synchronously."""

    def submit(self, task: Callable[[], Any], on_success, on_error) -> None:
        try:
            result = task()
        except Exception as exc:
            on_error(exc)
            return
        on_success(result)


class DeferredRunner:
    """Runs storage calls at submit time but holds results until delivered."""

    def __init__(self):
        self.jobs: List[tuple] = []

    def submit(self, task: Callable[[], Any], on_success, on_error) -> None:
        try:
            outcome = (True, task())
        except Exception as exc:
            outcome = (False, exc)
        self.jobs.append((outcome, on_success, on_error))

    def deliver(self, index: int) -> None:
        (ok, value), on_success, on_error = self.jobs[index]
        self.jobs[index] = (None, None, None)
        if ok:
            on_success(value)
        else:
            on_error(value)


@pytest.fixture
def fake_store() -> FakeSketchStore:
    return FakeSketchStore(["Orbit", "noise_field", "Flocking", "orbit-trails"])


@pytest.fixture
def presenter() -> FakePresenter:
    return FakePresenter()


@pytest.fixture
def immediate_runner() -> ImmediateRunner:
    return ImmediateRunner()


@pytest.fixture
def deferred_runner() -> DeferredRunner:
    return DeferredRunner()


@pytest.fixture
def make_store() -> Callable[..., FakeSketchStore]:
    """Factory for fake stores seeded with specific names."""
    return FakeSketchStore
