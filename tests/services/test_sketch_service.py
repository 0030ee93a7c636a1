"""Tests for SketchStore persistence against a temp data directory."""

from __future__ import annotations

import pytest

from config.sketch_defaults import DEFAULT_SKETCH_SOURCE
from services.errors import PersistenceUnavailable
from services.sketch_service import SketchStore


class TestSketchStore:
    def test_empty_catalog_lists_nothing(self, sketch_store):
        assert sketch_store.list_projects() == []

    def test_create_writes_catalog_and_source(self, sketch_store):
        sketch_store.create_project("orbit", DEFAULT_SKETCH_SOURCE)

        sketches = sketch_store.list_projects()
        assert [s.name for s in sketches] == ["orbit"]
        assert sketches[0].creation_date is not None
        path = sketch_store.source_path("orbit")
        assert path.name == "orbit.pde"
        assert path.read_text(encoding="utf-8") == DEFAULT_SKETCH_SOURCE

    def test_listing_keeps_insertion_order(self, sketch_store):
        for name in ["zeta", "alpha", "Mid"]:
            sketch_store.create_project(name, "")

        assert [s.name for s in sketch_store.list_projects()] == ["zeta", "alpha", "Mid"]

    def test_case_variant_of_existing_folder_is_refused(self, sketch_store):
        sketch_store.create_project("Orbit", "my precious code")

        with pytest.raises(PersistenceUnavailable):
            sketch_store.create_project("orbit", DEFAULT_SKETCH_SOURCE)

        assert [s.name for s in sketch_store.list_projects()] == ["Orbit"]
        assert sketch_store.read_source("Orbit") == "my precious code"

    def test_existing_folder_without_catalog_row_is_not_reused(self, sketch_store):
        stray = sketch_store.sketch_folder("orbit")
        stray.mkdir(parents=True)
        (stray / "orbit.pde").write_text("kept", encoding="utf-8")

        with pytest.raises(PersistenceUnavailable):
            sketch_store.create_project("orbit", DEFAULT_SKETCH_SOURCE)

        assert (stray / "orbit.pde").read_text(encoding="utf-8") == "kept"
        assert sketch_store.list_projects() == []

    def test_duplicate_create_raises(self, sketch_store):
        sketch_store.create_project("orbit", "")
        with pytest.raises(PersistenceUnavailable):
            sketch_store.create_project("orbit", "")

    def test_delete_removes_row_and_folder(self, sketch_store):
        sketch_store.create_project("orbit", "")
        folder = sketch_store.sketch_folder("orbit")
        assert folder.exists()

        sketch_store.delete_project("orbit")

        assert sketch_store.list_projects() == []
        assert not folder.exists()

    def test_delete_unknown_name_is_noop(self, sketch_store):
        assert sketch_store.delete_project("missing") is False
        assert sketch_store.list_projects() == []

    def test_delete_unknown_name_leaves_stray_folder(self, sketch_store):
        stray = sketch_store.sketch_folder("orphan")
        stray.mkdir(parents=True)

        assert sketch_store.delete_project("orphan") is False
        assert stray.exists()

    @pytest.mark.parametrize("name", ["..", "", ".", "../sketches"])
    def test_delete_never_escapes_sketch_folder(self, sketch_store, data_dir, name):
        sketch_store.create_project("Orbit", "my precious code")

        assert sketch_store.delete_project(name) is False

        assert sketch_store.read_source("Orbit") == "my precious code"
        assert (data_dir / "catalog.db").exists()
        assert [s.name for s in sketch_store.list_projects()] == ["Orbit"]

    @pytest.mark.parametrize("name", ["..", "", ".", "a/b", "a\\b"])
    def test_unsafe_names_have_no_folder(self, sketch_store, name):
        with pytest.raises(PersistenceUnavailable):
            sketch_store.sketch_folder(name)
        with pytest.raises(PersistenceUnavailable):
            sketch_store.create_project(name, "")

    def test_read_and_save_source(self, sketch_store):
        sketch_store.create_project("orbit", "void setup() {}")
        sketch_store.save_source("orbit", "void draw() {}")

        assert sketch_store.read_source("orbit") == "void draw() {}"

    def test_read_missing_source_raises(self, sketch_store):
        with pytest.raises(PersistenceUnavailable):
            sketch_store.read_source("missing")

    def test_failed_source_write_rolls_back(self, sketch_store, monkeypatch):
        def boom(*args, **kwargs):
            raise OSError("read-only file system")

        monkeypatch.setattr("pathlib.Path.write_text", boom)

        with pytest.raises(PersistenceUnavailable):
            sketch_store.create_project("orbit", "")

        monkeypatch.undo()
        assert sketch_store.list_projects() == []
        assert not sketch_store.sketch_folder("orbit").exists()

    def test_default_location_follows_env(self, data_dir):
        store = SketchStore()
        assert store.data_dir == data_dir
        assert store.catalog_path == data_dir / "catalog.db"
