"""Persistence for sketches: catalog rows plus source folders on disk."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from config.sketch_defaults import SKETCH_FILE_EXTENSION
from database.catalog_base import get_catalog_session, init_catalog_db
from database.catalog_repository import CatalogSketchRepository
from services.errors import PersistenceUnavailable
from utils.env import get_data_dir
from utils.error_handling import timed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SketchRecord:
    name: str
    creation_date: datetime
    folder: Optional[Path] = None


class SketchStore:
    """Lists, creates and deletes named sketches.

    Each sketch has a catalog row in ``catalog.db`` and a folder
    ``sketches/<name>/`` holding ``<name>.pde``. Every storage failure is
    raised as :class:`PersistenceUnavailable`.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()
        self.sketches_dir = self.data_dir / "sketches"
        self.catalog_path = self.data_dir / "catalog.db"
        self._initialized = False

    # ------------------------------------------------------------------
    # Catalog helpers
    # ------------------------------------------------------------------

    def _session(self):
        if not self._initialized:
            init_catalog_db(self.catalog_path)
            self._initialized = True
        return get_catalog_session(self.catalog_path)

    def sketch_folder(self, name: str) -> Path:
        """Folder holding ``name``; names that would escape ``sketches/`` are refused."""
        if name in ("", ".", "..") or any(sep in name for sep in ("/", "\\")):
            raise PersistenceUnavailable(f"'{name}' cannot be used as a sketch folder")
        folder = self.sketches_dir / name
        if not self._is_sketch_folder(folder):
            raise PersistenceUnavailable(f"'{name}' cannot be used as a sketch folder")
        return folder

    def source_path(self, name: str) -> Path:
        return self.sketch_folder(name) / f"{name}{SKETCH_FILE_EXTENSION}"

    def _is_sketch_folder(self, folder: Path) -> bool:
        return folder.resolve().parent == self.sketches_dir.resolve()

    def _folder_taken(self, name: str) -> bool:
        # Case-insensitive filesystems map Orbit/ and orbit/ to one folder
        if not self.sketches_dir.exists():
            return False
        wanted = name.casefold()
        return any(entry.name.casefold() == wanted for entry in self.sketches_dir.iterdir())

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @timed
    def list_projects(self) -> List[SketchRecord]:
        try:
            session = self._session()
            try:
                rows = CatalogSketchRepository(session).get_all()
                return [
                    SketchRecord(
                        name=row.name,
                        creation_date=row.created_at,
                        folder=Path(row.folder),
                    )
                    for row in rows
                ]
            finally:
                session.close()
        except (SQLAlchemyError, OSError) as exc:
            raise PersistenceUnavailable(f"Could not list sketches: {exc}") from exc

    def create_project(self, name: str, default_source: str) -> None:
        folder = self.sketch_folder(name)
        created_folder = False
        try:
            session = self._session()
            try:
                repo = CatalogSketchRepository(session)
                if repo.get_by_name(name):
                    raise PersistenceUnavailable(f"Sketch '{name}' already exists")
                if self._folder_taken(name):
                    raise PersistenceUnavailable(
                        f"A folder matching '{name}' already exists in {self.sketches_dir}"
                    )

                folder.mkdir(parents=True)
                created_folder = True
                self.source_path(name).write_text(default_source, encoding="utf-8")
                repo.create(name=name, folder=folder)
            finally:
                session.close()
        except (SQLAlchemyError, OSError) as exc:
            if created_folder:
                shutil.rmtree(folder, ignore_errors=True)
            raise PersistenceUnavailable(f"Could not create sketch '{name}': {exc}") from exc

        logger.info("Created sketch", extra={"event": "sketch.create", "sketch": name})

    def delete_project(self, name: str) -> bool:
        """Remove the catalog row and its folder.

        Returns False when the catalog has no sketch called ``name``; nothing
        on disk is touched in that case.
        """
        try:
            session = self._session()
            try:
                repo = CatalogSketchRepository(session)
                record = repo.get_by_name(name)
                if record is None:
                    logger.info("No sketch to delete", extra={"event": "sketch.delete.missing", "sketch": name})
                    return False
                folder = Path(record.folder)
                repo.delete(record)
            finally:
                session.close()
        except (SQLAlchemyError, OSError) as exc:
            raise PersistenceUnavailable(f"Could not delete sketch '{name}': {exc}") from exc

        if not self._is_sketch_folder(folder):
            logger.warning(
                "Catalog folder %s is outside %s, leaving it on disk",
                folder,
                self.sketches_dir,
                extra={"event": "sketch.delete.skipped", "sketch": name},
            )
        elif folder.exists():
            shutil.rmtree(folder, ignore_errors=True)
        logger.info("Deleted sketch", extra={"event": "sketch.delete", "sketch": name})
        return True

    def read_source(self, name: str) -> str:
        try:
            return self.source_path(name).read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceUnavailable(f"Could not read sketch '{name}': {exc}") from exc

    def save_source(self, name: str, code: str) -> None:
        try:
            path = self.source_path(name)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(code, encoding="utf-8")
        except OSError as exc:
            raise PersistenceUnavailable(f"Could not save sketch '{name}': {exc}") from exc
