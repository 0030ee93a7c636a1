"""Catalog database engine and session helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from utils.env import get_data_dir

CatalogBase = declarative_base()

# -----------------------------------------------------------------------------
# Engine registry keyed by catalog path
# -----------------------------------------------------------------------------

_catalog_engines: Dict[str, Engine] = {}


def get_catalog_db_path() -> Path:
    return get_data_dir() / "catalog.db"


def _get_or_create_engine(db_path: Optional[Path] = None) -> Engine:
    target = (db_path or get_catalog_db_path()).resolve()
    key = str(target)

    if key in _catalog_engines:
        return _catalog_engines[key]

    target.parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(
        f"sqlite:///{target}",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    _catalog_engines[key] = engine
    return engine


def get_catalog_session(db_path: Optional[Path] = None) -> Session:
    factory = sessionmaker(autocommit=False, autoflush=False, bind=_get_or_create_engine(db_path))
    return factory()


def init_catalog_db(db_path: Optional[Path] = None) -> None:
    CatalogBase.metadata.create_all(bind=_get_or_create_engine(db_path))


def dispose_catalog_engines() -> None:
    """Dispose every cached catalog engine (used on shutdown and in tests)."""
    for engine in _catalog_engines.values():
        engine.dispose()
    _catalog_engines.clear()
