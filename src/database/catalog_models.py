"""Catalog database models."""

from datetime import datetime
from sqlalchemy import Column, DateTime, Integer, String

from .catalog_base import CatalogBase


class CatalogSketch(CatalogBase):
    """Catalog entry for a sketch folder on disk."""

    __tablename__ = "sketches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    folder = Column(String(512), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
