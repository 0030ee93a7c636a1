"""Catalog repository helpers."""

from pathlib import Path
from typing import List, Optional

from sqlalchemy.orm import Session

from .catalog_models import CatalogSketch


class CatalogSketchRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_all(self) -> List[CatalogSketch]:
        # Insertion order is the storage order shown in the browser
        return (
            self.session.query(CatalogSketch)
            .order_by(CatalogSketch.id.asc())
            .all()
        )

    def get_by_name(self, name: str) -> Optional[CatalogSketch]:
        return (
            self.session.query(CatalogSketch)
            .filter(CatalogSketch.name == name)
            .first()
        )

    def create(self, name: str, folder: Path) -> CatalogSketch:
        sketch = CatalogSketch(name=name, folder=str(folder))
        self.session.add(sketch)
        self.session.commit()
        self.session.refresh(sketch)
        return sketch

    def delete(self, sketch: CatalogSketch) -> None:
        self.session.delete(sketch)
        self.session.commit()
