from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from . import models

SUMMARY_COLUMNS = ("disease_id", "disease_name", "organ_system", "severity_level", "description")


class DiseaseReference:
    """Reference-store lookup used by the prediction engine.

    Each call opens its own session so lookups can run on separate threads.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def find_by_approximate_name(self, key: str) -> Optional[Dict[str, Any]]:
        with self.session_factory() as db:
            stmt = (
                select(models.Disease)
                .where(func.lower(models.Disease.disease_name).like(f"%{key.lower()}%"))
                .order_by(models.Disease.disease_id)
                .limit(1)
            )
            row = db.execute(stmt).scalars().first()
            return row.to_dict() if row else None


def _summary(d: models.Disease) -> Dict[str, Any]:
    return {c: getattr(d, c) for c in SUMMARY_COLUMNS}


def list_diseases(db: Session) -> List[Dict[str, Any]]:
    rows = db.execute(select(models.Disease).order_by(models.Disease.disease_name)).scalars().all()
    return [_summary(r) for r in rows]


def search_diseases(db: Session, query: str, limit: int = 20) -> List[Dict[str, Any]]:
    like = f"%{query}%"
    stmt = (
        select(models.Disease)
        .where(or_(
            models.Disease.disease_name.like(like),
            models.Disease.symptoms.like(like),
            models.Disease.organ_system.like(like),
        ))
        .order_by(models.Disease.disease_name)
        .limit(limit)
    )
    return [r.to_dict() for r in db.execute(stmt).scalars().all()]


def get_disease(db: Session, disease_id: int) -> Optional[Dict[str, Any]]:
    row = db.get(models.Disease, disease_id)
    return row.to_dict() if row else None


def diseases_by_organ(db: Session, organ_system: str) -> List[Dict[str, Any]]:
    stmt = (
        select(models.Disease)
        .where(models.Disease.organ_system == organ_system)
        .order_by(models.Disease.disease_name)
    )
    return [r.to_dict() for r in db.execute(stmt).scalars().all()]


def list_organs(db: Session) -> List[Dict[str, Any]]:
    rows = db.execute(select(models.Organ).order_by(models.Organ.organ_name)).scalars().all()
    return [
        {"organ_id": r.organ_id, "organ_name": r.organ_name, "organ_system": r.organ_system, "description": r.description}
        for r in rows
    ]
