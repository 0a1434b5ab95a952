from sqlalchemy.orm import Session
from .db import SessionLocal
from . import models
from .data import ORGANS, DISEASES


def bootstrap_if_empty(session_factory=SessionLocal):
    """Load reference organs and diseases idempotently."""
    db: Session = session_factory()
    try:
        if db.query(models.Organ).count() == 0:
            db.add_all([models.Organ(**o) for o in ORGANS])
        if db.query(models.Disease).count() == 0:
            db.add_all([models.Disease(**d) for d in DISEASES])
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
