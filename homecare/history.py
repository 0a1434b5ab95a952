import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from . import models

log = logging.getLogger("homecare.history")

HISTORY_LIMIT = 50


def record_prediction(db: Session, user_id: int, symptoms: str, outcome: Dict[str, Any]) -> Optional[models.MedicalHistory]:
    """Persist the top prediction of ``outcome``; nothing is written without one."""
    predictions = outcome.get("predictions") or []
    if not predictions:
        return None

    top = predictions[0]
    reference = top.get("reference") or {}
    entry = models.MedicalHistory(
        user_id=user_id,
        symptoms=symptoms,
        predicted_disease=reference.get("disease_name") or top["disease_key"],
        confidence_score=top["confidence"],
        notes=f"Matched symptoms: {', '.join(top['matched_keywords'])}",
    )
    try:
        db.add(entry)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(entry)
    log.info("Recorded %s for user %s", entry.predicted_disease, user_id)
    return entry


def list_history(db: Session, user_id: int, limit: int = HISTORY_LIMIT) -> List[Dict[str, Any]]:
    stmt = (
        select(models.MedicalHistory)
        .where(models.MedicalHistory.user_id == user_id)
        .order_by(models.MedicalHistory.consultation_date.desc(), models.MedicalHistory.history_id.desc())
        .limit(limit)
    )
    rows = db.execute(stmt).scalars().all()
    return [
        {
            "history_id": r.history_id,
            "user_id": r.user_id,
            "symptoms": r.symptoms,
            "predicted_disease": r.predicted_disease,
            "confidence_score": r.confidence_score,
            "notes": r.notes,
            "consultation_date": r.consultation_date,
        }
        for r in rows
    ]
