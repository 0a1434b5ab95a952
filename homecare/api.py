import logging
from datetime import datetime, timezone
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .db import SessionLocal
from .config import get_settings
from .errors import ReferenceStoreUnavailable
from .keywords import keyword_model
from .predictor import PredictionEngine
from .reference import DiseaseReference
from . import history, reference
from .schemas import PredictRequest, PredictResponse

log = logging.getLogger("homecare.api")

router = APIRouter()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@lru_cache
def get_prediction_engine() -> PredictionEngine:
    lookup = DiseaseReference(SessionLocal)
    return PredictionEngine(keyword_model(), lookup.find_by_approximate_name, timeout=get_settings().lookup_timeout)


@router.post("/diseases/predict", response_model=PredictResponse)
async def predict_from_symptoms(
    req: PredictRequest,
    db: Session = Depends(get_db),
    engine: PredictionEngine = Depends(get_prediction_engine),
):
    if not req.symptoms.strip():
        raise HTTPException(422, detail="Symptoms are required")

    try:
        outcome = await engine.predict(req.symptoms)
    except ReferenceStoreUnavailable as exc:
        log.error("Disease prediction failed: %s", exc)
        raise HTTPException(503, detail="Failed to predict disease")

    log.info("Prediction: %d candidates, %d returned", outcome["total_matches"], len(outcome["predictions"]))

    if req.user_id is not None and outcome["predictions"]:
        history.record_prediction(db, req.user_id, req.symptoms, outcome)

    return {"success": True, **outcome}


@router.get("/diseases")
async def get_all_diseases(db: Session = Depends(get_db)):
    diseases = reference.list_diseases(db)
    return {"success": True, "diseases": diseases, "count": len(diseases)}


@router.get("/diseases/search")
async def search_diseases(query: str | None = None, db: Session = Depends(get_db)):
    if not query:
        raise HTTPException(422, detail="Search query is required")
    diseases = reference.search_diseases(db, query)
    return {"success": True, "diseases": diseases, "count": len(diseases)}


@router.get("/diseases/{disease_id}")
async def get_disease_details(disease_id: int, db: Session = Depends(get_db)):
    disease = reference.get_disease(db, disease_id)
    if disease is None:
        raise HTTPException(404, detail="Disease not found")
    return {"success": True, "disease": disease}


@router.get("/organs")
async def get_all_organs(db: Session = Depends(get_db)):
    return {"success": True, "organs": reference.list_organs(db)}


@router.get("/organs/{organ_system}/diseases")
async def get_diseases_by_organ(organ_system: str, db: Session = Depends(get_db)):
    diseases = reference.diseases_by_organ(db, organ_system)
    return {"success": True, "diseases": diseases, "count": len(diseases)}


@router.get("/medical-history")
async def get_medical_history(user_id: int, db: Session = Depends(get_db)):
    return {"success": True, "history": history.list_history(db, user_id)}


@router.get("/health")
async def health():
    return {
        "success": True,
        "message": "HOMECARE+ API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
