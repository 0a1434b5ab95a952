from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


class PredictRequest(BaseModel):
    symptoms: str
    user_id: Optional[int] = None


class Prediction(BaseModel):
    disease_key: str
    confidence: int = Field(ge=0, le=95)
    matched_keywords: List[str]
    raw_score: int
    reference: Dict[str, Any]


class PredictResponse(BaseModel):
    success: bool = True
    predictions: List[Prediction]
    total_matches: int
    disclaimer: str
