"""
Rule-based symptom matcher.

Scores free text against the keyword model, ranks the candidates and joins
the best ones with the disease reference store.
"""
import asyncio
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .errors import LookupFailure, ReferenceStoreUnavailable
from .keywords import KeywordProfile

log = logging.getLogger("homecare.predictor")

DISCLAIMER = (
    "This is an AI-based prediction. Please consult a healthcare professional for accurate diagnosis."
)
MAX_CONFIDENCE = 95
TOP_K = 3

ReferenceLookup = Callable[[str], Optional[Dict[str, Any]]]


@dataclass
class ScoredCandidate:
    disease_key: str
    raw_score: int
    matched_keywords: List[str] = field(default_factory=list)
    confidence: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "disease_key": self.disease_key,
            "confidence": self.confidence,
            "matched_keywords": list(self.matched_keywords),
            "raw_score": self.raw_score,
        }


def confidence_for(raw_score: int, max_possible_score: int) -> int:
    # denominator clamped to 1 for profiles without explicit weights
    pct = min(raw_score / max(max_possible_score, 1) * 100, MAX_CONFIDENCE)
    return int(math.floor(pct + 0.5))


def score_profile(profile: KeywordProfile, text: str) -> Optional[ScoredCandidate]:
    """Score one profile against already-lowercased text; None when nothing matched."""
    score = 0
    matched: List[str] = []
    for keyword in profile.keywords:
        if keyword in text:
            score += profile.weight_of(keyword)
            matched.append(keyword)
    if score == 0:
        return None
    return ScoredCandidate(
        disease_key=profile.disease_key,
        raw_score=score,
        matched_keywords=matched,
        confidence=confidence_for(score, profile.max_possible_score),
    )


def score(model: Iterable[KeywordProfile], symptom_text: str) -> List[ScoredCandidate]:
    """All nonzero candidates, highest raw score first, ties in model order."""
    text = (symptom_text or "").lower()
    candidates = [c for c in (score_profile(p, text) for p in model) if c is not None]
    return sorted(candidates, key=lambda c: c.raw_score, reverse=True)


class PredictionEngine:
    def __init__(
        self,
        model: Sequence[KeywordProfile],
        lookup: ReferenceLookup,
        timeout: float = 2.0,
        top_k: int = TOP_K,
    ):
        self.model = model
        self.lookup = lookup
        self.timeout = timeout
        self.top_k = top_k

    def rank(self, symptom_text: str) -> List[ScoredCandidate]:
        return score(self.model, symptom_text)

    def _lookup(self, disease_key: str) -> Optional[Dict[str, Any]]:
        # wrapped on the worker thread so only wait_for raises TimeoutError
        try:
            return self.lookup(disease_key)
        except Exception as exc:
            raise LookupFailure(disease_key, exc) from exc

    async def _join(self, candidate: ScoredCandidate) -> Optional[Dict[str, Any]]:
        try:
            return await asyncio.wait_for(
                asyncio.to_thread(self._lookup, candidate.disease_key), timeout=self.timeout
            )
        except asyncio.TimeoutError:
            log.warning("Reference lookup for %r timed out after %ss", candidate.disease_key, self.timeout)
            return None

    async def predict(self, symptom_text: str) -> Dict[str, Any]:
        ranked = self.rank(symptom_text)
        top = ranked[: self.top_k]

        joined = await asyncio.gather(*(self._join(c) for c in top), return_exceptions=True)

        predictions = []
        failures = 0
        for candidate, record in zip(top, joined):
            if isinstance(record, LookupFailure):
                failures += 1
                log.warning("Dropping %r: %s", candidate.disease_key, record)
                continue
            if isinstance(record, BaseException):
                raise record
            if record is None:
                log.info("No reference record for %r, dropping it", candidate.disease_key)
                continue
            predictions.append({**candidate.to_dict(), "reference": record})

        if top and failures == len(top):
            raise ReferenceStoreUnavailable(f"all {failures} reference lookups failed")

        return {
            "predictions": predictions,
            "total_matches": len(ranked),
            "disclaimer": DISCLAIMER,
        }
