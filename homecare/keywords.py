"""
Static symptom keyword model.

Each disease lists the phrases searched for in the user's text and the
weights of the phrases that matter most. Unweighted phrases count 1 toward
the score but nothing toward the maximum possible score.
"""
import logging
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from .errors import ModelIntegrityError

log = logging.getLogger("homecare.keywords")


@dataclass(frozen=True)
class KeywordProfile:
    disease_key: str
    keywords: Tuple[str, ...]
    weights: Mapping[str, int]

    def weight_of(self, keyword: str) -> int:
        return self.weights.get(keyword, 1)

    @property
    def max_possible_score(self) -> int:
        return sum(self.weights.values())

    def stray_weights(self) -> List[str]:
        return [k for k in self.weights if k not in self.keywords]


SYMPTOM_KEYWORDS: Dict[str, dict] = {
    "dengue": {
        "keywords": ["high fever", "headache", "pain behind eyes", "joint pain", "muscle pain", "rash", "bleeding"],
        "weights": {"high fever": 3, "pain behind eyes": 3, "joint pain": 2, "rash": 2},
    },
    "tuberculosis": {
        "keywords": ["persistent cough", "cough", "blood in cough", "chest pain", "night sweats", "weight loss", "fever"],
        "weights": {"persistent cough": 3, "blood in cough": 4, "night sweats": 2, "weight loss": 2},
    },
    "typhoid": {
        "keywords": ["prolonged fever", "weakness", "stomach pain", "headache", "loss of appetite"],
        "weights": {"prolonged fever": 3, "stomach pain": 2, "weakness": 2},
    },
    "malaria": {
        "keywords": ["cyclic fever", "chills", "sweating", "headache", "nausea", "vomiting", "muscle pain"],
        "weights": {"cyclic fever": 4, "chills": 3, "sweating": 2},
    },
    "diabetes": {
        "keywords": ["increased thirst", "frequent urination", "weight loss", "fatigue", "blurred vision", "slow healing"],
        "weights": {"increased thirst": 3, "frequent urination": 3, "blurred vision": 2},
    },
    "hypertension": {
        "keywords": ["headache", "dizziness", "nosebleed", "chest pain"],
        # "severe headache" is weighed but not listed, so it only raises the maximum
        "weights": {"severe headache": 2, "dizziness": 2, "nosebleed": 2},
    },
    "hepatitis": {
        "keywords": ["jaundice", "yellow eyes", "yellow skin", "dark urine", "pale stools", "fever", "fatigue"],
        "weights": {"jaundice": 4, "yellow eyes": 4, "dark urine": 3},
    },
    "asthma": {
        "keywords": ["wheezing", "shortness of breath", "chest tightness", "coughing at night", "difficulty breathing"],
        "weights": {"wheezing": 4, "shortness of breath": 3, "chest tightness": 2},
    },
    "pneumonia": {
        "keywords": ["fever", "cough with phlegm", "chest pain", "shortness of breath", "chills"],
        "weights": {"cough with phlegm": 3, "chest pain": 3, "fever": 2},
    },
    "gastroenteritis": {
        "keywords": ["diarrhea", "vomiting", "stomach cramps", "nausea", "fever", "dehydration"],
        "weights": {"diarrhea": 3, "vomiting": 3, "stomach cramps": 2},
    },
    "cholera": {
        "keywords": ["severe diarrhea", "watery diarrhea", "rice water stools", "vomiting", "dehydration", "leg cramps"],
        "weights": {"severe diarrhea": 4, "watery diarrhea": 4, "dehydration": 3},
    },
    "chikungunya": {
        "keywords": ["high fever", "severe joint pain", "muscle pain", "headache", "rash", "fatigue"],
        "weights": {"severe joint pain": 4, "high fever": 3, "rash": 2},
    },
    "common cold": {
        "keywords": ["runny nose", "sneezing", "sore throat", "mild fever", "cough", "congestion"],
        "weights": {"runny nose": 2, "sneezing": 2, "sore throat": 2},
    },
}


def build_keyword_model(raw: Dict[str, dict], strict: bool = False) -> Tuple[KeywordProfile, ...]:
    """Freeze raw keyword data into profiles, keeping declaration order.

    Weights naming keywords that are not listed are reported. With
    ``strict`` they raise ModelIntegrityError, otherwise they are logged and
    kept as declared.
    """
    profiles = []
    for key, data in raw.items():
        profile = KeywordProfile(
            disease_key=key.lower(),
            keywords=tuple(k.lower() for k in data["keywords"]),
            weights=MappingProxyType({k.lower(): int(w) for k, w in data.get("weights", {}).items()}),
        )
        stray = profile.stray_weights()
        if stray:
            if strict:
                raise ModelIntegrityError(profile.disease_key, stray)
            log.warning("Keyword profile %r weighs unlisted keywords: %s", profile.disease_key, ", ".join(stray))
        profiles.append(profile)

    keys = [p.disease_key for p in profiles]
    if len(set(keys)) != len(keys):
        raise ValueError("duplicate disease keys in keyword model")
    return tuple(profiles)


@lru_cache
def keyword_model() -> Tuple[KeywordProfile, ...]:
    """The bundled model, built on first use so load warnings reach the configured logger."""
    return build_keyword_model(SYMPTOM_KEYWORDS)
