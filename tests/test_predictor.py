import asyncio
import time

import pytest

from homecare.errors import ReferenceStoreUnavailable
from homecare.keywords import build_keyword_model, keyword_model
from homecare.predictor import DISCLAIMER, PredictionEngine, confidence_for, score


REFERENCE = {key: {"disease_name": key.title()} for key in (p.disease_key for p in keyword_model())}


def lookup(key):
    return REFERENCE.get(key)


def run(engine, text):
    return asyncio.run(engine.predict(text))


FIVE = build_keyword_model({
    "alpha": {"keywords": ["aaa"], "weights": {"aaa": 1}},
    "beta": {"keywords": ["bbb"], "weights": {"bbb": 5}},
    "gamma": {"keywords": ["ccc"], "weights": {"ccc": 4}},
    "delta": {"keywords": ["ddd"], "weights": {"ddd": 3}},
    "epsilon": {"keywords": ["eee"], "weights": {"eee": 2}},
})


def test_dengue_example():
    candidates = score(keyword_model(), "I have high fever and joint pain")
    top = candidates[0]
    assert top.disease_key == "dengue"
    assert top.matched_keywords == ["high fever", "joint pain"]
    assert top.raw_score == 5
    assert top.confidence == 50
    assert [c.disease_key for c in candidates[:3]] == ["dengue", "chikungunya", "pneumonia"]


def test_no_keywords_no_candidates():
    engine = PredictionEngine(keyword_model(), lookup)
    outcome = run(engine, "I feel great today")
    assert outcome == {"predictions": [], "total_matches": 0, "disclaimer": DISCLAIMER}


def test_empty_text_is_zero_matches():
    assert score(keyword_model(), "") == []
    outcome = run(PredictionEngine(keyword_model(), lookup), "")
    assert outcome["total_matches"] == 0


def test_matching_is_case_insensitive():
    assert score(keyword_model(), "WHEEZING")[0].disease_key == "asthma"


def test_substring_matches_inside_words():
    keys = [c.disease_key for c in score(keyword_model(), "I had a crash")]
    # "rash" inside "crash"; equal scores keep model order
    assert keys == ["dengue", "chikungunya"]


def test_confidence_capped_at_95():
    text = "wheezing, shortness of breath, chest tightness, coughing at night, difficulty breathing"
    asthma = next(c for c in score(keyword_model(), text) if c.disease_key == "asthma")
    assert asthma.raw_score == 11
    assert asthma.confidence == 95


def test_unlisted_weight_only_raises_denominator():
    hyper = next(c for c in score(keyword_model(), "severe headache, dizziness and a nosebleed") if c.disease_key == "hypertension")
    assert hyper.matched_keywords == ["headache", "dizziness", "nosebleed"]
    assert hyper.raw_score == 5
    assert hyper.confidence == 83


def test_unweighted_profile_does_not_divide_by_zero():
    model = build_keyword_model({"plain": {"keywords": ["itch", "scratch"]}})
    (candidate,) = score(model, "itch and scratch")
    assert candidate.raw_score == 2
    assert candidate.confidence == 95


def test_confidence_rounds_half_up():
    assert confidence_for(1, 8) == 13
    assert confidence_for(0, 0) == 0


def test_confidence_monotonic_in_raw_score():
    values = [confidence_for(raw, 10) for raw in range(1, 20)]
    assert values == sorted(values)
    assert all(0 <= v <= 95 for v in values)


def test_five_matches_truncated_to_three():
    engine = PredictionEngine(FIVE, lambda key: {"disease_name": key})
    outcome = run(engine, "aaa bbb ccc ddd eee")
    assert outcome["total_matches"] == 5
    assert [p["disease_key"] for p in outcome["predictions"]] == ["beta", "gamma", "delta"]
    scores = [p["raw_score"] for p in outcome["predictions"]]
    assert scores == sorted(scores, reverse=True)


def test_missing_reference_drops_candidate():
    engine = PredictionEngine(FIVE, lambda key: None if key == "gamma" else {"disease_name": key})
    outcome = run(engine, "aaa bbb ccc ddd eee")
    assert outcome["total_matches"] == 5
    assert [p["disease_key"] for p in outcome["predictions"]] == ["beta", "delta"]
    assert outcome["predictions"][0]["reference"] == {"disease_name": "beta"}


def test_failed_lookup_drops_candidate():
    def flaky(key):
        if key == "beta":
            raise ConnectionError("store down")
        return {"disease_name": key}

    outcome = run(PredictionEngine(FIVE, flaky), "aaa bbb ccc ddd eee")
    assert [p["disease_key"] for p in outcome["predictions"]] == ["gamma", "delta"]


def test_all_lookups_failing_raises():
    def down(key):
        raise ConnectionError("store down")

    with pytest.raises(ReferenceStoreUnavailable):
        run(PredictionEngine(FIVE, down), "aaa bbb")


def test_slow_lookup_treated_as_not_found():
    def slow(key):
        if key == "beta":
            time.sleep(0.3)
        return {"disease_name": key}

    outcome = run(PredictionEngine(FIVE, slow, timeout=0.05), "bbb ccc")
    assert [p["disease_key"] for p in outcome["predictions"]] == ["gamma"]
    assert outcome["total_matches"] == 2


def test_predict_is_idempotent():
    engine = PredictionEngine(keyword_model(), lookup)
    text = "persistent cough with night sweats and weight loss"
    assert run(engine, text) == run(engine, text)


def test_prediction_shape():
    outcome = run(PredictionEngine(keyword_model(), lookup), "I have high fever and joint pain")
    first = outcome["predictions"][0]
    assert set(first) == {"disease_key", "confidence", "matched_keywords", "raw_score", "reference"}
    assert outcome["total_matches"] == 6
    assert len(outcome["predictions"]) == 3


def test_lookups_run_concurrently():
    def slow(key):
        time.sleep(0.3)
        return {"disease_name": key}

    engine = PredictionEngine(FIVE, slow, timeout=0.5)
    started = time.monotonic()
    outcome = run(engine, "aaa bbb ccc ddd eee")
    elapsed = time.monotonic() - started
    assert [p["disease_key"] for p in outcome["predictions"]] == ["beta", "gamma", "delta"]
    assert elapsed < 0.8


def test_store_timeout_error_counts_as_failure():
    def read_timeout(key):
        raise TimeoutError("socket read timed out")

    with pytest.raises(ReferenceStoreUnavailable):
        run(PredictionEngine(FIVE, read_timeout, timeout=1.0), "aaa bbb ccc")


def test_all_lookups_timing_out_is_not_an_outage():
    def hang(key):
        time.sleep(0.3)
        return {"disease_name": key}

    outcome = run(PredictionEngine(FIVE, hang, timeout=0.05), "bbb ccc")
    assert outcome["predictions"] == []
    assert outcome["total_matches"] == 2


def test_all_references_missing_is_not_an_outage():
    outcome = run(PredictionEngine(FIVE, lambda key: None), "aaa bbb ccc ddd eee")
    assert outcome["predictions"] == []
    assert outcome["total_matches"] == 5
