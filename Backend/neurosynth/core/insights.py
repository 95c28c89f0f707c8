# -*- coding: utf-8 -*-
"""
Batch insights

Heuristic risk scoring, age and symptom distributions, the self-assessment
quiz and run summaries. All functions are pure; nothing here is clinical.
"""

import math
import time
import uuid
from collections import Counter
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional

from ..models.record import PatientRecord

RISK_LEVELS = ("Low", "Moderate", "High")
AGE_BUCKETS = ("0-17", "18-29", "30-44", "45-59", "60-74", "75+")

ASSESSMENT_NOTES = {
    "High": "This screening suggests elevated risk. Consider seeking professional medical evaluation.",
    "Moderate": "Some risk indicators present. Monitor symptoms and consider a check-up.",
    "Low": "Low risk indicators based on inputs.",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_score(value: float) -> int:
    return max(0, min(100, _round_half_up(value)))


def _number(value: Any, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


# ==================== Risk scoring ====================

def compute_risk_score(record: PatientRecord) -> int:
    """
    Heuristic 0-100 risk score from diagnosis, tests, age and symptoms
    """
    score = 10.0
    diag = record.diagnosis
    tests = record.test_results or {}
    symptoms = [s.lower() for s in record.symptoms]

    def has(fragment: str) -> bool:
        return any(fragment in s for s in symptoms)

    if diag in ("Alzheimer's", "Cognitive Decline"):
        mmse = _number(tests.get("MMSE", 30), 30)
        moca = _number(tests.get("MoCA", 27), 27)
        score += (max(0.0, 30 - mmse) / 30) * 40
        score += (max(0.0, 27 - moca) / 27) * 20
        if record.age >= 65:
            score += 10
        if has("memory") or has("confusion"):
            score += 10
    elif diag == "Depression":
        score += (_number(tests.get("PHQ-9", 0), 0) / 27) * 70
    elif diag == "Anxiety":
        score += (_number(tests.get("GAD-7", 0), 0) / 21) * 60
    elif diag == "Stroke":
        score += (_number(tests.get("NIHSS", 0), 0) / 42) * 80
        if has("slurred") or has("hemiparesis") or has("facial"):
            score += 10
    elif diag == "Epilepsy":
        if str(tests.get("EEG", "")).lower() == "abnormal":
            score += 40
        if has("seizure"):
            score += 30
    elif diag == "Brain Tumor":
        if has("seizure"):
            score += 25
        if has("headache"):
            score += 15
        if has("cognitive"):
            score += 20
    elif diag == "Multiple Sclerosis":
        if has("optic") or has("numbness") or has("spasticity"):
            score += 30

    return _clamp_score(score)


def risk_level(score: float) -> str:
    if score >= 60:
        return "High"
    if score >= 30:
        return "Moderate"
    return "Low"


# ==================== Distributions ====================

def _age_bucket(age: int) -> str:
    if age < 18:
        return "0-17"
    if age < 30:
        return "18-29"
    if age < 45:
        return "30-44"
    if age < 60:
        return "45-59"
    if age < 75:
        return "60-74"
    return "75+"


def age_buckets(records: Iterable[PatientRecord]) -> Dict[str, int]:
    buckets = {name: 0 for name in AGE_BUCKETS}
    for r in records:
        buckets[_age_bucket(r.age)] += 1
    return buckets


def symptom_frequency(records: Iterable[PatientRecord]) -> Dict[str, int]:
    return dict(Counter(s for r in records for s in r.symptoms))


def risk_buckets(records: Iterable[PatientRecord]) -> Dict[str, int]:
    buckets = {level: 0 for level in RISK_LEVELS}
    for r in records:
        buckets[risk_level(compute_risk_score(r))] += 1
    return buckets


def summarize_batch(records: List[PatientRecord]) -> Dict[str, Any]:
    """Everything the insights tab needs for one batch"""
    scores = {r.id: compute_risk_score(r) for r in records}
    levels = {level: 0 for level in RISK_LEVELS}
    for score in scores.values():
        levels[risk_level(score)] += 1
    return {
        "age_buckets": age_buckets(records),
        "symptom_frequency": symptom_frequency(records),
        "risk_buckets": levels,
        "risk_scores": scores,
    }


# ==================== Run history ====================

@dataclass
class RunSummary:
    id: str
    ts: int
    disease: str
    count: int
    low: int
    moderate: int
    high: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_run(condition: str, records: List[PatientRecord], ts: Optional[int] = None) -> RunSummary:
    """
    History entry for the batch that was just generated

    Counts come from `records` itself, never from a previously displayed batch.
    """
    buckets = risk_buckets(records)
    return RunSummary(
        id=str(uuid.uuid4()),
        ts=ts if ts is not None else int(time.time() * 1000),
        disease=condition,
        count=len(records),
        low=buckets["Low"],
        moderate=buckets["Moderate"],
        high=buckets["High"],
    )


# ==================== Self-assessment ====================

@dataclass
class AssessmentAnswers:
    age: int = 50
    memory_issues: bool = False
    seizures: bool = False
    speech_trouble: bool = False
    low_mood: bool = False
    anxious: bool = False


@dataclass
class AssessmentResult:
    score: int
    level: str
    note: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def score_self_assessment(condition: Optional[str], answers: AssessmentAnswers) -> AssessmentResult:
    """
    Toy screening quiz, weighted toward the selected condition

    Any condition outside the weighted ones (including None) uses the
    generic +20-per-answer scheme.
    """
    score = 10
    if condition in ("Alzheimer's", "Cognitive Decline"):
        if answers.age >= 65:
            score += 15
        if answers.memory_issues:
            score += 40
    elif condition == "Stroke":
        if answers.speech_trouble:
            score += 40
        if answers.seizures:
            score += 10
    elif condition == "Epilepsy":
        if answers.seizures:
            score += 50
    elif condition == "Depression":
        if answers.low_mood:
            score += 50
    elif condition == "Anxiety":
        if answers.anxious:
            score += 50
    else:
        flags = (
            answers.memory_issues,
            answers.seizures,
            answers.speech_trouble,
            answers.low_mood,
            answers.anxious,
        )
        score += 20 * sum(1 for flag in flags if flag)

    if answers.age > 75:
        score += 10

    score = _clamp_score(score)
    level = risk_level(score)
    return AssessmentResult(score=score, level=level, note=ASSESSMENT_NOTES[level])
