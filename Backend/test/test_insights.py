"""Tests for risk scoring, distributions and the self-assessment quiz."""

import pytest

from neurosynth.core.insights import (
    AssessmentAnswers,
    age_buckets,
    compute_risk_score,
    risk_buckets,
    risk_level,
    score_self_assessment,
    summarize_batch,
    summarize_run,
    symptom_frequency,
)
from neurosynth.models import PatientRecord


def _record(diagnosis, age=40, symptoms=(), tests=None, rid="r"):
    return PatientRecord(id=rid, age=age, gender="Female", diagnosis=diagnosis,
                         symptoms=list(symptoms), test_results=tests or {}, treatment_plan=["CBT"])


def test_worst_alzheimers_case_caps_at_100():
    record = _record("Alzheimer's", age=80, symptoms=["memory loss"], tests={"MMSE": 0, "MoCA": 0})
    assert compute_risk_score(record) == 90


def test_stroke_score():
    record = _record("Stroke", symptoms=["slurred speech"], tests={"NIHSS": 21})
    assert compute_risk_score(record) == 60
    assert risk_level(60) == "High"


def test_epilepsy_score():
    record = _record("Epilepsy", symptoms=["seizures", "aura"], tests={"EEG": "Abnormal"})
    assert compute_risk_score(record) == 80


def test_depression_rounds_half_up():
    # 10 + (9/27)*70 = 33.33...
    assert compute_risk_score(_record("Depression", tests={"PHQ-9": 9})) == 33


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", float("inf")])
def test_non_finite_test_values_use_defaults(value):
    assert compute_risk_score(_record("Depression", tests={"PHQ-9": value})) == 10
    assert compute_risk_score(_record("Alzheimer's", tests={"MMSE": value, "MoCA": value})) == 10


def test_condition_without_rules_scores_base():
    assert compute_risk_score(_record("PTSD", symptoms=["flashbacks"])) == 10


@pytest.mark.parametrize("score, level", [(0, "Low"), (29, "Low"), (30, "Moderate"), (59, "Moderate"), (60, "High")])
def test_risk_levels(score, level):
    assert risk_level(score) == level


def test_age_buckets_boundaries():
    records = [_record("PTSD", age=a) for a in (17, 18, 29, 30, 45, 59, 60, 74, 75, 95)]
    assert age_buckets(records) == {
        "0-17": 1, "18-29": 2, "30-44": 1, "45-59": 2, "60-74": 2, "75+": 2,
    }


def test_symptom_frequency():
    records = [_record("PTSD", symptoms=["a", "b"]), _record("PTSD", symptoms=["b"])]
    assert symptom_frequency(records) == {"a": 1, "b": 2}


def test_summaries_use_the_given_batch():
    records = [
        _record("Stroke", symptoms=["facial droop"], tests={"NIHSS": 42}, rid="1"),
        _record("Stroke", tests={"NIHSS": 0}, rid="2"),
        _record("Stroke", tests={"NIHSS": 14}, rid="3"),
    ]
    assert risk_buckets(records) == {"Low": 1, "Moderate": 1, "High": 1}

    summary = summarize_batch(records)
    assert summary["risk_scores"] == {"1": 100, "2": 10, "3": 37}
    assert summary["risk_buckets"] == {"Low": 1, "Moderate": 1, "High": 1}

    run = summarize_run("Stroke", records, ts=123)
    assert (run.count, run.low, run.moderate, run.high, run.ts) == (3, 1, 1, 1, 123)


def test_self_assessment_for_alzheimers():
    result = score_self_assessment("Alzheimer's", AssessmentAnswers(age=80, memory_issues=True))
    assert result.score == 75
    assert result.level == "High"
    assert "professional" in result.note


def test_self_assessment_generic_scheme():
    answers = AssessmentAnswers(age=40, seizures=True, low_mood=True)
    result = score_self_assessment("PTSD", answers)
    assert result.score == 50
    assert result.level == "Moderate"


def test_self_assessment_capped():
    answers = AssessmentAnswers(age=90, memory_issues=True, seizures=True, speech_trouble=True,
                                low_mood=True, anxious=True)
    assert score_self_assessment(None, answers).score == 100


def test_self_assessment_low():
    result = score_self_assessment("Depression", AssessmentAnswers())
    assert result.to_dict() == {"score": 10, "level": "Low", "note": "Low risk indicators based on inputs."}
