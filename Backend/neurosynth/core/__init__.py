# -*- coding: utf-8 -*-
"""
Generator core: synthesizer, enricher, exporter and insights
"""

from .synthesizer import RecordSynthesizer, synthesize
from .enricher import NarrativeEnricher
from .exporter import BatchExporter, export_batch, coerce_record_count, serialize_csv, build_filename, collect_test_keys
from .insights import (
    compute_risk_score,
    risk_level,
    age_buckets,
    symptom_frequency,
    risk_buckets,
    summarize_batch,
    summarize_run,
    score_self_assessment,
    AssessmentAnswers,
    AssessmentResult,
    RunSummary,
)

__all__ = [
    "RecordSynthesizer",
    "synthesize",
    "NarrativeEnricher",
    "BatchExporter",
    "export_batch",
    "coerce_record_count",
    "serialize_csv",
    "build_filename",
    "collect_test_keys",
    "compute_risk_score",
    "risk_level",
    "age_buckets",
    "symptom_frequency",
    "risk_buckets",
    "summarize_batch",
    "summarize_run",
    "score_self_assessment",
    "AssessmentAnswers",
    "AssessmentResult",
    "RunSummary",
]
