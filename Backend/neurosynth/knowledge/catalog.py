# -*- coding: utf-8 -*-
"""
Static reference data: supported conditions, symptom catalog, plan vocabulary
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

CONDITIONS: Tuple[str, ...] = (
    "Alzheimer's",
    "Parkinson's",
    "Epilepsy",
    "Stroke",
    "Brain Tumor",
    "Multiple Sclerosis",
    "Depression",
    "Anxiety",
    "PTSD",
    "Cognitive Decline",
)

DEFAULT_CONDITION = CONDITIONS[0]

GENDERS: Tuple[str, ...] = ("Male", "Female", "Other")

SYMPTOM_CATALOG: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "Alzheimer's": ("memory loss", "confusion", "disorientation", "task difficulty"),
    "Parkinson's": ("tremor", "rigidity", "bradykinesia", "balance issues"),
    "Epilepsy": ("seizures", "aura", "fatigue post-ictal", "staring spells"),
    "Stroke": ("hemiparesis", "slurred speech", "facial droop", "vision loss"),
    "Brain Tumor": ("headache", "nausea", "seizures", "cognitive changes"),
    "Multiple Sclerosis": ("numbness", "optic neuritis", "spasticity", "fatigue"),
    "Depression": ("low mood", "anhedonia", "sleep disturbance", "poor concentration"),
    "Anxiety": ("restlessness", "tachycardia", "sweating", "insomnia"),
    "PTSD": ("flashbacks", "hypervigilance", "avoidance", "nightmares"),
    "Cognitive Decline": ("forgetfulness", "word-finding difficulty", "slowed processing", "disorientation"),
})

FALLBACK_SYMPTOMS: Tuple[str, ...] = ("nonspecific symptom",)

PLAN_VOCABULARY: Tuple[str, ...] = (
    "CBT",
    "SSRIs",
    "rehabilitation",
    "physiotherapy",
    "supportive care",
    "lifestyle changes",
)


def is_supported(condition: Optional[str]) -> bool:
    return condition in CONDITIONS


def resolve_condition(condition: Optional[str]) -> str:
    """
    Map a caller-supplied condition onto the supported set

    Anything outside the set (including None) becomes DEFAULT_CONDITION;
    no error is raised.
    """
    if is_supported(condition):
        return condition
    return DEFAULT_CONDITION


def symptoms_for(condition: str) -> Tuple[str, ...]:
    return SYMPTOM_CATALOG.get(condition, FALLBACK_SYMPTOMS)
