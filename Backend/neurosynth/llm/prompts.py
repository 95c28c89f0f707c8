# -*- coding: utf-8 -*-
"""
Prompt templates and canned narratives
"""

import json
from typing import Any, Dict, Sequence

NARRATIVE_SYSTEM_PROMPT = (
    "You are a clinical AI that writes concise, neutral medical notes "
    "(3-5 sentences). No PII."
)

FALLBACK_NARRATIVE = "Synthetic note."
RATE_LIMITED_NARRATIVE = "Synthetic note (narrative service busy)."


def build_narrative_prompt(record: Dict[str, Any]) -> str:
    return f"Create a medical note for this synthetic patient: {json.dumps(record, ensure_ascii=False)}"


def offline_narrative(diagnosis: str) -> str:
    """Narrative used when no API key is configured"""
    return f"Synthetic note for {diagnosis} - no key configured."


def local_narrative(age: int, gender: str, symptoms: Sequence[str], diagnosis: str) -> str:
    return f"Synthetic record: {age}yo {gender} with {', '.join(symptoms)} consistent with {diagnosis}."
