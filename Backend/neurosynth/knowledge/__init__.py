# -*- coding: utf-8 -*-
"""
Static knowledge: condition catalog and disease guide
"""

from .catalog import (
    CONDITIONS,
    DEFAULT_CONDITION,
    GENDERS,
    SYMPTOM_CATALOG,
    FALLBACK_SYMPTOMS,
    PLAN_VOCABULARY,
    is_supported,
    resolve_condition,
    symptoms_for,
)
from .disease_guide import get_guide, list_guides

__all__ = [
    "CONDITIONS",
    "DEFAULT_CONDITION",
    "GENDERS",
    "SYMPTOM_CATALOG",
    "FALLBACK_SYMPTOMS",
    "PLAN_VOCABULARY",
    "is_supported",
    "resolve_condition",
    "symptoms_for",
    "get_guide",
    "list_guides",
]
