# -*- coding: utf-8 -*-
"""
Backend/neurosynth/knowledge/disease_guide.py
Per-condition educational content for the disease guide page
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .catalog import CONDITIONS, resolve_condition
from ..utils.logger import get_logger

logger = get_logger("knowledge.DiseaseGuide")

KNOWLEDGE_ROOT = Path(__file__).parent
GUIDE_FILE = KNOWLEDGE_ROOT / "disease_guide.yaml"

_cache: Optional[Dict[str, Dict[str, Any]]] = None


def _load_guides() -> Dict[str, Dict[str, Any]]:
    """Read the guide file once; every supported condition must have an entry"""
    with open(GUIDE_FILE, 'r', encoding='utf-8') as f:
        raw = yaml.safe_load(f) or {}
    
    missing = [c for c in CONDITIONS if c not in raw]
    if missing:
        raise ValueError(f"disease guide is missing entries for: {', '.join(missing)}")
    
    guides = {}
    for condition in CONDITIONS:
        entry = raw[condition]
        guides[condition] = {
            "condition": condition,
            "overview": entry.get("overview", ""),
            "symptoms": list(entry.get("symptoms", [])),
            "tests": list(entry.get("tests", [])),
            "links": [
                {"label": link["label"], "url": link["url"]}
                for link in entry.get("links", [])
            ],
        }
    
    logger.info(f"✅ Disease guide loaded: {len(guides)} conditions")
    return guides


def _guides() -> Dict[str, Dict[str, Any]]:
    global _cache
    if _cache is None:
        _cache = _load_guides()
    return _cache


def get_guide(condition: Optional[str]) -> Dict[str, Any]:
    """
    Guide entry for a condition; unknown names fall back to the default condition
    
    Args:
        condition: requested condition name
        
    Returns:
        dict with condition, overview, symptoms, tests and links
    """
    entry = _guides()[resolve_condition(condition)]
    return {
        **entry,
        "symptoms": list(entry["symptoms"]),
        "tests": list(entry["tests"]),
        "links": [dict(link) for link in entry["links"]],
    }


def list_guides() -> List[Dict[str, Any]]:
    """All guide entries in condition order"""
    return [get_guide(condition) for condition in CONDITIONS]
