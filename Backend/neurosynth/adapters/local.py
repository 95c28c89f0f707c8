# -*- coding: utf-8 -*-
"""
In-process fallback generator

Produces the same wire form as /api/generate without any network I/O;
narratives come from a local template.
"""

import random
from typing import Any, Dict, Optional

from ..core.exporter import BatchExporter, coerce_record_count
from ..core.synthesizer import RecordSynthesizer
from ..knowledge.catalog import resolve_condition
from ..llm.prompts import local_narrative
from ..models.record import Batch


def synthesize_local_batch(
    condition: Optional[str],
    n: Any = None,
    rng: Optional[random.Random] = None,
) -> Batch:
    condition = resolve_condition(condition)
    count = coerce_record_count(n)
    synthesizer = RecordSynthesizer(rng)

    records = [
        r.with_narrative(local_narrative(r.age, r.gender, r.symptoms, r.diagnosis))
        for r in synthesizer.synthesize_many(condition, count)
    ]
    return BatchExporter(synthesizer=synthesizer).assemble(condition, records)


def generate_local(condition: Optional[str], n: Any = None) -> Dict[str, Any]:
    """Wire form of a locally generated batch"""
    return synthesize_local_batch(condition, n).to_dict()
