# -*- coding: utf-8 -*-
"""
Batch/CSV exporter

Runs the synthesizer N times, enriches every record and serializes the
batch into the CSV export format:

    id,age,gender,diagnosis,test_<key>...,symptoms,treatment_plan,narrative
"""

import math
import re
from typing import Any, List, Optional

from ..config import get_config
from ..knowledge.catalog import resolve_condition
from ..llm.client import LLMClient
from ..models.record import Batch, PatientRecord
from ..utils.logger import get_logger
from .enricher import NarrativeEnricher
from .synthesizer import RecordSynthesizer

logger = get_logger("BatchExporter")

DEFAULT_RECORD_COUNT = 10
BASE_COLUMNS = ["id", "age", "gender", "diagnosis"]
TAIL_COLUMNS = ["symptoms", "treatment_plan", "narrative"]
LIST_SEPARATOR = "; "


# ==================== Input coercion ====================

def coerce_record_count(value: Any, default: int = DEFAULT_RECORD_COUNT) -> int:
    """
    Turn a loosely typed record count into a positive int

    Absent, non-numeric, non-finite, zero or negative values give `default`;
    anything else is truncated and clamped to at least 1.
    """
    if value is None or isinstance(value, (list, dict)):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number) or number <= 0:
        return default
    return max(int(number), 1)


# ==================== CSV serialization ====================

def collect_test_keys(records: List[PatientRecord]) -> List[str]:
    """Union of test-result keys across the batch, in first-seen order"""
    keys: List[str] = []
    for record in records:
        for key in record.test_results:
            if key not in keys:
                keys.append(key)
    return keys


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def serialize_csv(records: List[PatientRecord]) -> str:
    """
    Render records as CSV text (rows joined by '\\n', no trailing newline)
    """
    keys = collect_test_keys(records)
    header = BASE_COLUMNS + [f"test_{k}" for k in keys] + TAIL_COLUMNS
    rows = [",".join(header)]

    for r in records:
        cells = [r.id, str(r.age), r.gender, r.diagnosis]
        cells += [_cell(r.test_results.get(k)) for k in keys]
        cells += [
            _quoted(LIST_SEPARATOR.join(r.symptoms)),
            _quoted(LIST_SEPARATOR.join(r.treatment_plan)),
            _quoted(r.narrative or ""),
        ]
        rows.append(",".join(cells))

    return "\n".join(rows)


def build_filename(condition: str, n: int, prefix: str = "neurosynth") -> str:
    slug = re.sub(r"\s+", "_", condition).lower()
    return f"{prefix}_{slug}_{n}.csv"


# ==================== Exporter ====================

class BatchExporter:
    """
    Produces complete batches: synthesize, enrich, serialize

    Args:
        synthesizer: record source
        enricher: narrative source
        default_records: count used when the request gives none
        filename_prefix: first token of the export filename
    """

    def __init__(
        self,
        synthesizer: Optional[RecordSynthesizer] = None,
        enricher: Optional[NarrativeEnricher] = None,
        default_records: int = DEFAULT_RECORD_COUNT,
        filename_prefix: str = "neurosynth",
    ):
        self.synthesizer = synthesizer or RecordSynthesizer()
        self.enricher = enricher or NarrativeEnricher()
        self.default_records = default_records
        self.filename_prefix = filename_prefix

    def assemble(self, condition: str, records: List[PatientRecord]) -> Batch:
        """Wrap already-enriched records into a Batch with its CSV export"""
        return Batch(
            condition=condition,
            records=records,
            csv_text=serialize_csv(records),
            filename=build_filename(condition, len(records), self.filename_prefix),
        )

    async def export_batch(self, condition: Optional[str], n: Any = None) -> Batch:
        """
        Generate, enrich and serialize one batch

        Args:
            condition: requested condition; unsupported values use the default
            n: requested record count, coerced by coerce_record_count

        Returns:
            Batch of exactly n records in generation order
        """
        condition = resolve_condition(condition)
        count = coerce_record_count(n, self.default_records)

        logger.info(f"🧪 Generating {count} records for {condition}")
        raw = self.synthesizer.synthesize_many(condition, count)
        records = await self.enricher.enrich_many(raw)

        return self.assemble(condition, records)


def configured_enricher() -> NarrativeEnricher:
    """Enricher for the current config: online when a key is set and LLM is enabled"""
    config = get_config()
    return NarrativeEnricher(LLMClient(config.llm) if config.llm_enabled else None)


async def export_batch(condition: Optional[str], n: Any = None, enricher: Optional[NarrativeEnricher] = None) -> Batch:
    """Module-level shortcut: one batch with a fresh synthesizer"""
    return await BatchExporter(enricher=enricher or configured_enricher()).export_batch(condition, n)
