# -*- coding: utf-8 -*-
"""
Narrative enricher

Attaches a free-text narrative to each record, either from the LLM
service or from an offline template when no credential is configured.
"""

from typing import List, Optional

from ..llm.client import LLMClient
from ..llm.prompts import NARRATIVE_SYSTEM_PROMPT, build_narrative_prompt, offline_narrative
from ..models.record import PatientRecord
from ..utils.logger import get_logger

logger = get_logger("NarrativeEnricher")


class NarrativeEnricher:
    """
    Args:
        llm: configured client, or None for offline mode (no network I/O)
    """

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm

    @property
    def online(self) -> bool:
        return self.llm is not None

    async def enrich(self, record: PatientRecord) -> PatientRecord:
        """
        Return a copy of the record with its narrative filled in
        """
        if self.llm is None:
            return record.with_narrative(offline_narrative(record.diagnosis))

        narrative = await self.llm.chat_complete(
            system_prompt=NARRATIVE_SYSTEM_PROMPT,
            user_prompt=build_narrative_prompt(record.to_dict()),
        )
        return record.with_narrative(narrative)

    async def enrich_many(self, records: List[PatientRecord]) -> List[PatientRecord]:
        """
        Enrich records concurrently; output order follows input order
        """
        if self.llm is None:
            return [record.with_narrative(offline_narrative(record.diagnosis)) for record in records]

        logger.info(f"📝 Requesting {len(records)} narratives")
        narratives = await self.llm.batch_complete([
            {"system": NARRATIVE_SYSTEM_PROMPT, "user": build_narrative_prompt(record.to_dict())}
            for record in records
        ])
        return [record.with_narrative(text) for record, text in zip(records, narratives)]
