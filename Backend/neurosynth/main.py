# -*- coding: utf-8 -*-
"""
NeuroSynth engine

Wires config, synthesizer, LLM client, enricher and exporter into one
process-wide object shared by the HTTP and serverless adapters.
"""

import random
from typing import Any, Dict, Optional

from .config import NeuroSynthConfig, get_config
from .core.enricher import NarrativeEnricher
from .core.exporter import BatchExporter
from .core.synthesizer import RecordSynthesizer
from .llm.client import LLMClient
from .models.record import Batch
from .utils.logger import get_logger

logger = get_logger("NeuroSynthEngine")


class NeuroSynthEngine:

    def __init__(self, config: Optional[NeuroSynthConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or get_config()
        self.version = self.config.version

        self.llm = LLMClient(self.config.llm) if self.config.llm_enabled else None
        if self.llm is None:
            logger.info("ℹ️ No LLM key configured, narratives use the offline template")

        self.synthesizer = RecordSynthesizer(rng)
        self.enricher = NarrativeEnricher(self.llm)
        self.exporter = BatchExporter(
            synthesizer=self.synthesizer,
            enricher=self.enricher,
            default_records=self.config.synthesis.default_records,
            filename_prefix=self.config.synthesis.filename_prefix,
        )

    async def export(self, disease_type: Optional[str], num_records: Any = None) -> Batch:
        return await self.exporter.export_batch(disease_type, num_records)

    def health(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "llm": self.llm.health_check() if self.llm else {"status": "offline"},
        }


_engine: Optional[NeuroSynthEngine] = None


def get_engine() -> NeuroSynthEngine:
    """Lazily built process-wide engine"""
    global _engine
    if _engine is None:
        _engine = NeuroSynthEngine()
    return _engine


def reset_engine():
    """Drop the engine so the next get_engine() picks up a reloaded config"""
    global _engine
    _engine = None


async def run_export(disease_type: Optional[str], num_records: Any = None) -> Dict[str, Any]:
    """Single entry point for adapters: returns the wire form of one batch"""
    batch = await get_engine().export(disease_type, num_records)
    return batch.to_dict()
