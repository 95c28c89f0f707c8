# -*- coding: utf-8 -*-
"""
NeuroSynth: synthetic neurological patient record generator
Version: 1.0.0

Modules:
- main: engine wiring config, synthesizer, enricher and exporter
- api: FastAPI routes
- adapters: serverless handler and local fallback
- core: synthesizer, enricher, exporter, insights
"""

__version__ = "1.0.0"
__description__ = "Synthetic neurological patient record generator"

from .core.synthesizer import synthesize
from .core.exporter import export_batch
from .main import NeuroSynthEngine, get_engine, reset_engine, run_export

__all__ = [
    "synthesize",
    "export_batch",
    "NeuroSynthEngine",
    "get_engine",
    "reset_engine",
    "run_export",
]
