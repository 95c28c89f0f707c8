"""
NeuroSynth data models

- PatientRecord: one fabricated patient
- Batch: records of one request with their CSV export
"""

from .record import PatientRecord, Batch, TestValue

__all__ = [
    "PatientRecord",
    "Batch",
    "TestValue",
]
