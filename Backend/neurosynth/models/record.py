# -*- coding: utf-8 -*-
"""
Synthetic patient record and batch models
"""

import base64
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Union

TestValue = Union[int, str]


@dataclass(frozen=True)
class PatientRecord:
    """
    One fabricated patient

    Frozen: enrichment produces a new record through with_narrative().
    """

    id: str
    age: int
    gender: str
    diagnosis: str
    symptoms: List[str] = field(default_factory=list)
    test_results: Dict[str, TestValue] = field(default_factory=dict)
    treatment_plan: List[str] = field(default_factory=list)
    narrative: str = ""

    def with_narrative(self, narrative: str) -> "PatientRecord":
        return replace(self, narrative=narrative)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "age": self.age,
            "gender": self.gender,
            "diagnosis": self.diagnosis,
            "symptoms": list(self.symptoms),
            "test_results": dict(self.test_results),
            "treatment_plan": list(self.treatment_plan),
            "narrative": self.narrative,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PatientRecord":
        return cls(
            id=str(data.get("id", "")),
            age=int(data.get("age", 0)),
            gender=str(data.get("gender", "")),
            diagnosis=str(data.get("diagnosis", "")),
            symptoms=list(data.get("symptoms") or []),
            test_results=dict(data.get("test_results") or {}),
            treatment_plan=list(data.get("treatment_plan") or []),
            narrative=str(data.get("narrative") or ""),
        )


@dataclass(frozen=True)
class Batch:
    """
    Records from one generation request plus their CSV export
    """

    condition: str
    records: List[PatientRecord]
    csv_text: str
    filename: str

    @property
    def csv_base64(self) -> str:
        return base64.b64encode(self.csv_text.encode("utf-8")).decode("ascii")

    def to_dict(self) -> Dict[str, Any]:
        """Wire form returned by every adapter"""
        return {
            "disease_type": self.condition,
            "records": [r.to_dict() for r in self.records],
            "csv_base64": self.csv_base64,
            "filename": self.filename,
        }
