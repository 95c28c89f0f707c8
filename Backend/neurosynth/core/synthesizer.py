# -*- coding: utf-8 -*-
"""
Record synthesizer

Fabricates one PatientRecord per call from the static catalog. Randomness
comes from an injectable random.Random so batches can be reproduced.
"""

import random
import uuid
from typing import Callable, Dict, List, Optional, Sequence

from ..knowledge.catalog import GENDERS, PLAN_VOCABULARY, resolve_condition, symptoms_for
from ..models.record import PatientRecord, TestValue

AGE_RANGE = (18, 95)
MAX_SYMPTOMS = 3
PLAN_SIZE_RANGE = (1, 3)


# ==================== Condition-specific tests ====================

def _cognitive_tests(rng: random.Random) -> Dict[str, TestValue]:
    return {"MMSE": rng.randint(0, 30), "MoCA": rng.randint(0, 27)}


def _depression_tests(rng: random.Random) -> Dict[str, TestValue]:
    return {"PHQ-9": rng.randint(0, 27)}


def _anxiety_tests(rng: random.Random) -> Dict[str, TestValue]:
    return {"GAD-7": rng.randint(0, 21)}


def _stroke_tests(rng: random.Random) -> Dict[str, TestValue]:
    return {"NIHSS": rng.randint(0, 42)}


def _epilepsy_tests(rng: random.Random) -> Dict[str, TestValue]:
    return {"EEG": "abnormal" if rng.random() < 0.5 else "normal"}


TEST_GENERATORS: Dict[str, Callable[[random.Random], Dict[str, TestValue]]] = {
    "Alzheimer's": _cognitive_tests,
    "Cognitive Decline": _cognitive_tests,
    "Depression": _depression_tests,
    "Anxiety": _anxiety_tests,
    "Stroke": _stroke_tests,
    "Epilepsy": _epilepsy_tests,
}


class RecordSynthesizer:
    """
    Builds fabricated patient records

    Args:
        rng: random source; a fresh unseeded random.Random when omitted
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _pick(self, pool: Sequence[str], n: int) -> List[str]:
        # random.sample selects without replacement and returns selection order
        return self.rng.sample(list(pool), min(n, len(pool)))

    def _new_id(self) -> str:
        return str(uuid.UUID(int=self.rng.getrandbits(128), version=4))

    def test_results(self, condition: str) -> Dict[str, TestValue]:
        generator = TEST_GENERATORS.get(condition)
        if generator is None:
            return {}
        return generator(self.rng)

    def synthesize(self, condition: Optional[str]) -> PatientRecord:
        """
        Fabricate one record for a condition

        Unsupported conditions are replaced by the default condition.

        Returns:
            PatientRecord with an empty narrative
        """
        condition = resolve_condition(condition)
        pool = symptoms_for(condition)

        return PatientRecord(
            id=self._new_id(),
            age=self.rng.randint(*AGE_RANGE),
            gender=self.rng.choice(GENDERS),
            diagnosis=condition,
            symptoms=self._pick(pool, MAX_SYMPTOMS),
            test_results=self.test_results(condition),
            treatment_plan=self._pick(PLAN_VOCABULARY, self.rng.randint(*PLAN_SIZE_RANGE)),
            narrative="",
        )

    def synthesize_many(self, condition: Optional[str], n: int) -> List[PatientRecord]:
        return [self.synthesize(condition) for _ in range(n)]


def synthesize(condition: Optional[str], rng: Optional[random.Random] = None) -> PatientRecord:
    """Module-level shortcut around RecordSynthesizer.synthesize"""
    return RecordSynthesizer(rng).synthesize(condition)
