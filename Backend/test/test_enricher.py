"""Tests for narrative enrichment, online and offline."""

import asyncio
import json

import aiohttp

from conftest import FakeResponse, completion
from neurosynth.config import LLMConfig
from neurosynth.core.enricher import NarrativeEnricher
from neurosynth.core.synthesizer import RecordSynthesizer
from neurosynth.llm.client import LLMClient
from neurosynth.llm.prompts import FALLBACK_NARRATIVE, NARRATIVE_SYSTEM_PROMPT


def _client():
    return LLMClient(LLMConfig(api_url="https://llm.example/v1", api_key="test-key", model="test-model"))


def test_offline_enrichment_makes_no_network_call(monkeypatch, rng):
    def explode(*args, **kwargs):
        raise AssertionError("network access attempted")

    monkeypatch.setattr(aiohttp, "ClientSession", explode)
    record = RecordSynthesizer(rng).synthesize("Multiple Sclerosis")

    enriched = asyncio.run(NarrativeEnricher().enrich(record))

    assert enriched.narrative
    assert "Multiple Sclerosis" in enriched.narrative
    assert record.narrative == ""
    assert enriched.id == record.id and enriched.symptoms == record.symptoms


def test_online_enrichment_sends_record_as_context(fake_llm, rng):
    session = fake_llm(lambda payload: FakeResponse(payload=completion("  Stable presentation.  ")))
    record = RecordSynthesizer(rng).synthesize("Stroke")

    enriched = asyncio.run(NarrativeEnricher(_client()).enrich(record))

    assert enriched.narrative == "Stable presentation."
    sent = session.calls[0]["json"]
    assert sent["model"] == "test-model"
    assert sent["messages"][0] == {"role": "system", "content": NARRATIVE_SYSTEM_PROMPT}
    user_text = sent["messages"][1]["content"]
    context = json.loads(user_text.split(": ", 1)[1])
    assert context["id"] == record.id
    assert context["diagnosis"] == "Stroke"


def test_enrich_many_preserves_input_order(fake_llm, rng):
    def responder(payload):
        record = json.loads(payload["messages"][1]["content"].split(": ", 1)[1])
        return FakeResponse(payload=completion(f"note {record['id']}"))

    fake_llm(responder)
    records = RecordSynthesizer(rng).synthesize_many("Anxiety", 6)

    enriched = asyncio.run(NarrativeEnricher(_client()).enrich_many(records))

    assert [r.id for r in enriched] == [r.id for r in records]
    assert [r.narrative for r in enriched] == [f"note {r.id}" for r in records]


def test_service_error_becomes_fallback(fake_llm, rng):
    fake_llm(lambda payload: FakeResponse(status=500, text="upstream down"))
    record = RecordSynthesizer(rng).synthesize("PTSD")

    enriched = asyncio.run(NarrativeEnricher(_client()).enrich(record))

    assert enriched.narrative == FALLBACK_NARRATIVE


def test_offline_enrich_many_uses_template(rng):
    records = RecordSynthesizer(rng).synthesize_many("Epilepsy", 3)
    enriched = asyncio.run(NarrativeEnricher().enrich_many(records))
    assert all("Epilepsy" in r.narrative for r in enriched)
