"""Tests for the HTTP adapter."""

import base64

import pytest
from fastapi.testclient import TestClient

import neurosynth.api as api_module
from main import app

client = TestClient(app)


def test_generate_epilepsy():
    resp = client.post("/api/generate", json={"disease_type": "Epilepsy", "num_records": 5})
    assert resp.status_code == 200
    data = resp.json()
    assert set(data) == {"disease_type", "records", "csv_base64", "filename"}
    assert data["disease_type"] == "Epilepsy"
    assert len(data["records"]) == 5
    assert data["filename"] == "neurosynth_epilepsy_5.csv"
    csv_text = base64.b64decode(data["csv_base64"]).decode("utf-8")
    assert "test_EEG" in csv_text.split("\n")[0]
    assert len(csv_text.split("\n")) == 6
    for record in data["records"]:
        assert record["narrative"] == "Synthetic note for Epilepsy - no key configured."


def test_generate_defaults_when_body_is_empty():
    resp = client.post("/api/generate")
    assert resp.status_code == 200
    data = resp.json()
    assert data["disease_type"] == "Alzheimer's"
    assert len(data["records"]) == 10


@pytest.mark.parametrize("payload", [
    {"disease_type": "Flu", "num_records": 2},
    {"disease_type": 42, "num_records": "2"},
])
def test_generate_unknown_condition_falls_back(payload):
    resp = client.post("/api/generate", json=payload)
    assert resp.status_code == 200
    assert resp.json()["disease_type"] == "Alzheimer's"
    assert len(resp.json()["records"]) == 2


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_generate_rejects_other_methods(method):
    resp = getattr(client, method)("/api/generate")
    assert resp.status_code == 405


def test_generate_rejects_non_object_body():
    resp = client.post("/api/generate", json=["Epilepsy", 5])
    assert resp.status_code == 422


def test_generate_internal_error_is_generic(monkeypatch):
    class BrokenEngine:
        async def export(self, *args, **kwargs):
            raise RuntimeError("disk full at /var/lib/secret")

    monkeypatch.setattr(api_module, "get_engine", lambda: BrokenEngine())
    resp = client.post("/api/generate", json={"disease_type": "Stroke", "num_records": 1})
    assert resp.status_code == 500
    assert "/var/lib" not in resp.text
    assert resp.json()["detail"]["error"] == "Server error"


def test_conditions_endpoint():
    data = client.get("/api/conditions").json()
    assert len(data["conditions"]) == 10
    assert data["default"] == "Alzheimer's"


def test_guide_endpoints():
    assert len(client.get("/api/guide").json()["guides"]) == 10
    assert client.get("/api/guide/Stroke").json()["condition"] == "Stroke"
    assert client.get("/api/guide/Flu").json()["condition"] == "Alzheimer's"


def test_insights_for_generated_batch():
    records = client.post("/api/generate", json={"disease_type": "Stroke", "num_records": 4}).json()["records"]
    data = client.post("/api/insights", json={"records": records}).json()
    assert sum(data["age_buckets"].values()) == 4
    assert sum(data["risk_buckets"].values()) == 4
    assert set(data["risk_scores"]) == {r["id"] for r in records}
    assert data["run"]["disease"] == "Stroke"
    assert data["run"]["count"] == 4


def test_insights_rejects_bad_records():
    resp = client.post("/api/insights", json={"records": [{"id": "x", "age": "old"}]})
    assert resp.status_code == 400


@pytest.mark.parametrize("value", ["inf", "nan"])
def test_insights_tolerates_non_finite_test_values(value):
    record = {"id": "r1", "age": 50, "gender": "Male", "diagnosis": "Depression",
              "symptoms": ["low mood"], "test_results": {"PHQ-9": value}, "treatment_plan": ["CBT"]}
    resp = client.post("/api/insights", json={"records": [record]})
    assert resp.status_code == 200
    assert resp.json()["risk_scores"] == {"r1": 10}


def test_assessment_endpoint():
    resp = client.post("/api/assessment", json={
        "disease_type": "Epilepsy",
        "answers": {"age": 30, "seizures": True},
    })
    assert resp.json() == {
        "score": 60,
        "level": "High",
        "note": "This screening suggests elevated risk. Consider seeking professional medical evaluation.",
    }


def test_health_endpoints():
    assert client.get("/healthz").json()["ok"] is True
    health = client.get("/api/health").json()
    assert health["status"] == "healthy"
    assert health["llm"] == {"status": "offline"}
