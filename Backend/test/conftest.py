import json
import random

import pytest

from neurosynth.config import reload_config
from neurosynth.main import reset_engine


@pytest.fixture(autouse=True)
def offline_env(monkeypatch):
    """Every test starts without an LLM key and with a fresh engine."""
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.delenv("GPT5_API_KEY", raising=False)
    monkeypatch.delenv("LLM_TIMEOUT", raising=False)
    monkeypatch.delenv("LLM_MAX_TOKENS", raising=False)
    reload_config()
    reset_engine()
    yield
    reset_engine()


@pytest.fixture
def rng():
    return random.Random(1234)


class FakeResponse:
    def __init__(self, status=200, payload=None, text=None):
        self.status = status
        self._payload = payload
        self._text = text if text is not None else json.dumps(payload)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    async def text(self):
        return self._text

    async def json(self, content_type="application/json"):
        return json.loads(self._text)


class FakeSession:
    """Stands in for aiohttp.ClientSession; records every POST."""

    def __init__(self, responder):
        self.responder = responder
        self.calls = []

    def __call__(self, *args, **kwargs):
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def post(self, url, headers=None, json=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "json": json, "kwargs": kwargs})
        return self.responder(json)


def completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def fake_llm(monkeypatch):
    """Patch aiohttp.ClientSession with a scripted fake; returns an installer."""
    import neurosynth.llm.client as client_module

    def install(responder):
        session = FakeSession(responder)
        monkeypatch.setattr(client_module.aiohttp, "ClientSession", session)
        return session

    return install
