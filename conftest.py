import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.config import get_config
from luma_wisp.engine import LumaEngine
from luma_wisp.llm import LLMError
from luma_wisp.storage import MemoryStore


class StubLLM:
    """Returns a fixed reply and records every call."""

    def __init__(self, reply: str = "A stub reply. ✨") -> None:
        self.reply = reply
        self.calls: list[dict] = []

    async def __call__(self, stage, system, user, *, max_tokens, temperature):
        self.calls.append({
            "stage": stage,
            "system": system,
            "user": user,
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        return self.reply


class FailingLLM:
    """Raises on every call, as an unreachable backend would."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or LLMError("LLM backend timed out after 30.0s")
        self.calls = 0

    async def __call__(self, stage, system, user, *, max_tokens, temperature):
        self.calls += 1
        raise self.error


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def stub_llm() -> StubLLM:
    return StubLLM()


@pytest.fixture
def failing_llm() -> FailingLLM:
    return FailingLLM()


@pytest.fixture
def engine(stub_llm) -> LumaEngine:
    return LumaEngine(stub_llm)


@pytest.fixture
def failing_engine(failing_llm) -> LumaEngine:
    return LumaEngine(failing_llm)


@pytest.fixture
def make_client(store):
    """Build a TestClient around the shared store and a chosen LLM."""
    def _make(llm) -> TestClient:
        config = get_config({"openai_api_key": "", "environment": "test",
                             "public_base_url": "https://luma.example"})
        return TestClient(create_app(store=store, llm=llm, config=config))
    return _make


@pytest.fixture
def client(make_client, failing_llm) -> TestClient:
    """API client whose LLM always fails, so replies come from the fallbacks."""
    return make_client(failing_llm)
