"""Test configuration and fixtures."""
import logging

import httpx
import pytest
import respx

from o3_search_mcp.core.config import Settings
from o3_search_mcp.services.llm_connector import O3SearchConnector
from o3_search_mcp.tools.o3_search_tool import O3SearchTool

# ---------------------------------------------------------------------------
# Constants (shared with tests)
# ---------------------------------------------------------------------------
TEST_API_KEY = "sk-test-abc123456"
BASE_URL = "https://api.openai.test/v1"

ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MAX_RETRIES",
    "OPENAI_API_TIMEOUT",
    "SEARCH_CONTEXT_SIZE",
    "REASONING_EFFORT",
    "LOG_LEVEL",
)


def response_payload(*texts: str) -> dict:
    """A Responses API body whose output holds one assistant message per text."""
    return {
        "id": "resp_test",
        "object": "response",
        "created_at": 1700000000,
        "model": "o3",
        "status": "completed",
        "parallel_tool_calls": True,
        "tool_choice": "auto",
        "tools": [],
        "output": [
            {
                "type": "message",
                "id": f"msg_{i}",
                "role": "assistant",
                "status": "completed",
                "content": [{"type": "output_text", "text": text, "annotations": []}],
            }
            for i, text in enumerate(texts)
        ],
    }


# ---------------------------------------------------------------------------
# Settings fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every configuration variable from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_settings(clean_env):
    def _make(**overrides) -> Settings:
        values = {
            "OPENAI_API_KEY": TEST_API_KEY,
            "OPENAI_BASE_URL": BASE_URL,
            "OPENAI_MAX_RETRIES": 0,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings):
    return make_settings()


# ---------------------------------------------------------------------------
# Tool fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def tool(settings):
    """O3SearchTool wired to a real OpenAI client pointed at the mocked base URL."""
    return O3SearchTool(O3SearchConnector(settings))


@pytest.fixture
def openai_mock():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def responses_route(openai_mock):
    return openai_mock.post("/responses")


@pytest.fixture
def ok_response():
    def _ok(*texts: str) -> httpx.Response:
        return httpx.Response(200, json=response_payload(*texts))

    return _ok


# ---------------------------------------------------------------------------
# Logging fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def log_records(caplog):
    """Capture records of the project logger, which does not propagate to root."""
    logger = logging.getLogger("o3-search-mcp")
    logger.addHandler(caplog.handler)
    caplog.handler.setLevel(logging.INFO)
    yield caplog
    logger.removeHandler(caplog.handler)
