from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from badini.assistant import BadiniAssistant
from badini.config import GatewayConfig
from badini.credentials import DEFAULT_API_KEY_ENV_VARS, resolve_api_key
from badini.errors import MissingApiKeyError, ProviderError, TranslationFailed
from badini.llm.base import LLMClient
from badini.models import CompletionRequest, CompletionResult

SECRET_TEXT = "my private diary entry"


class FailingLLM(LLMClient):
    async def complete(self, request: CompletionRequest) -> CompletionResult:
        raise ProviderError("upstream exploded", status_code=503)


def _assistant() -> BadiniAssistant:
    return BadiniAssistant(GatewayConfig(llm_client=FailingLLM()))


def _events(logs: list[dict], name: str) -> list[dict]:
    return [entry for entry in logs if entry["event"] == name]


def test_missing_key_logs_checked_sources_and_hint() -> None:
    with capture_logs() as logs:
        with pytest.raises(MissingApiKeyError):
            resolve_api_key(environ={})

    (entry,) = _events(logs, "api_key_missing")
    assert entry["log_level"] == "error"
    assert entry["checked"] == list(DEFAULT_API_KEY_ENV_VARS)
    assert "VITE_GEMINI_API_KEY" in entry["hint"]


@pytest.mark.asyncio
async def test_translation_failure_logs_cause(api_key_env) -> None:
    with capture_logs() as logs:
        with pytest.raises(TranslationFailed):
            await _assistant().translate_text(SECRET_TEXT, "English", "French")

    (entry,) = _events(logs, "translation_failed")
    assert entry["log_level"] == "error"
    assert "upstream exploded" in entry["error"]
    assert SECRET_TEXT not in repr(logs)
    assert "test-key" not in repr(logs)


@pytest.mark.asyncio
async def test_grammar_failure_logs_warning(api_key_env) -> None:
    with capture_logs() as logs:
        assert await _assistant().fix_grammar(SECRET_TEXT, "English") == SECRET_TEXT

    (entry,) = _events(logs, "grammar_fix_failed")
    assert entry["log_level"] == "warning"
    assert "upstream exploded" in entry["error"]
    assert SECRET_TEXT not in repr(logs)
    assert "test-key" not in repr(logs)


@pytest.mark.asyncio
async def test_seminar_failure_logs_error(api_key_env) -> None:
    with capture_logs() as logs:
        with pytest.raises(ProviderError):
            await _assistant().generate_seminar(SECRET_TEXT, "1")

    (entry,) = _events(logs, "seminar_failed")
    assert entry["log_level"] == "error"
    assert "upstream exploded" in entry["error"]
    assert SECRET_TEXT not in repr(logs)
    assert "test-key" not in repr(logs)
