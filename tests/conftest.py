from __future__ import annotations

import pytest

from badini.credentials import DEFAULT_API_KEY_ENV_VARS


@pytest.fixture
def clean_env(monkeypatch):
    for name in DEFAULT_API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def api_key_env(clean_env):
    clean_env.setenv("GEMINI_API_KEY", "test-key")
    return clean_env
