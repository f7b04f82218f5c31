from __future__ import annotations

from .base import LLMClient
from .gemini_client import GeminiClient
from .openai_client import OpenAIClient
from ..config import GatewayConfig
from ..errors import ConfigurationError


def build_llm_client(config: GatewayConfig, api_key: str) -> LLMClient:
    if config.llm_client is not None:
        return config.llm_client

    provider = config.provider.lower().strip()
    if provider == "gemini":
        return GeminiClient(
            api_key=api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )
    if provider == "openai":
        return OpenAIClient(
            api_key=api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )

    raise ConfigurationError(
        f"Unsupported provider '{config.provider}'. Use 'gemini' or 'openai'.",
        reason="UnsupportedProvider",
    )
