from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .credentials import DEFAULT_API_KEY_ENV_VARS
from .prompts import GRAMMAR_SYSTEM_PROMPT, TRANSLATOR_SYSTEM_PROMPT


class GatewayConfig(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: Literal["gemini", "openai"] = "gemini"
    model: str = "gemini-2.5-flash"
    vision_model: str | None = None

    api_key: str | None = None
    api_key_env_vars: tuple[str, ...] = DEFAULT_API_KEY_ENV_VARS
    base_url: str | None = None
    timeout_seconds: float | None = None

    translate_temperature: float = 0.3
    grammar_temperature: float = 0.1
    seminar_temperature: float = 0.7

    translate_system_prompt: str = TRANSLATOR_SYSTEM_PROMPT
    grammar_system_prompt: str = GRAMMAR_SYSTEM_PROMPT

    llm_client: Any | None = None

    @field_validator("model")
    @classmethod
    def validate_model(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("model cannot be empty")
        return normalized

    @field_validator("translate_temperature", "grammar_temperature", "seminar_temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("temperature must be between 0.0 and 1.0")
        return value

    @field_validator("api_key_env_vars")
    @classmethod
    def validate_env_vars(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        names = tuple(name.strip() for name in value if name.strip())
        if len(set(names)) != len(names):
            raise ValueError("api_key_env_vars must not contain duplicates")
        return names

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return value

    def model_for(self, has_image: bool) -> str:
        if has_image and self.vision_model:
            return self.vision_model
        return self.model
