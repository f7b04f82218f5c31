from __future__ import annotations

import math
import re
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LEADING_INT = re.compile(r"^\s*[+-]?[0-9]+")


class InlineImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    mime_type: str = "image/jpeg"
    base64_data: str


class TextOnly(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class TextWithImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text_with_image"] = "text_with_image"
    text: str
    image: InlineImage


Content = Annotated[Union[TextOnly, TextWithImage], Field(discriminator="kind")]


class CompletionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: Content
    system_instruction: str
    temperature: float
    model_id: str

    @field_validator("temperature")
    @classmethod
    def validate_temperature(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("temperature must be between 0.0 and 1.0")
        return value

    @property
    def prompt_text(self) -> str:
        return self.content.text

    @property
    def inline_image(self) -> InlineImage | None:
        if isinstance(self.content, TextWithImage):
            return self.content.image
        return None


class CompletionResult(BaseModel):
    text: str = ""


class TranslateParams(BaseModel):
    source_language_name: str
    target_language_name: str
    text: str = ""
    image: str | None = None


class FixGrammarParams(BaseModel):
    language_name: str
    text: str


class GenerateSeminarParams(BaseModel):
    topic: str
    page_count: int = 1

    @field_validator("page_count", mode="before")
    @classmethod
    def clamp_page_count(cls, value: object) -> int:
        return parse_page_count(value)


def parse_page_count(value: object) -> int:
    """Parse a page count the way a form field is read: leading integer, at least 1."""
    if isinstance(value, bool):
        return 1
    if isinstance(value, int):
        return max(1, value)
    if isinstance(value, float):
        return max(1, int(value)) if math.isfinite(value) else 1

    match = _LEADING_INT.match(str(value or ""))
    if match is None:
        return 1
    return max(1, int(match.group(0)))
