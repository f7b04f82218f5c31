from __future__ import annotations

import re
import textwrap
from typing import TYPE_CHECKING

from .models import (
    CompletionRequest,
    FixGrammarParams,
    GenerateSeminarParams,
    InlineImage,
    TextOnly,
    TextWithImage,
    TranslateParams,
    parse_page_count,
)

if TYPE_CHECKING:
    from .config import GatewayConfig

WORDS_PER_PAGE = 300
DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"
SEMINAR_FALLBACK_TEXT = "Borîne، şaşiyek çêbû."

TRANSLATOR_SYSTEM_PROMPT = textwrap.dedent(
    """
    You are an expert translator specialised in Kurdish, with native command of
    the Badini (Behdînî) dialect spoken around Duhok and Zakho.

    Rules:
    - Translate meaning faithfully and naturally, not word for word.
    - Write Badini Kurdish in the Latin (Hawar) alphabet unless asked otherwise.
    - Keep names, numbers and formatting as in the source.
    - Return ONLY the translation. No notes, no quotes, no explanations.
    """
).strip()

GRAMMAR_SYSTEM_PROMPT = "You are a helpful grammar assistant."

_TRANSLATE_TEMPLATE = textwrap.dedent(
    """
    Translate the following text from {source} to {target}.
    Text to translate:
    "{text}"
    """
).strip()

_TRANSLATE_AUTO_TEMPLATE = textwrap.dedent(
    """
    Translate the following text to {target}. Detect the source language automatically.
    Text to translate:
    "{text}"
    """
).strip()

_GRAMMAR_TEMPLATE = textwrap.dedent(
    """
    Fix the grammar and spelling of the following text in {language}. Return ONLY the corrected text, no explanations.

    Text: "{text}"
    """
).strip()

_SEMINAR_TEMPLATE = textwrap.dedent(
    """
    Write a complete academic seminar/presentation in **Kurdish Badini Dialect** about: "{topic}".

    **Structure Requirements:**
    1.  **Sernivîs (Title)**: Creative title.
    2.  **Pêşgotin (Introduction)**: Introduce the topic clearly.
    3.  **Naverok (Content)**: Detailed explanation covering approximately {target_words} words (enough for {page_count} pages). Break into points/paragraphs.
    4.  **Encam (Conclusion)**: Summary of main points.

    **Tone:** Formal, Academic, Badini Kurdish (Duhok/Zakho style).
    **Output:** Only the seminar text. Do not include any english text.
    """
).strip()

_DATA_URI_HEADER = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?,", re.IGNORECASE)


__all__ = [
    "DEFAULT_IMAGE_MIME_TYPE",
    "GRAMMAR_SYSTEM_PROMPT",
    "SEMINAR_FALLBACK_TEXT",
    "TRANSLATOR_SYSTEM_PROMPT",
    "WORDS_PER_PAGE",
    "build_fix_grammar_request",
    "build_seminar_request",
    "build_translate_request",
    "image_mime_type",
    "is_auto_detect",
    "parse_page_count",
    "strip_data_uri",
]


def is_auto_detect(source_language_name: str) -> bool:
    normalized = source_language_name.strip().lower()
    return not normalized or "auto" in normalized


def strip_data_uri(value: str) -> str:
    """Return the raw base64 payload of ``value``, dropping any ``data:...,`` header."""
    if "," in value:
        _, _, payload = value.partition(",")
        return payload or value
    return value


def image_mime_type(value: str, default: str = DEFAULT_IMAGE_MIME_TYPE) -> str:
    match = _DATA_URI_HEADER.match(value)
    if match is None or not match.group("mime"):
        return default
    return match.group("mime").lower()


def build_translate_request(params: TranslateParams, config: GatewayConfig) -> CompletionRequest:
    source = params.source_language_name
    target = params.target_language_name

    template = _TRANSLATE_AUTO_TEMPLATE if is_auto_detect(source) else _TRANSLATE_TEMPLATE
    prompt = template.format(source=source, target=target, text=params.text)

    if params.image:
        content: TextOnly | TextWithImage = TextWithImage(
            text=(
                f"Analyze this image and translate any text found inside it to {target}. "
                f"If there is no text, describe the image in {target}. "
                "Return ONLY the translation/description."
            ),
            image=InlineImage(
                mime_type=image_mime_type(params.image),
                base64_data=strip_data_uri(params.image),
            ),
        )
    else:
        content = TextOnly(text=prompt)

    return CompletionRequest(
        content=content,
        system_instruction=config.translate_system_prompt,
        temperature=config.translate_temperature,
        model_id=config.model_for(has_image=bool(params.image)),
    )


def build_fix_grammar_request(params: FixGrammarParams, config: GatewayConfig) -> CompletionRequest:
    prompt = _GRAMMAR_TEMPLATE.format(language=params.language_name, text=params.text)

    return CompletionRequest(
        content=TextOnly(text=prompt),
        system_instruction=config.grammar_system_prompt,
        temperature=config.grammar_temperature,
        model_id=config.model,
    )


def build_seminar_request(params: GenerateSeminarParams, config: GatewayConfig) -> CompletionRequest:
    page_count = params.page_count
    target_words = page_count * WORDS_PER_PAGE

    prompt = _SEMINAR_TEMPLATE.format(topic=params.topic, target_words=target_words, page_count=page_count)

    return CompletionRequest(
        content=TextOnly(text=prompt),
        system_instruction=config.translate_system_prompt,
        temperature=config.seminar_temperature,
        model_id=config.model,
    )
