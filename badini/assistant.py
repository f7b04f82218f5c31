from __future__ import annotations

from functools import lru_cache

import structlog

from .config import GatewayConfig
from .errors import ConfigurationError, TranslationFailed
from .invoker import CompletionInvoker
from .models import FixGrammarParams, GenerateSeminarParams, TranslateParams
from .prompts import (
    SEMINAR_FALLBACK_TEXT,
    build_fix_grammar_request,
    build_seminar_request,
    build_translate_request,
)

_LOG = structlog.get_logger(__name__)


class BadiniAssistant:
    def __init__(
        self,
        config: GatewayConfig | None = None,
        invoker: CompletionInvoker | None = None,
    ) -> None:
        self.config = config or GatewayConfig()
        self.invoker = invoker or CompletionInvoker(self.config)

    async def translate_text(
        self,
        text: str,
        source_lang_name: str,
        target_lang_name: str,
        image_base64: str | None = None,
    ) -> str:
        if not text.strip() and not image_base64:
            return ""

        params = TranslateParams(
            source_language_name=source_lang_name,
            target_language_name=target_lang_name,
            text=text,
            image=image_base64 or None,
        )
        request = build_translate_request(params, self.config)

        try:
            result = await self.invoker.invoke(request)
        except ConfigurationError:
            raise
        except Exception as exc:
            _LOG.error("translation_failed", error=repr(exc), kind=request.content.kind)
            raise TranslationFailed("Translation failed. Please try again.") from exc

        return result.text or ""

    async def fix_grammar(self, text: str, lang_name: str) -> str:
        """Return ``text`` corrected, or unchanged when the provider call fails.

        A missing API key is not recovered and raises ``MissingApiKeyError``.
        """
        if not text.strip():
            return ""

        request = build_fix_grammar_request(FixGrammarParams(language_name=lang_name, text=text), self.config)

        try:
            result = await self.invoker.invoke(request)
        except ConfigurationError:
            raise
        except Exception as exc:
            _LOG.warning("grammar_fix_failed", error=repr(exc))
            return text

        return result.text or text

    async def generate_seminar(self, topic: str, pages: str | int) -> str:
        request = build_seminar_request(GenerateSeminarParams(topic=topic, page_count=pages), self.config)

        try:
            result = await self.invoker.invoke(request)
        except Exception as exc:
            _LOG.error("seminar_failed", error=repr(exc))
            raise

        return result.text or SEMINAR_FALLBACK_TEXT


@lru_cache(maxsize=1)
def get_default_assistant() -> BadiniAssistant:
    """Process-wide assistant used by the module-level helpers."""
    return BadiniAssistant()


async def translate_text(
    text: str,
    source_lang_name: str,
    target_lang_name: str,
    image_base64: str | None = None,
) -> str:
    return await get_default_assistant().translate_text(text, source_lang_name, target_lang_name, image_base64)


async def fix_grammar(text: str, lang_name: str) -> str:
    return await get_default_assistant().fix_grammar(text, lang_name)


async def generate_seminar(topic: str, pages: str | int) -> str:
    return await get_default_assistant().generate_seminar(topic, pages)
