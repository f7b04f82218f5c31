from __future__ import annotations

import base64
import binascii
from typing import Any

from google import genai
from google.genai import types

from .base import LLMClient
from ..errors import ProviderError
from ..models import CompletionRequest, CompletionResult, TextOnly, TextWithImage


class GeminiClient(LLMClient):
    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        *,
        client: Any | None = None,
    ) -> None:
        if not api_key:
            raise ProviderError("api_key is required for provider='gemini'.")

        if client is None:
            http_options = types.HttpOptions(
                base_url=base_url,
                timeout=int(timeout_seconds * 1000) if timeout_seconds is not None else None,
            )
            client = genai.Client(api_key=api_key, http_options=http_options)
        self._client = client

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        contents = self._build_contents(request)
        try:
            response = await self._client.aio.models.generate_content(
                model=request.model_id,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=request.system_instruction,
                    temperature=request.temperature,
                ),
            )
        except Exception as exc:
            raise ProviderError(
                f"Gemini request failed: {exc}",
                status_code=getattr(exc, "code", None),
            ) from exc

        return CompletionResult(text=getattr(response, "text", None) or "")

    async def aclose(self) -> None:
        await self._client.aio.aclose()

    @staticmethod
    def _build_contents(request: CompletionRequest) -> str | list[types.Part]:
        content = request.content
        if isinstance(content, TextOnly):
            return content.text
        if isinstance(content, TextWithImage):
            try:
                image_bytes = base64.b64decode(content.image.base64_data)
            except (binascii.Error, ValueError) as exc:
                raise ProviderError("Inline image is not valid base64.") from exc
            return [
                types.Part.from_bytes(data=image_bytes, mime_type=content.image.mime_type),
                types.Part.from_text(text=content.text),
            ]
        raise ProviderError(f"Unsupported content kind: {type(content).__name__}")
