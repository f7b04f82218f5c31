from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from .base import LLMClient
from ..errors import ProviderError
from ..models import CompletionRequest, CompletionResult, TextOnly, TextWithImage


class OpenAIClient(LLMClient):
    def __init__(
        self,
        api_key: str,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        *,
        client: Any | None = None,
    ) -> None:
        if not api_key:
            raise ProviderError("api_key is required for provider='openai'.")

        if client is None:
            options: dict[str, Any] = {"api_key": api_key, "base_url": base_url, "max_retries": 0}
            if timeout_seconds is not None:
                options["timeout"] = timeout_seconds
            client = AsyncOpenAI(**options)
        self._client = client

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        messages = [
            {"role": "system", "content": request.system_instruction},
            {"role": "user", "content": self._build_user_content(request)},
        ]
        try:
            response = await self._client.chat.completions.create(
                model=request.model_id,
                temperature=request.temperature,
                messages=messages,
            )
        except Exception as exc:
            raise ProviderError(
                f"OpenAI request failed: {exc}",
                status_code=getattr(exc, "status_code", None),
            ) from exc

        return CompletionResult(text=self._extract_response_text(response))

    async def aclose(self) -> None:
        await self._client.close()

    @staticmethod
    def _build_user_content(request: CompletionRequest) -> str | list[dict[str, Any]]:
        content = request.content
        if isinstance(content, TextOnly):
            return content.text
        if isinstance(content, TextWithImage):
            image = content.image
            return [
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:{image.mime_type};base64,{image.base64_data}"},
                },
                {"type": "text", "text": content.text},
            ]
        raise ProviderError(f"Unsupported content kind: {type(content).__name__}")

    @staticmethod
    def _extract_response_text(response: Any) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as exc:
            raise ProviderError("OpenAI returned an unexpected response shape.") from exc

        if isinstance(content, str):
            return content

        if isinstance(content, list):
            parts: list[str] = []
            for item in content:
                if isinstance(item, str):
                    parts.append(item)
                elif isinstance(item, dict) and "text" in item:
                    parts.append(str(item["text"]))
                else:
                    maybe_text = getattr(item, "text", None)
                    if maybe_text:
                        parts.append(str(maybe_text))
            return "".join(parts)

        if content is None:
            return ""

        return str(content)
