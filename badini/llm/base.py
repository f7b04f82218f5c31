from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import CompletionRequest, CompletionResult


class LLMClient(ABC):
    @abstractmethod
    async def complete(self, request: CompletionRequest) -> CompletionResult:
        """Send one text or text+image request and return the model's plain text."""

    async def aclose(self) -> None:
        """Release transport resources held by the client."""
