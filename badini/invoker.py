from __future__ import annotations

from collections import Counter
from typing import Callable

import structlog

from .config import GatewayConfig
from .credentials import resolve_api_key
from .llm import LLMClient, build_llm_client
from .models import CompletionRequest, CompletionResult

_LOG = structlog.get_logger(__name__)

ClientFactory = Callable[[GatewayConfig, str], LLMClient]


class CompletionInvoker:
    """Sends one request per call to the configured provider.

    Credentials are resolved on every call. The provider client is built on
    first use and reused until the resolved key changes; the replaced client
    is closed once no call is still using it.
    """

    def __init__(
        self,
        config: GatewayConfig | None = None,
        client_factory: ClientFactory = build_llm_client,
    ) -> None:
        self.config = config or GatewayConfig()
        self._client_factory = client_factory
        self._client: LLMClient | None = None
        self._client_key: str | None = None
        self._in_flight: Counter[int] = Counter()
        self._retired: dict[int, LLMClient] = {}

    async def invoke(self, request: CompletionRequest) -> CompletionResult:
        client = await self._get_client()
        _LOG.debug(
            "completion_request",
            provider=self.config.provider,
            model=request.model_id,
            kind=request.content.kind,
            temperature=request.temperature,
        )
        self._in_flight[id(client)] += 1
        try:
            return await client.complete(request)
        finally:
            self._in_flight[id(client)] -= 1
            if not self._in_flight[id(client)]:
                self._in_flight.pop(id(client), None)
                retired = self._retired.pop(id(client), None)
                if retired is not None:
                    await retired.aclose()

    async def aclose(self) -> None:
        client, self._client, self._client_key = self._client, None, None
        if client is not None:
            await self._retire(client)

    async def _get_client(self) -> LLMClient:
        api_key = resolve_api_key(self.config.api_key_env_vars, explicit=self.config.api_key)
        if self._client is None or api_key != self._client_key:
            previous = self._client
            self._client = self._client_factory(self.config, api_key)
            self._client_key = api_key
            if previous is not None and previous is not self._client:
                _LOG.info("provider_client_rotated", provider=self.config.provider)
                await self._retire(previous)
        return self._client

    async def _retire(self, client: LLMClient) -> None:
        if self._in_flight[id(client)]:
            self._retired[id(client)] = client
            return
        self._in_flight.pop(id(client), None)
        await client.aclose()
