from __future__ import annotations

import asyncio

import pytest

from badini.config import GatewayConfig
from badini.invoker import CompletionInvoker
from badini.llm.base import LLMClient
from badini.models import CompletionRequest, CompletionResult, TextOnly


class ClosableLLM(LLMClient):
    def __init__(self, name: str, gate: asyncio.Event | None = None) -> None:
        self.name = name
        self.gate = gate
        self.closed = False
        self.calls = 0

    async def complete(self, request: CompletionRequest) -> CompletionResult:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        return CompletionResult(text=self.name)

    async def aclose(self) -> None:
        self.closed = True


def _request() -> CompletionRequest:
    return CompletionRequest(
        content=TextOnly(text="hello"),
        system_instruction="Be brief.",
        temperature=0.1,
        model_id="test-model",
    )


def _invoker(clients: list[ClosableLLM]) -> CompletionInvoker:
    pending = iter(clients)
    return CompletionInvoker(GatewayConfig(), client_factory=lambda config, api_key: next(pending))


@pytest.mark.asyncio
async def test_rotated_client_is_closed(api_key_env) -> None:
    first, second = ClosableLLM("first"), ClosableLLM("second")
    invoker = _invoker([first, second])

    assert (await invoker.invoke(_request())).text == "first"

    api_key_env.setenv("VITE_GEMINI_API_KEY", "rotated-key")
    assert (await invoker.invoke(_request())).text == "second"

    assert first.closed is True
    assert second.closed is False


@pytest.mark.asyncio
async def test_rotated_client_closed_after_in_flight_call(api_key_env) -> None:
    gate = asyncio.Event()
    first, second = ClosableLLM("first", gate=gate), ClosableLLM("second")
    invoker = _invoker([first, second])

    pending = asyncio.create_task(invoker.invoke(_request()))
    while first.calls == 0:
        await asyncio.sleep(0)

    api_key_env.setenv("VITE_GEMINI_API_KEY", "rotated-key")
    assert (await invoker.invoke(_request())).text == "second"
    assert first.closed is False

    gate.set()
    assert (await pending).text == "first"
    assert first.closed is True


@pytest.mark.asyncio
async def test_injected_client_is_not_closed_on_rotation(api_key_env) -> None:
    injected = ClosableLLM("injected")
    invoker = CompletionInvoker(GatewayConfig(llm_client=injected))

    await invoker.invoke(_request())
    api_key_env.setenv("VITE_GEMINI_API_KEY", "rotated-key")
    await invoker.invoke(_request())

    assert injected.calls == 2
    assert injected.closed is False


@pytest.mark.asyncio
async def test_aclose_releases_current_client(api_key_env) -> None:
    only = ClosableLLM("only")
    invoker = _invoker([only])

    await invoker.invoke(_request())
    await invoker.aclose()

    assert only.closed is True
