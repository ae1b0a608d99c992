"""Unit tests for the EmbeddingService."""

import asyncio

import pytest

from learnplay.application.interfaces.embedding_provider import EmbeddingProvider
from learnplay.application.services.embedding_service import EmbeddingService
from learnplay.domain.exceptions import EmbeddingError


# ── Fakes ──


class FakeEmbeddingProvider(EmbeddingProvider):
    """Embeds a text as [len(text), ordinal of its first char]."""

    def __init__(
        self,
        *,
        fail_on: str | None = None,
        error: Exception | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.calls: list[str] = []
        self._fail_on = fail_on
        self._error = error or EmbeddingError(provider="fake", status_code=500, message="boom")
        self._delays = delays or {}
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def model(self) -> str:
        return "fake-embed"

    async def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._delays.get(text, 0))
            if text == self._fail_on:
                raise self._error
            return [float(len(text)), float(ord(text[0])) if text else 0.0]
        finally:
            self.in_flight -= 1


# ── Tests ──


@pytest.mark.asyncio
async def test_embed_texts_preserves_order():
    provider = FakeEmbeddingProvider()
    service = EmbeddingService(provider)

    result = await service.embed_texts(["a", "bb", "ccc"])

    assert result == [[1.0, 97.0], [2.0, 98.0], [3.0, 99.0]]
    assert provider.calls == ["a", "bb", "ccc"]


@pytest.mark.asyncio
async def test_sequential_by_default():
    provider = FakeEmbeddingProvider(delays={"a": 0.01, "b": 0.01, "c": 0.01})
    service = EmbeddingService(provider)

    await service.embed_texts(["a", "b", "c"])

    assert provider.max_in_flight == 1


@pytest.mark.asyncio
async def test_concurrent_batch_keeps_input_order():
    """Slow early items must not be overtaken in the output."""
    provider = FakeEmbeddingProvider(delays={"a": 0.05, "b": 0.02, "c": 0.0, "d": 0.0})
    service = EmbeddingService(provider, max_concurrency=3)

    result = await service.embed_texts(["a", "b", "c", "d"])

    assert [r[1] for r in result] == [97.0, 98.0, 99.0, 100.0]
    assert 1 < provider.max_in_flight <= 3


@pytest.mark.asyncio
async def test_batch_aborts_on_first_failure():
    provider = FakeEmbeddingProvider(fail_on="bad")
    service = EmbeddingService(provider)

    with pytest.raises(EmbeddingError):
        await service.embed_texts(["ok", "bad", "never"])

    assert provider.calls == ["ok", "bad"]


@pytest.mark.asyncio
async def test_concurrent_batch_failure_raises():
    provider = FakeEmbeddingProvider(fail_on="bad", delays={"slow": 0.5})
    service = EmbeddingService(provider, max_concurrency=4)

    with pytest.raises(EmbeddingError):
        await service.embed_texts(["slow", "bad", "ok"])


@pytest.mark.asyncio
async def test_unexpected_provider_error_is_wrapped():
    provider = FakeEmbeddingProvider(fail_on="x", error=RuntimeError("socket closed"))
    service = EmbeddingService(provider)

    with pytest.raises(EmbeddingError) as exc_info:
        await service.embed_texts(["x"])

    assert "socket closed" in exc_info.value.message
    assert exc_info.value.provider == "fake"


@pytest.mark.asyncio
async def test_empty_batch_makes_no_calls():
    provider = FakeEmbeddingProvider()
    service = EmbeddingService(provider)

    assert await service.embed_texts([]) == []
    assert provider.calls == []


@pytest.mark.asyncio
async def test_embed_query():
    service = EmbeddingService(FakeEmbeddingProvider())
    assert await service.embed_query("hi") == [2.0, 104.0]


def test_invalid_concurrency_rejected():
    with pytest.raises(ValueError):
        EmbeddingService(FakeEmbeddingProvider(), max_concurrency=0)
