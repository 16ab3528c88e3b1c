"""Tests for the streaming Ollama client."""

from __future__ import annotations

import json

import httpx
import pytest

from finance_chat.llm import GenerationConfig, OllamaClient


def _ndjson(*records: dict) -> bytes:
    return b"".join(json.dumps(record).encode() + b"\n" for record in records)


def _client_with(handler) -> OllamaClient:
    client = OllamaClient("http://ollama:11434", "test-model")
    client._client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return client


class TestOllamaClient:
    def test_generate_url_accepts_base_or_full_url(self):
        assert OllamaClient("http://host:11434/", "m").generate_url == "http://host:11434/api/generate"
        assert OllamaClient("http://host/api/generate", "m").generate_url == "http://host/api/generate"

    @pytest.mark.asyncio
    async def test_streams_response_fragments(self):
        sent: list[dict] = []

        def handler(request):
            sent.append(json.loads(request.content))
            return httpx.Response(
                200,
                content=_ndjson(
                    {"response": "Save", "done": False},
                    {"response": " more", "done": False},
                    {"response": "", "done": True},
                ),
            )

        client = _client_with(handler)
        schema = {"type": "object"}
        fragments = [f async for f in client.generate_stream("hi", system="sys", config=GenerationConfig(format=schema))]

        assert fragments == ["Save", " more"]
        assert sent[0]["model"] == "test-model"
        assert sent[0]["stream"] is True
        assert sent[0]["system"] == "sys"
        assert sent[0]["format"] == schema
        await client.close()

    @pytest.mark.asyncio
    async def test_skips_unparseable_lines(self):
        client = _client_with(
            lambda request: httpx.Response(200, content=b"not json\n" + _ndjson({"response": "ok", "done": True}))
        )
        assert [f async for f in client.generate_stream("hi")] == ["ok"]

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        client = _client_with(lambda request: httpx.Response(500))
        with pytest.raises(httpx.HTTPStatusError):
            async for _ in client.generate_stream("hi"):
                pass

    @pytest.mark.asyncio
    async def test_error_record_raises(self):
        client = _client_with(lambda request: httpx.Response(200, content=_ndjson({"error": "model not found"})))
        with pytest.raises(RuntimeError, match="model not found"):
            async for _ in client.generate_stream("hi"):
                pass
