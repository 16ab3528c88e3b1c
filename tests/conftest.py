"""Shared fixtures for the chat client tests."""

from __future__ import annotations

import httpx
import pytest

from finance_chat.chat import ChatRequest, ChatService

CHAT_URL = "http://testserver/api/chat"


class RecordingStream(httpx.AsyncByteStream):
    """Response body that delivers fixed chunks and records how it was consumed."""

    def __init__(self, chunks: list[bytes]):
        self.chunks = list(chunks)
        self.reads = 0
        self.closed = False

    async def __aiter__(self):
        for chunk in self.chunks:
            self.reads += 1
            yield chunk

    async def aclose(self):
        self.closed = True


@pytest.fixture
def chat_request() -> ChatRequest:
    return ChatRequest(prompt="How can I save money?", locale="en")


@pytest.fixture
def sent_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_service(sent_requests):
    """Build a ChatService whose transport answers with ``handler(request)``."""

    def _make(handler) -> ChatService:
        def record(request: httpx.Request):
            sent_requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(record))
        return ChatService(chat_url=CHAT_URL, client=client)

    return _make


@pytest.fixture
def streaming_service(make_service):
    """Build a ChatService answering 200 with the given chunks; returns (service, body)."""

    def _make(chunks: list[bytes], status_code: int = 200):
        body = RecordingStream(chunks)
        service = make_service(lambda request: httpx.Response(status_code, stream=body))
        return service, body

    return _make


@pytest.fixture
def recording_stream():
    return RecordingStream
