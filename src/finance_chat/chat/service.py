"""Client for the streaming chat endpoint."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Optional

import httpx

from ..config import settings
from .errors import BodyNotReadable, RequestFailed
from .partial_json import recover_json
from .stream_reader import StreamReader
from .types import ChatRequest, ChatStreamData, RecipeResult

logger = logging.getLogger(__name__)

# Statuses that never carry a response body.
NO_BODY_STATUS_CODES = {204, 205, 304}


class ChatService:
    """Sends prompts to the chat endpoint and consumes the streamed reply.

    Three ways to consume the reply:

    - ``send_message`` waits for the whole stream and parses it as a
      (possibly truncated) JSON recipe.
    - ``send_message_stream`` calls ``on_update`` with the cumulative text
      after every chunk and returns the final text.
    - ``stream_message`` is an async generator of ``ChatStreamData`` records,
      one per chunk, then a final ``done=True`` record.

    Every call makes its own request and owns its own decoder, so calls can
    run concurrently on one service.
    """

    def __init__(self, chat_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.chat_url = chat_url or settings.chat_url
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    @asynccontextmanager
    async def _open_stream(self, request: ChatRequest) -> AsyncIterator[StreamReader]:
        """POST the request and yield a reader over the response body.

        The response is closed when the block exits, including when a
        consumer stops early.
        """
        client = await self._get_client()
        async with client.stream(
            "POST",
            self.chat_url,
            json=request.to_payload(),
            headers={"Content-Type": "application/json"},
            timeout=None,
        ) as response:
            if not response.is_success:
                logger.info("Chat request failed with status %d", response.status_code)
                raise RequestFailed(response.status_code)
            logger.debug("Chat stream opened (locale=%s)", request.locale)
            yield StreamReader(_readable_body(response))
            logger.debug("Chat stream closed")

    async def send_message(self, request: ChatRequest) -> RecipeResult:
        """Send a prompt and return the reply parsed as a recipe.

        A reply cut off mid-document yields only the fields it completed.

        Raises:
            RequestFailed: The endpoint answered with a non-success status.
            BodyNotReadable: The response has no body.
        """
        async with self._open_stream(request) as reader:
            text = await reader.read_all()
        return recover_json(text)

    async def send_message_stream(
        self,
        request: ChatRequest,
        on_update: Callable[[str], None],
    ) -> str:
        """Send a prompt, reporting the cumulative text after each chunk.

        ``on_update`` is called once per chunk, in order, and never for an
        empty stream.

        Returns:
            The full reply text, or ``""`` if the stream was empty.
        """
        async with self._open_stream(request) as reader:
            async for text in reader:
                on_update(text)
            return reader.text

    async def stream_message(self, request: ChatRequest) -> AsyncIterator[ChatStreamData]:
        """Lazily yield the reply as cumulative-text records.

        Nothing is sent until the first record is requested. Close the
        generator (``aclose()`` or ``contextlib.aclosing``) to stop early;
        no chunk is read after that and the response is released.
        """
        async with self._open_stream(request) as reader:
            async for text in reader:
                yield ChatStreamData(chunk=text, done=False)
            yield ChatStreamData(chunk=reader.text, done=True)

    async def close(self):
        if self._client and self._owns_client:
            await self._client.aclose()
            self._client = None


def _readable_body(response: httpx.Response) -> Optional[AsyncIterator[bytes]]:
    """Return the body chunks of ``response``, or None if it has no body to read."""
    if response.status_code in NO_BODY_STATUS_CODES:
        return None
    if response.is_closed:
        # A closed response is only readable if httpx buffered its content.
        try:
            response.content
        except httpx.ResponseNotRead:
            return None
    return response.aiter_bytes()


# Global instance
chat_service = ChatService()
