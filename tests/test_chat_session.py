"""Tests for the chat history that fills in streamed answers."""

from __future__ import annotations

import json

import httpx
import pytest

from finance_chat.chat import ChatMessage, ChatSession, RequestFailed


class TestChatSession:
    @pytest.mark.asyncio
    async def test_answer_streams_into_history(self, streaming_service):
        service, _ = streaming_service([b"Track", b" your spending."])
        seen: list[ChatMessage] = []

        session = ChatSession(service, locale="en")
        real_send = service.send_message_stream

        async def spy(request, on_update):
            def wrapped(text):
                on_update(text)
                seen.append(ChatMessage(**vars(session.messages[-1])))
            return await real_send(request, wrapped)

        service.send_message_stream = spy
        answer = await session.ask("How do I budget?")

        assert answer == "Track your spending."
        assert [m.answer for m in seen] == ["Track", "Track your spending."]
        assert all(m.loading is False for m in seen)
        assert session.messages == [
            ChatMessage(id=1, question="How do I budget?", loading=False, answer="Track your spending.")
        ]
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_request_uses_session_locale(self, streaming_service, sent_requests):
        service, _ = streaming_service([b"ok"])
        session = ChatSession(service, locale="fr")

        await session.ask("Comment épargner ?")

        assert json.loads(sent_requests[0].content) == {"prompt": "Comment épargner ?", "locale": "fr"}

    @pytest.mark.asyncio
    async def test_success_callback_gets_final_answer(self, streaming_service):
        service, _ = streaming_service([b"Save ", b"more."])
        answers: list[str] = []
        session = ChatSession(service, locale="en", on_success=answers.append)

        await session.ask("How can I save money?")

        assert answers == ["Save more."]

    @pytest.mark.asyncio
    async def test_failure_clears_answer_and_reraises(self, streaming_service):
        service, _ = streaming_service([b"never"], status_code=500)
        errors: list[Exception] = []
        session = ChatSession(service, locale="en", on_error=errors.append)

        with pytest.raises(RequestFailed):
            await session.ask("How can I save money?")

        assert session.messages == [
            ChatMessage(id=1, question="How can I save money?", loading=False, answer=None)
        ]
        assert isinstance(session.error, RequestFailed)
        assert errors == [session.error]
        assert session.is_loading is False

    @pytest.mark.asyncio
    async def test_ids_increase_and_clear_empties_history(self, make_service):
        service = make_service(lambda request: httpx.Response(200, content=b"answer"))
        session = ChatSession(service, locale="en")

        await session.ask("first")
        await session.ask("second")
        assert [m.id for m in session.messages] == [1, 2]

        session.clear()
        assert session.messages == []
