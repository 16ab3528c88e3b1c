"""Chat history that fills in answers as they stream."""

import itertools
import logging
from typing import Callable, Optional

from .service import ChatService
from .types import ChatMessage, ChatRequest

logger = logging.getLogger(__name__)


class ChatSession:
    """Ordered question/answer history for one user.

    Each ``ask`` appends a message straight away, then updates its answer
    in place as the reply streams in.
    """

    def __init__(
        self,
        service: ChatService,
        locale: str,
        on_success: Optional[Callable[[str], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.service = service
        self.locale = locale
        self.on_success = on_success
        self.on_error = on_error
        self.messages: list[ChatMessage] = []
        self.error: Optional[Exception] = None
        self._pending = 0
        self._ids = itertools.count(1)

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    async def ask(self, prompt: str) -> str:
        """Send ``prompt`` and stream the answer into the history.

        Returns:
            The final answer text.

        Raises:
            Whatever the chat service raised; the message is left with no answer.
        """
        message = ChatMessage(id=next(self._ids), question=prompt)
        self.messages.append(message)
        self.error = None

        def update(text: str) -> None:
            message.loading = False
            message.answer = text

        self._pending += 1
        try:
            answer = await self.service.send_message_stream(
                ChatRequest(prompt=prompt, locale=self.locale), update
            )
        except Exception as e:
            logger.warning("Chat message %d failed: %s", message.id, e)
            message.loading = False
            message.answer = None
            self.error = e
            if self.on_error:
                self.on_error(e)
            raise
        finally:
            self._pending -= 1

        message.loading = False
        message.answer = answer
        if self.on_success:
            self.on_success(answer)
        return answer

    def clear(self):
        self.messages = []
