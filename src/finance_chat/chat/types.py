"""Types for the chat service."""

from dataclasses import dataclass
from typing import Any, Optional

# Structured reply of send_message. Only the fields resolvable from the
# received text are present.
RecipeResult = dict[str, Any]


@dataclass(frozen=True)
class ChatRequest:
    """A prompt sent to the chat endpoint."""
    prompt: str
    locale: str

    def to_payload(self) -> dict[str, str]:
        return {"prompt": self.prompt, "locale": self.locale}


@dataclass(frozen=True)
class ChatStreamData:
    """One record of stream_message: the cumulative text and whether the stream ended."""
    chunk: str
    done: bool


@dataclass
class ChatMessage:
    """A question and its (possibly still streaming) answer in a chat session."""
    id: int
    question: str
    loading: bool = True
    answer: Optional[str] = None
