"""Streaming chat client."""

from .errors import BodyNotReadable, ChatServiceError, RequestFailed
from .partial_json import MalformedJSON, ParseOutcome, parse_partial, recover_json
from .service import ChatService, chat_service
from .session import ChatSession
from .stream_reader import StreamReader
from .types import ChatMessage, ChatRequest, ChatStreamData, RecipeResult

__all__ = [
    "BodyNotReadable",
    "ChatServiceError",
    "RequestFailed",
    "MalformedJSON",
    "ParseOutcome",
    "parse_partial",
    "recover_json",
    "ChatService",
    "chat_service",
    "ChatSession",
    "StreamReader",
    "ChatMessage",
    "ChatRequest",
    "ChatStreamData",
    "RecipeResult",
]
