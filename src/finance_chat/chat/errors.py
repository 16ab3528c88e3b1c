"""Errors raised by the chat service."""


class ChatServiceError(Exception):
    """Base class for chat service failures detected before decoding starts."""


class RequestFailed(ChatServiceError):
    """The chat endpoint answered with a non-success status."""

    def __init__(self, status_code: int, message: str = "Failed to send message"):
        super().__init__(f"{message} (status {status_code})")
        self.status_code = status_code


class BodyNotReadable(ChatServiceError):
    """The response carries no body that can be read."""

    def __init__(self, message: str = "Response body is not readable"):
        super().__init__(message)
