"""LLM abstraction layer."""

from .base import BaseLLMClient
from .ollama import OllamaClient
from .types import GenerationConfig

__all__ = ["BaseLLMClient", "OllamaClient", "GenerationConfig"]
