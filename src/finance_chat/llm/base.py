"""Abstract base class for LLM clients."""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from .types import GenerationConfig


class BaseLLMClient(ABC):
    """Abstract interface for LLM backends."""

    @abstractmethod
    def generate_stream(
        self,
        prompt: str,
        system: str = "",
        config: GenerationConfig | None = None,
    ) -> AsyncIterator[str]:
        """Stream a response from the LLM.

        Args:
            prompt: The user prompt.
            system: Optional system prompt.
            config: Optional generation configuration overrides.

        Yields:
            Text fragments in generation order.
        """
        ...

    async def close(self):
        pass
