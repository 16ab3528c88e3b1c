"""Ollama LLM client implementation."""

import json
import logging
from typing import AsyncIterator

import httpx

from .base import BaseLLMClient
from .types import GenerationConfig

logger = logging.getLogger(__name__)


class OllamaClient(BaseLLMClient):
    """LLM client that talks to an Ollama instance."""

    def __init__(self, base_url: str, model: str):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self._client: httpx.AsyncClient | None = None

    @property
    def generate_url(self) -> str:
        # Support both full URL (http://host/api/generate) and base URL (http://host:11434)
        if self.base_url.endswith("/api/generate"):
            return self.base_url
        return f"{self.base_url}/api/generate"

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def generate_stream(
        self,
        prompt: str,
        system: str = "",
        config: GenerationConfig | None = None,
    ) -> AsyncIterator[str]:
        cfg = config or GenerationConfig()
        model = cfg.model or self.model

        payload = {
            "model": model,
            "prompt": prompt,
            "system": system,
            "stream": True,
            "options": {
                "temperature": cfg.temperature,
                "num_ctx": cfg.num_ctx,
            },
        }
        if cfg.format is not None:
            payload["format"] = cfg.format

        client = await self._get_client()
        async with client.stream("POST", self.generate_url, json=payload, timeout=None) as response:
            response.raise_for_status()

            async for line in response.aiter_lines():
                if not line:
                    continue

                try:
                    chunk = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Failed to parse chunk: {line[:100]}")
                    continue

                if chunk.get("error"):
                    raise RuntimeError(f"Ollama error: {chunk['error']}")

                text = chunk.get("response", "")
                if text:
                    yield text

                if chunk.get("done"):
                    return

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
