"""Types for the LLM abstraction layer."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class GenerationConfig:
    """Configuration for LLM generation."""
    temperature: float = 0.2
    num_ctx: int = 16384
    model: Optional[str] = None  # Override default model
    format: Optional[dict[str, Any]] = None  # JSON schema the output must follow
