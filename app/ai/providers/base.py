"""
Base AI Provider - Abstract interface for the remote generation service.

This module defines the contract a generation backend must follow:
accept a model, a system instruction, a temperature and an ordered list
of prompt parts (text and/or inline binary), and return generated text.

Design Pattern: Strategy Pattern
================================
The ArtifactGenerator only talks to AIProvider. Tests inject a fake
provider; production uses GeminiProvider.

Example:
    provider = GeminiProvider()
    response = await provider.generate_content(
        payload,
        system_instruction=SYSTEM_INSTRUCTION,
        temperature=0.5,
    )
    print(response.content)
"""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Any, Dict, TYPE_CHECKING
from enum import Enum
import logging

if TYPE_CHECKING:
    from app.ai.artifact.contracts import PromptPayload

logger = logging.getLogger("bringtolife.ai")


class ProviderType(str, Enum):
    """Enum of supported AI providers."""
    GEMINI = "gemini"


@dataclass
class TokenUsage:
    """
    Token usage statistics for an AI request.

    Used for cost tracking and request logging.
    """
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        """Calculate total if not provided."""
        if self.total_tokens == 0:
            self.total_tokens = self.prompt_tokens + self.completion_tokens


@dataclass
class AIResponse:
    """
    Standardized response from a generation provider.

    Attributes:
        content: The generated text ("" when the model returned no text)
        provider: Which provider generated this response
        model: The specific model used
        usage: Token usage statistics
        latency_ms: How long the request took
        raw_response: Original provider response (for debugging)
        metadata: Additional provider-specific data
        created_at: Timestamp of the response
    """
    content: str
    provider: ProviderType
    model: str
    usage: TokenUsage = field(default_factory=TokenUsage)
    latency_ms: float = 0.0
    raw_response: Optional[Any] = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "content": self.content[:100] + "..." if len(self.content) > 100 else self.content,
            "provider": self.provider.value,
            "model": self.model,
            "tokens": {
                "prompt": self.usage.prompt_tokens,
                "completion": self.usage.completion_tokens,
                "total": self.usage.total_tokens,
            },
            "latency_ms": self.latency_ms,
            "created_at": self.created_at.isoformat(),
        }


class AIProvider(ABC):
    """
    Abstract base class for generation providers.

    Unlike chat-style providers that fold failures into the response,
    generate_content raises GenerationError so the caller can surface it.
    """

    provider_type: ProviderType
    model: str

    @abstractmethod
    async def generate_content(
        self,
        payload: "PromptPayload",
        system_instruction: Optional[str] = None,
        temperature: float = 0.5,
        model_override: Optional[str] = None,
    ) -> AIResponse:
        """
        Generate text from a multi-part prompt.

        Args:
            payload: Ordered text/inline-data parts
            system_instruction: Out-of-band directive sent with the request
            temperature: Randomness (0=deterministic)
            model_override: Use a different model for this call only

        Returns:
            AIResponse with the generated content

        Raises:
            GenerationError: on any network, auth, quota or service failure
        """
        pass

    def _measure_latency(self, start_time: float) -> float:
        """Calculate latency in milliseconds."""
        return (time.time() - start_time) * 1000
