"""
Gemini Provider - Google's GenAI SDK.

Sends a multimodal request (text + optional inline file) with a system
instruction and returns the generated text.
"""

import time
import logging
from functools import lru_cache
from typing import Optional, List

from google import genai
from google.genai import types

from app.core.config import settings
from app.ai.errors import GenerationError
from app.ai.artifact.contracts import PromptPayload, TextPart, InlineDataPart
from app.ai.providers.base import (
    AIProvider,
    AIResponse,
    ProviderType,
    TokenUsage
)

logger = logging.getLogger("bringtolife.ai.gemini")


class GeminiProvider(AIProvider):
    provider_type = ProviderType.GEMINI

    def __init__(self, model: str = None, api_key: str = None):
        self.model = model or settings.GEMINI_MODEL
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        # Built on first call so a missing key fails the call, not the import
        self._client: Optional[genai.Client] = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("Gemini API key not configured", model=self.model)
            self._client = genai.Client(api_key=self.api_key)
            logger.info(f"Gemini client initialized with model: {self.model}")
        return self._client

    async def generate_content(
        self,
        payload: PromptPayload,
        system_instruction: Optional[str] = None,
        temperature: float = 0.5,
        model_override: Optional[str] = None,
    ) -> AIResponse:
        start_time = time.time()
        model = model_override or self.model
        client = self._get_client()

        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            temperature=temperature,
        )

        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=types.Content(role="user", parts=self._to_parts(payload)),
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini generation failed: {e}")
            raise GenerationError(f"Gemini generation failed: {e}", model=model) from e

        return AIResponse(
            content=response.text or "",
            provider=self.provider_type,
            model=model,
            usage=self._extract_usage(response),
            latency_ms=self._measure_latency(start_time),
            raw_response=response,
        )

    # --- HELPERS ---

    def _to_parts(self, payload: PromptPayload) -> List[types.Part]:
        parts = []
        for part in payload.parts:
            if isinstance(part, TextPart):
                parts.append(types.Part.from_text(text=part.text))
            elif isinstance(part, InlineDataPart):
                parts.append(types.Part.from_bytes(data=part.data, mime_type=part.media_type))
        return parts

    def _extract_usage(self, response) -> TokenUsage:
        # The SDK returns None when no usage is reported
        usage = response.usage_metadata
        if not usage:
            return TokenUsage()
        return TokenUsage(
            prompt_tokens=usage.prompt_token_count or 0,
            completion_tokens=usage.candidates_token_count or 0,
        )


@lru_cache(maxsize=1)
def get_gemini_provider() -> GeminiProvider:
    """Return the process-wide provider, created on first use."""
    return GeminiProvider()
