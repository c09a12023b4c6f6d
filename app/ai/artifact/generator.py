"""
ArtifactGenerator - Turns a prompt and/or file into a single HTML app.

Builds one multimodal request (system instruction + task prompt + optional
inline file), awaits the model, and cleans the returned text.
"""

import logging
import uuid
from typing import Optional, TYPE_CHECKING

from app.core.config import settings
from app.ai.monitoring import ai_logger
from app.ai.artifact.contracts import AttachedFile, GenerationRequest
from app.ai.artifact.fences import strip_code_fences
from app.ai.artifact.payload import build_prompt_payload
from app.ai.artifact.prompts import FAILED_GENERATION_SENTINEL, SYSTEM_INSTRUCTION

if TYPE_CHECKING:
    from app.ai.providers.base import AIProvider

logger = logging.getLogger("bringtolife.ai.generator")


class ArtifactGenerator:
    """
    Generates self-contained HTML applications.

    Usage:
        generator = ArtifactGenerator()
        html = await generator.generate(
            "Make it dark mode",
            file_bytes=png_bytes,
            media_type="image/png",
        )

    Failures from the remote call are logged and re-raised as-is
    (GenerationError). An empty model response is not an error: the
    failure sentinel comment is returned instead.
    """

    def __init__(
        self,
        provider: "AIProvider" = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ):
        """
        Args:
            provider: Generation backend (resolved lazily when omitted)
            model: Model override (defaults to the provider's model)
            temperature: Defaults to settings.GENERATION_TEMPERATURE
        """
        self._provider = provider
        self._model = model
        self._temperature = (
            temperature if temperature is not None else settings.GENERATION_TEMPERATURE
        )

    @property
    def provider(self) -> "AIProvider":
        if self._provider is None:
            from app.ai.providers.gemini import get_gemini_provider
            self._provider = get_gemini_provider()
        return self._provider

    @property
    def model(self) -> str:
        return self._model or self.provider.model

    async def generate(
        self,
        instruction_text: str = "",
        file_bytes: Optional[bytes] = None,
        media_type: Optional[str] = None,
    ) -> str:
        """
        Generate an HTML artifact.

        Args:
            instruction_text: What the user asked for (may be empty)
            file_bytes: Contents of the attached file, if any
            media_type: Declared media type of the attached file

        Returns:
            The HTML document with any markdown fences removed

        Raises:
            GenerationError: if the remote call fails
        """
        attached = None
        if file_bytes:
            attached = AttachedFile(data=file_bytes, media_type=media_type or "")

        request = GenerationRequest(
            instruction_text=instruction_text or "",
            attached_file=attached,
        )
        return await self.generate_from_request(request)

    async def generate_from_request(self, request: GenerationRequest) -> str:
        """Same as generate(), for callers already holding a request."""
        request_id = uuid.uuid4().hex[:12]
        payload = build_prompt_payload(request)
        attached = request.attached_file

        ai_logger.log_request(
            request_id=request_id,
            prompt=payload.text,
            model=self.model,
            part_count=len(payload),
            media_type=attached.media_type if attached else None,
            attachment_bytes=attached.size if attached else 0,
        )

        try:
            response = await self.provider.generate_content(
                payload,
                system_instruction=SYSTEM_INSTRUCTION,
                temperature=self._temperature,
                model_override=self._model,
            )
        except Exception as e:
            ai_logger.log_error(request_id, self.model, e)
            raise

        ai_logger.log_response(request_id, response)

        if not response.content:
            logger.warning("Model returned no text, serving failure sentinel")

        html = strip_code_fences(response.content or FAILED_GENERATION_SENTINEL)
        logger.info(f"Generated {len(html)} chars of HTML in {response.latency_ms:.0f}ms")
        return html

    def __repr__(self) -> str:
        return (
            f"ArtifactGenerator("
            f"model={self._model or 'default'}, "
            f"temperature={self._temperature})"
        )
