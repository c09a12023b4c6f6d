"""
AI Logger - Structured logging for generation requests.

Captures:
- Request details (model, prompt preview, attachment info)
- Response details (length, tokens, latency)
- Errors raised by the remote service

Log Format:
==========
Each entry is a single line: a short label followed by a JSON object
carrying the request ID, so a request can be traced from start to end.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from app.core.config import settings
from app.ai.providers.base import AIResponse

# Configure the AI logger
logger = logging.getLogger("bringtolife.ai")
logger.setLevel(settings.LOG_LEVEL)

# Create console handler if not exists
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def _preview(text: str, limit: int = 100) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class AILogger:
    """
    Structured logger for generation calls.

    Usage:
        ai_logger.log_request(request_id, prompt, model, part_count=2, media_type="image/png")
        ai_logger.log_response(request_id, response)
        ai_logger.log_error(request_id, model, error)
    """

    def __init__(self):
        self._logger = logger

    def log_request(
        self,
        request_id: str,
        prompt: str,
        model: str,
        part_count: int = 1,
        media_type: Optional[str] = None,
        attachment_bytes: int = 0,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an outgoing generation request.

        Args:
            request_id: Unique request identifier
            prompt: Task prompt text (truncated in the log)
            model: Model name
            part_count: Number of prompt parts (text + inline data)
            media_type: Media type of the attached file, if any
            attachment_bytes: Size of the attached file
            metadata: Additional metadata
        """
        log_data = {
            "event": "ai_request",
            "request_id": request_id,
            "model": model,
            "part_count": part_count,
            "prompt_length": len(prompt),
            "prompt_preview": _preview(prompt),
            "media_type": media_type,
            "attachment_bytes": attachment_bytes,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.info(f"AI Request: {json.dumps(log_data)}")

    def log_response(
        self,
        request_id: str,
        response: AIResponse,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log a completed generation call."""
        log_data = {
            "event": "ai_response",
            "request_id": request_id,
            **response.to_dict(),
            "latency_ms": round(response.latency_ms, 2),
            "response_length": len(response.content),
            "empty": not response.content,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        # An empty response is served as a sentinel, worth a warning
        level = logging.INFO if response.content else logging.WARNING
        self._logger.log(level, f"AI Response: {json.dumps(log_data)}")

    def log_error(
        self,
        request_id: str,
        model: str,
        error: BaseException,
    ) -> None:
        """Log a failed generation call."""
        log_data = {
            "event": "ai_error",
            "request_id": request_id,
            "model": model,
            "error_type": type(error).__name__,
            "error": str(error),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._logger.error(f"AI Error: {json.dumps(log_data)}")


ai_logger = AILogger()
