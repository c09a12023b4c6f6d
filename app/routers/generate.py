"""
Generate Router - HTTP entry point for turning prompts and files into HTML apps.

This router handles HTTP concerns only (form parsing, status codes).
Validation rules live in app.services.attachments and generation in
ArtifactGenerator.

Status codes:
=============
- 200: HTML generated
- 204: empty submission (no text, no file), nothing generated
- 413: attachment too large
- 415: attachment is not an image or PDF
- 502: the remote model call failed
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile, status
from pydantic import BaseModel, Field

from app.core.config import settings
from app.deps import get_artifact_generator
from app.ai.errors import GenerationError, InvalidAttachmentError
from app.ai.artifact.contracts import AttachedFile
from app.ai.artifact.generator import ArtifactGenerator
from app.services.attachments import (
    INVALID_ATTACHMENT_NOTICE,
    is_empty_submission,
    validate_attachment,
)


# ---------------------------------------------------------------------------
# LOGGER SETUP
# ---------------------------------------------------------------------------
logger = logging.getLogger("bringtolife.routers.generate")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/generate", tags=["generate"])


# ---------------------------------------------------------------------------
# RESPONSE SCHEMAS
# ---------------------------------------------------------------------------

class GenerateResponse(BaseModel):
    """
    Response schema for POST /generate.

    Example:
    {
        "html": "<!DOCTYPE html>...",
        "model": "gemini-3-pro-preview",
        "has_attachment": true
    }
    """
    html: str = Field(description="Self-contained HTML document")
    model: str = Field(description="Model that generated the document")
    has_attachment: bool = Field(description="Whether a file was sent with the prompt")


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------

async def _read_upload(file: Optional[UploadFile]) -> Optional[AttachedFile]:
    """Read an upload into an AttachedFile; empty uploads count as no file."""
    if file is None:
        return None

    # One byte past the limit is enough to detect an oversized upload
    data = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if not data:
        return None

    if len(data) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Attachment exceeds {settings.MAX_UPLOAD_BYTES} bytes",
        )

    return AttachedFile(
        data=data,
        media_type=file.content_type or "",
        filename=file.filename,
    )


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post(
    "",
    response_model=GenerateResponse,
    responses={204: {"description": "Empty submission, nothing generated"}},
)
async def generate_artifact(
    prompt: str = Form(default=""),
    file: Optional[UploadFile] = File(default=None),
    generator: ArtifactGenerator = Depends(get_artifact_generator),
):
    """
    Generate a single-page HTML app from a prompt, a file, or both.

    **Examples:**
    - prompt only: "A pomodoro timer with a retro terminal look"
    - file only: a photo of a napkin sketch
    - both: a photo of an old phone + "Make it dark mode"
    """
    attached = await _read_upload(file)

    if attached is not None:
        try:
            validate_attachment(attached)
        except InvalidAttachmentError as e:
            logger.info(f"Rejected upload: {e}")
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail=INVALID_ATTACHMENT_NOTICE,
            )

    if is_empty_submission(prompt, attached):
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    try:
        html = await generator.generate(
            prompt,
            file_bytes=attached.data if attached else None,
            media_type=attached.media_type if attached else None,
        )
    except GenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    return GenerateResponse(
        html=html,
        model=generator.model,
        has_attachment=attached is not None,
    )
