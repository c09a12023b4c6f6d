"""
Attachment validation - the single intake path for user files.

Files arriving from the file picker, drag-and-drop or clipboard paste
are all checked here. Only images and PDFs are accepted.
"""

from typing import Optional

from app.ai.errors import InvalidAttachmentError
from app.ai.artifact.contracts import AttachedFile


IMAGE_MEDIA_PREFIX = "image/"
PDF_MEDIA_TYPE = "application/pdf"

# User-facing message for rejected files
INVALID_ATTACHMENT_NOTICE = "Please upload an image or PDF."


def is_supported_media_type(media_type: Optional[str]) -> bool:
    """True for any image/* type or exactly application/pdf."""
    if not media_type:
        return False
    return media_type.startswith(IMAGE_MEDIA_PREFIX) or media_type == PDF_MEDIA_TYPE


def validate_attachment(file: AttachedFile) -> AttachedFile:
    """
    Check an incoming file against the allow-list.

    Returns:
        The same file, for chaining

    Raises:
        InvalidAttachmentError: if the media type is not allowed
    """
    if not is_supported_media_type(file.media_type):
        raise InvalidAttachmentError(file.media_type)
    return file


def is_empty_submission(instruction_text: Optional[str], file: Optional[AttachedFile]) -> bool:
    """A submission with blank text and no file does nothing."""
    return not (instruction_text or "").strip() and file is None
