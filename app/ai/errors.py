"""
Error types for artifact generation.

- InvalidAttachmentError: file type outside the image/PDF allow-list.
  Handled locally by the capture layer (user notice, no state change).
- GenerationError: the remote model call failed (network, auth, quota,
  malformed response). Never retried here; logged and propagated.
"""

from typing import Optional


class BringToLifeError(Exception):
    """Base class for all application errors."""


class InvalidAttachmentError(BringToLifeError):
    """Raised when an attachment's media type is not an image or PDF."""

    def __init__(self, media_type: Optional[str]):
        self.media_type = media_type
        super().__init__(f"Unsupported attachment type: {media_type or 'unknown'}")


class GenerationError(BringToLifeError):
    """
    Raised when the remote generation service fails.

    The underlying SDK/transport exception is kept as __cause__.
    """

    def __init__(self, message: str, model: Optional[str] = None):
        self.model = model
        super().__init__(message)
