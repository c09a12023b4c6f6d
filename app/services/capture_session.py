"""
Capture Session - Collects one instruction and at most one file, then submits.

This is the UI-agnostic state behind the input area: whatever front end
renders it (web form, desktop widget, CLI) forwards picker selections,
drops, pastes and key presses here.

Rules:
- picker, drop and paste share the same validation (images and PDFs only)
- a new valid file replaces the previous one
- an invalid file triggers a notice and changes nothing
- nothing is accepted while a generation is in flight or the session is disabled
- submitting with blank text and no file is a silent no-op
- requests are never queued; a busy session simply ignores them

Usage:
    session = CaptureSession(generator, on_notice=print)
    session.instruction_text = "Make it dark mode"
    session.attach_file(AttachedFile(png, "image/png"), FileSource.PASTE)
    html = await session.submit()

    # or, from a key handler running on the event loop
    if session.handle_key("Enter"):
        html = await session.submit_task
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

from app.ai.errors import InvalidAttachmentError
from app.ai.artifact.contracts import AttachedFile
from app.services.attachments import (
    INVALID_ATTACHMENT_NOTICE,
    is_empty_submission,
    validate_attachment,
)

if TYPE_CHECKING:
    from app.ai.artifact.generator import ArtifactGenerator


logger = logging.getLogger("bringtolife.services.capture")


# Key that submits when pressed in the text field without modifiers
ACTIVATE_KEY = "Enter"


class FileSource(str, Enum):
    """Where an attachment came from."""
    PICKER = "picker"
    DROP = "drop"
    PASTE = "paste"


class CaptureSession:
    """
    State for one user's input area.

    Attributes:
        instruction_text: Current free-text instruction
        attached_file: Currently attached file, if any
        is_generating: True while a submitted generation is pending
        disabled: Externally disabled (e.g. while a result is shown)
    """

    def __init__(
        self,
        generator: "ArtifactGenerator",
        on_notice: Optional[Callable[[str], None]] = None,
        disabled: bool = False,
        instruction_text: str = "",
    ):
        self._generator = generator
        self._on_notice = on_notice
        self.disabled = disabled
        self.instruction_text = instruction_text
        self.attached_file: Optional[AttachedFile] = None
        self.is_generating = False
        self.submit_task: Optional["asyncio.Task[Optional[str]]"] = None

    @property
    def is_busy(self) -> bool:
        return self.is_generating or self.disabled

    def attach_file(self, file: AttachedFile, source: FileSource = FileSource.PICKER) -> bool:
        """
        Offer a file to the session.

        Returns:
            True if the file is now attached, False if it was ignored or rejected
        """
        if self.is_busy:
            logger.debug(f"Ignoring {source.value} attachment while busy")
            return False

        try:
            validate_attachment(file)
        except InvalidAttachmentError as e:
            logger.info(f"Rejected {source.value} attachment: {e}")
            self._notify(INVALID_ATTACHMENT_NOTICE)
            return False

        self.attached_file = file
        logger.debug(f"Attached {file.media_type} ({file.size} bytes) from {source.value}")
        return True

    def clear_file(self) -> bool:
        """
        Remove the attached file.

        Returns:
            True if the file was removed, False if ignored while busy
        """
        if self.is_busy:
            logger.debug("Ignoring file removal while busy")
            return False

        self.attached_file = None
        return True

    def handle_key(
        self,
        key: str,
        shift: bool = False,
        ctrl: bool = False,
        alt: bool = False,
        meta: bool = False,
    ) -> bool:
        """
        Handle a key press in the text field.

        An unmodified Enter schedules submit() on the running event loop and
        stores the task in `submit_task`; await it for the HTML or the
        GenerationError. The return value never depends on how submit ends.

        Returns:
            True if the key was consumed (no newline should be inserted),
            False if the front end should handle it normally
        """
        if key != ACTIVATE_KEY or shift or ctrl or alt or meta:
            return False

        self.submit_task = asyncio.get_running_loop().create_task(self.submit())
        return True

    async def submit(self) -> Optional[str]:
        """
        Send the current text and file to the generator.

        Returns:
            The generated HTML, or None when nothing was submitted
            (empty input, or the session is busy/disabled)

        Raises:
            GenerationError: propagated from the generator; the in-flight
            flag is cleared first
        """
        if self.is_busy:
            logger.debug("Ignoring submit while busy")
            return None

        if is_empty_submission(self.instruction_text, self.attached_file):
            return None

        file = self.attached_file
        self.is_generating = True
        try:
            # Text and file are kept afterwards so the user can retry
            return await self._generator.generate(
                self.instruction_text,
                file_bytes=file.data if file else None,
                media_type=file.media_type if file else None,
            )
        finally:
            self.is_generating = False

    def _notify(self, message: str) -> None:
        if self._on_notice is not None:
            self._on_notice(message)
