"""
Contracts for artifact generation.

Dataclasses for the per-submission request and the multi-part prompt
sent to the model. Everything here lives for one request/response cycle.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class AttachedFile:
    """A user-supplied file (image or document) with its declared media type."""

    data: bytes
    """Raw file bytes."""

    media_type: str
    """Declared media type, e.g. 'image/png' or 'application/pdf'."""

    filename: Optional[str] = None
    """Original filename, for display and logs only."""

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class GenerationRequest:
    """One user submission: instruction text plus at most one file."""

    instruction_text: str = ""
    attached_file: Optional[AttachedFile] = None

    @property
    def has_file(self) -> bool:
        return self.attached_file is not None


@dataclass(frozen=True)
class TextPart:
    """Text segment of a prompt."""

    text: str


@dataclass(frozen=True)
class InlineDataPart:
    """Inline binary segment: raw bytes tagged with a media type."""

    data: bytes
    media_type: str


PromptPart = Union[TextPart, InlineDataPart]


@dataclass(frozen=True)
class PromptPayload:
    """Ordered prompt parts sent to the model in a single request."""

    parts: Tuple[PromptPart, ...]

    @property
    def text(self) -> str:
        """The task prompt (first text segment)."""
        for part in self.parts:
            if isinstance(part, TextPart):
                return part.text
        return ""

    @property
    def inline_parts(self) -> Tuple[InlineDataPart, ...]:
        return tuple(p for p in self.parts if isinstance(p, InlineDataPart))

    def __len__(self) -> int:
        return len(self.parts)
