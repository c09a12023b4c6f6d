"""
Artifact generation: prompt assembly, fence stripping and the generator.

The generator itself lives in app.ai.artifact.generator and is imported
from there, so the provider package can depend on these contracts.
"""

from app.ai.artifact.contracts import (
    AttachedFile,
    GenerationRequest,
    InlineDataPart,
    PromptPayload,
    TextPart,
)
from app.ai.artifact.fences import strip_code_fences
from app.ai.artifact.payload import build_prompt_payload, build_task_prompt

__all__ = [
    "AttachedFile",
    "GenerationRequest",
    "InlineDataPart",
    "PromptPayload",
    "TextPart",
    "strip_code_fences",
    "build_prompt_payload",
    "build_task_prompt",
]
