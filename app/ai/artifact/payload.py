"""
Prompt assembly.

Turns a GenerationRequest into the ordered PromptPayload sent to the
model: the task prompt text first, then the file bytes when present.
"""

from app.ai.artifact.contracts import (
    GenerationRequest,
    InlineDataPart,
    PromptPayload,
    TextPart,
)
from app.ai.artifact.prompts import (
    DEFAULT_DEMO_PROMPT,
    FILE_ANALYSIS_PROMPT,
    USER_INSTRUCTIONS_LABEL,
)


def build_task_prompt(instruction_text: str, has_file: bool) -> str:
    """
    Build the task prompt text.

    Args:
        instruction_text: What the user typed (may be empty)
        has_file: Whether a file accompanies the request

    Returns:
        - file + text: the file-analysis directive, a blank line, then the
          user's text labeled as user instructions
        - file only: the file-analysis directive
        - text only: the text verbatim
        - neither: the default demo request
    """
    if has_file:
        if instruction_text:
            return f"{FILE_ANALYSIS_PROMPT}\n\n{USER_INSTRUCTIONS_LABEL}{instruction_text}"
        return FILE_ANALYSIS_PROMPT

    return instruction_text or DEFAULT_DEMO_PROMPT


def build_prompt_payload(request: GenerationRequest) -> PromptPayload:
    """Build [task prompt] or [task prompt, inline file] for one request."""
    parts = [TextPart(build_task_prompt(request.instruction_text, request.has_file))]

    attached = request.attached_file
    if attached is not None and attached.media_type:
        parts.append(InlineDataPart(data=attached.data, media_type=attached.media_type))

    return PromptPayload(parts=tuple(parts))
