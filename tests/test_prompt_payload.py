"""
Tests for prompt assembly.

This module tests:
- Task prompt text for each text/file combination
- Part ordering in the PromptPayload
- The attachment contracts
"""

import pytest

from app.ai.artifact.contracts import (
    AttachedFile,
    GenerationRequest,
    InlineDataPart,
    PromptPayload,
    TextPart,
)
from app.ai.artifact.payload import build_prompt_payload, build_task_prompt
from app.ai.artifact.prompts import (
    DEFAULT_DEMO_PROMPT,
    FILE_ANALYSIS_PROMPT,
    SYSTEM_INSTRUCTION,
)


PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


class TestBuildTaskPrompt:
    """Tests for build_task_prompt."""

    def test_text_only_is_verbatim(self):
        """Text without a file is used as-is."""
        assert build_task_prompt("Create a demo app", has_file=False) == "Create a demo app"

    def test_empty_text_without_file_uses_default(self):
        """Nothing typed and no file falls back to the demo request."""
        assert build_task_prompt("", has_file=False) == DEFAULT_DEMO_PROMPT
        assert DEFAULT_DEMO_PROMPT == "Create a demo app that shows off your capabilities."

    def test_file_only_uses_directive(self):
        """A file without text gets just the file-analysis directive."""
        assert build_task_prompt("", has_file=True) == FILE_ANALYSIS_PROMPT

    def test_file_and_text_appends_user_instructions(self):
        """A file with text gets the directive plus labeled instructions."""
        prompt = build_task_prompt("Make it dark mode", has_file=True)

        assert prompt == f"{FILE_ANALYSIS_PROMPT}\n\nUSER INSTRUCTIONS: Make it dark mode"

    @pytest.mark.parametrize("text", ["", "Make it dark mode", "   ", "🎮 retro"])
    def test_file_prompt_always_starts_with_directive(self, text):
        """With a file, the prompt begins with the directive whatever the text."""
        assert build_task_prompt(text, has_file=True).startswith(FILE_ANALYSIS_PROMPT)


class TestBuildPromptPayload:
    """Tests for build_prompt_payload."""

    def test_text_only_payload(self):
        """Scenario: 'Create a demo app', no file -> one text part."""
        payload = build_prompt_payload(GenerationRequest(instruction_text="Create a demo app"))

        assert payload.parts == (TextPart("Create a demo app"),)

    def test_empty_payload_uses_default(self):
        """Scenario: empty text, no file -> the fallback string."""
        payload = build_prompt_payload(GenerationRequest())

        assert payload.parts == (TextPart(DEFAULT_DEMO_PROMPT),)

    def test_file_payload_appends_inline_part(self):
        """Scenario: text + PNG -> [directive text, inline PNG]."""
        request = GenerationRequest(
            instruction_text="Make it dark mode",
            attached_file=AttachedFile(data=PNG_BYTES, media_type="image/png"),
        )

        payload = build_prompt_payload(request)

        assert len(payload) == 2
        assert payload.parts[0] == TextPart(
            f"{FILE_ANALYSIS_PROMPT}\n\nUSER INSTRUCTIONS: Make it dark mode"
        )
        assert payload.parts[1] == InlineDataPart(data=PNG_BYTES, media_type="image/png")

    def test_file_without_media_type_has_no_inline_part(self):
        """Bytes with no media type still get the directive but are not sent."""
        request = GenerationRequest(attached_file=AttachedFile(data=PNG_BYTES, media_type=""))

        payload = build_prompt_payload(request)

        assert payload.parts == (TextPart(FILE_ANALYSIS_PROMPT),)

    def test_pdf_payload(self):
        """PDF documents are sent the same way as images."""
        request = GenerationRequest(
            attached_file=AttachedFile(data=b"%PDF-1.7", media_type="application/pdf"),
        )

        payload = build_prompt_payload(request)

        assert payload.text == FILE_ANALYSIS_PROMPT
        assert payload.inline_parts == (InlineDataPart(b"%PDF-1.7", "application/pdf"),)


class TestContracts:
    """Tests for the request/payload dataclasses."""

    def test_attached_file_size(self):
        file = AttachedFile(data=PNG_BYTES, media_type="image/png", filename="a.png")

        assert file.size == len(PNG_BYTES)

    def test_request_has_file(self):
        assert GenerationRequest().has_file is False
        assert GenerationRequest(attached_file=AttachedFile(b"x", "image/gif")).has_file is True

    def test_payload_text_is_first_text_part(self):
        payload = PromptPayload(parts=(TextPart("first"), InlineDataPart(b"x", "image/png")))

        assert payload.text == "first"

    def test_system_instruction_forbids_fences_and_external_images(self):
        """The fixed instruction keeps its governing rules."""
        assert "<!DOCTYPE html>" in SYSTEM_INSTRUCTION
        assert "NO EXTERNAL IMAGES" in SYSTEM_INSTRUCTION
        assert "Copy Contract Address" in SYSTEM_INSTRUCTION
