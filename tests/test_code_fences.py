"""
Tests for markdown fence stripping on model output.
"""

import pytest

from app.ai.artifact.fences import strip_code_fences


DOC = "<!DOCTYPE html>\n<html><body>hi</body></html>"


class TestStripCodeFences:
    """Tests for strip_code_fences."""

    def test_html_fenced_document(self):
        """Scenario: ```html ... ``` becomes the bare document."""
        assert strip_code_fences("```html\n<!DOCTYPE html>...\n```") == "<!DOCTYPE html>..."

    def test_bare_fence(self):
        assert strip_code_fences(f"```\n{DOC}\n```") == DOC

    def test_uppercase_language_tag(self):
        assert strip_code_fences(f"```HTML\n{DOC}\n```") == DOC

    def test_leading_fence_only(self):
        assert strip_code_fences(f"```html\n{DOC}") == DOC

    def test_trailing_fence_only(self):
        assert strip_code_fences(f"{DOC}\n```") == DOC

    def test_trailing_fence_with_final_newline(self):
        assert strip_code_fences(f"```html\n{DOC}\n```\n") == DOC

    def test_unfenced_text_unchanged(self):
        assert strip_code_fences(DOC) == DOC

    def test_inner_fences_kept(self):
        """Only fences anchored at the start/end are removed."""
        text = "<!DOCTYPE html><pre>```js\ncode\n```</pre></html>"

        assert strip_code_fences(text) == text

    def test_blank_lines_after_opener_removed(self):
        assert strip_code_fences("```html\n\n<!DOCTYPE html>") == "<!DOCTYPE html>"
        assert strip_code_fences("```  \r\n\n" + DOC) == DOC

    def test_doubled_fences_only_one_removed(self):
        """Exactly one fence per end is removed, even if the model doubled them."""
        assert strip_code_fences("<p>x</p>\n```\n```") == "<p>x</p>\n```"
        assert strip_code_fences("```html\n```html\n<p>x</p>") == "```html\n<p>x</p>"

    def test_empty_string(self):
        assert strip_code_fences("") == ""

    @pytest.mark.parametrize("text", [
        f"```html\n{DOC}\n```",
        f"```\n{DOC}\n```",
        f"```html\n{DOC}",
        f"{DOC}\n```",
        DOC,
        "<!-- Failed to generate content -->",
    ])
    def test_idempotent(self, text):
        """Stripping twice equals stripping once, and no fence survives."""
        once = strip_code_fences(text)

        assert strip_code_fences(once) == once
        assert not once.startswith("```")
        assert not once.endswith("```")
