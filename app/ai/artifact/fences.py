"""
Markdown fence stripping for model output.

The model is told to return raw HTML, but it sometimes wraps the document
in ```html ... ``` anyway.
"""

import re

# One opener at the very start: ``` or ```html, plus all whitespace after it
_LEADING_FENCE = re.compile(r"\A```(?:html)?\s*", re.IGNORECASE)

# One bare closer at the very end, with the whitespace around it
_TRAILING_FENCE = re.compile(r"\s*```\s*\Z")


def strip_code_fences(text: str) -> str:
    """
    Remove a leading ```/```html opener and a trailing ``` closer.

    Each fence is removed at most once and only when anchored to the start
    or end of the string. Text without fences is returned unchanged.

    Example:
        >>> strip_code_fences("```html\\n<!DOCTYPE html>...\\n```")
        '<!DOCTYPE html>...'
    """
    if not text:
        return text

    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text
