"""
AI Module - Turns sketches, photos and prompts into working HTML apps.

Module Structure:
================
- providers/: Remote generation service clients (Gemini)
- artifact/: Prompt assembly, the generator and output cleanup
- monitoring/: Structured request/response logging
- errors.py: GenerationError and InvalidAttachmentError

Flow:
=====
1. User: "Make it dark mode" + photo of a napkin sketch
2. Prompt assembly: file-analysis directive + user instructions + image bytes
3. Gemini: system instruction + prompt parts -> raw HTML
4. Cleanup: strip stray markdown fences
5. Return the HTML document to the caller
"""

__version__ = "0.1.0"
