"""
AI Providers Module - Clients for the remote generation service.

Each provider implements AIProvider.generate_content, so the generator
can run against Gemini in production and a fake provider in tests:
    response = await provider.generate_content(payload, system_instruction=...)
"""

from app.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage
from app.ai.providers.gemini import GeminiProvider, get_gemini_provider

__all__ = [
    "AIProvider",
    "AIResponse",
    "ProviderType",
    "TokenUsage",
    "GeminiProvider",
    "get_gemini_provider",
]
