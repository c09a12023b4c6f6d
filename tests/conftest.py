"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- A fake generation provider (no network, records every call)
- An ArtifactGenerator wired to the fake provider
- A FastAPI TestClient with the generator dependency overridden
"""

import pytest
from typing import Generator, List, Optional

from fastapi.testclient import TestClient

from app.main import app
from app.deps import get_artifact_generator
from app.ai.artifact.contracts import PromptPayload
from app.ai.artifact.generator import ArtifactGenerator
from app.ai.providers.base import AIProvider, AIResponse, ProviderType, TokenUsage


# ---------------------------------------------------------------------------
# FAKE PROVIDER
# ---------------------------------------------------------------------------

class FakeProvider(AIProvider):
    """
    In-memory stand-in for the remote generation service.

    - `content` is returned as the response text
    - `error`, when set, is raised instead of responding
    - every call is appended to `calls`
    """

    provider_type = ProviderType.GEMINI

    def __init__(self, content: str = "<!DOCTYPE html><html></html>", error: Optional[Exception] = None):
        self.model = "fake-model"
        self.content = content
        self.error = error
        self.calls: List[dict] = []

    async def generate_content(
        self,
        payload: PromptPayload,
        system_instruction: Optional[str] = None,
        temperature: float = 0.5,
        model_override: Optional[str] = None,
    ) -> AIResponse:
        self.calls.append({
            "payload": payload,
            "system_instruction": system_instruction,
            "temperature": temperature,
            "model_override": model_override,
        })
        if self.error is not None:
            raise self.error
        return AIResponse(
            content=self.content,
            provider=self.provider_type,
            model=model_override or self.model,
            usage=TokenUsage(prompt_tokens=10, completion_tokens=20),
        )


# ---------------------------------------------------------------------------
# GENERATOR FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture
def make_provider():
    """Factory for FakeProvider instances with custom content or errors."""
    return FakeProvider


@pytest.fixture
def fake_provider() -> FakeProvider:
    """A fake provider returning a minimal HTML document."""
    return FakeProvider()


@pytest.fixture
def generator(fake_provider: FakeProvider) -> ArtifactGenerator:
    """ArtifactGenerator backed by the fake provider."""
    return ArtifactGenerator(provider=fake_provider)


# ---------------------------------------------------------------------------
# HTTP FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture(scope="function")
def client(generator: ArtifactGenerator) -> Generator[TestClient, None, None]:
    """
    Create a test client whose /generate endpoint uses the fake provider.
    """
    app.dependency_overrides[get_artifact_generator] = lambda: generator

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
