"""
Dependencies module - reusable FastAPI dependencies for route handlers.

The generator is built on first use and shared; tests replace it with
app.dependency_overrides[get_artifact_generator].
"""

from functools import lru_cache

from app.ai.artifact.generator import ArtifactGenerator


@lru_cache(maxsize=1)
def get_artifact_generator() -> ArtifactGenerator:
    """
    Return the shared ArtifactGenerator.

    The Gemini client behind it is itself created lazily, so a missing
    API key surfaces on the first /generate call, not at startup.
    """
    return ArtifactGenerator()
