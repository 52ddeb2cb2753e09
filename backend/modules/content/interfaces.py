"""
Content module interface.
"""

from typing import Protocol, runtime_checkable

from .models import GenerateContentRequest, GeneratedContent


@runtime_checkable
class IContentService(Protocol):
    """Interface for AI content generation."""

    async def generate(self, request: GenerateContentRequest, access_token: str) -> GeneratedContent:
        """
        Generate a social media post.

        The call runs as the user: ``access_token`` is forwarded to the
        edge function.

        Raises:
            RateLimitedError: On HTTP 429
            CreditsExhaustedError: On HTTP 402
            ContentGenerationError: On any other failure
        """
        ...
