"""
Content module.

AI-generated social media posts, produced by a Supabase edge function.

Public API:
- IContentService: Interface for content generation
- GenerateContentRequest, GeneratedContent, ContentType: Request and result
- ContentGenerationError, RateLimitedError, CreditsExhaustedError
"""

from .interfaces import IContentService
from .models import ContentType, GenerateContentRequest, GeneratedContent
from .exceptions import ContentGenerationError, CreditsExhaustedError, RateLimitedError

__all__ = [
    "IContentService",
    "ContentType",
    "GenerateContentRequest",
    "GeneratedContent",
    "ContentGenerationError",
    "CreditsExhaustedError",
    "RateLimitedError",
]
