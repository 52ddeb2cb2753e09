"""
Content generation API endpoint.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_content_service
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser

from .interfaces import IContentService
from .models import GenerateContentRequest, GeneratedContent

router = APIRouter()


@router.post("/generate", response_model=GeneratedContent)
async def generate_content(
    request: GenerateContentRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IContentService = Depends(get_content_service),
) -> GeneratedContent:
    """
    Generate a reels script, carousel or stories sequence.

    Returns 429 when the generator is rate limited and 402 when its
    credits are exhausted.
    """
    return await service.generate(request, user.access_token or "")
