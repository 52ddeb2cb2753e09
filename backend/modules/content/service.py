"""
Client for the ``generate-content`` Supabase edge function.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings

from .exceptions import ContentGenerationError, CreditsExhaustedError, RateLimitedError
from .interfaces import IContentService
from .models import GenerateContentRequest, GeneratedContent

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> Optional[str]:
    """The function's ``{"error": ...}`` text, if the body has one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return None


class ContentService(IContentService):
    """
    Calls the edge function over HTTP.

    ``transport`` lets tests substitute an httpx.MockTransport.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def function_url(self) -> str:
        base = self._settings.supabase_url.rstrip("/")
        return f"{base}/functions/v1/{self._settings.content_function_name}"

    async def generate(self, request: GenerateContentRequest, access_token: str) -> GeneratedContent:
        if not self._settings.supabase_url:
            raise ContentGenerationError("Content generation is not configured")

        headers = {
            "Authorization": f"Bearer {access_token}",
            "apikey": self._settings.supabase_anon_key,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.content_timeout_seconds,
            ) as client:
                response = await client.post(
                    self.function_url,
                    json=request.to_payload(),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error("Content generation request failed: %s", e)
            raise ContentGenerationError()

        if response.status_code == 429:
            raise RateLimitedError(_error_message(response))
        if response.status_code == 402:
            raise CreditsExhaustedError(_error_message(response))
        if response.is_error:
            logger.error(
                "Content generation returned %s: %s",
                response.status_code, response.text[:500],
            )
            raise ContentGenerationError(
                _error_message(response),
                status=response.status_code,
            )

        try:
            return GeneratedContent.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error("Content generation returned an unusable payload: %s", e)
            raise ContentGenerationError(status=response.status_code)
