"""
Content module data models.

Request and response shapes of the ``generate-content`` edge function.
The function speaks camelCase on the way in and Portuguese keys on the
way out.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    """Social media formats the generator supports."""

    REELS = "reels"
    CAROUSEL = "carrossel"
    STORIES = "stories"


class GenerateContentRequest(BaseModel):
    """What to generate. Serialized with camelCase keys for the function."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    content_type: ContentType
    event_type: str = Field(..., min_length=1, max_length=100)
    objective: str = Field(..., min_length=1, max_length=200)
    main_idea: Optional[str] = Field(None, max_length=1000)
    brand_style: Optional[str] = Field(None, max_length=200)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GeneratedContent(BaseModel):
    """
    A generated post.

    ``roteiro`` is prose for reels and a list of slides or stories for the
    other formats, so its shape is left open.
    """

    titulo: str
    ideia: str
    roteiro: Union[str, list[Any], dict[str, Any]]
    legenda: str
    cta: str
    hashtags: list[str] = Field(default_factory=list)
