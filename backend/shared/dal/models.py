"""Persistence models for the data access layer."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class ContentType(StrEnum):
    COURSE = "course"
    MODULE = "module"
    QUIZ = "quiz"
    COMMUNITY_POST = "community_post"


class Translation(BaseModel, frozen=True):
    """One translated field of one piece of content."""

    content_type: ContentType
    content_id: str = Field(min_length=1)
    language_code: str = Field(min_length=2, max_length=10)
    field_name: str = Field(min_length=1)
    translated_text: str
    updated_at: datetime | None = None
