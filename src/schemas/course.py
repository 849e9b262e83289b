"""Course schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import DifficultyLevel, Language
from schemas.limits import MAX_INTEGER, MIN_INTEGER


class Course(BaseModel):
    """A backend language course as persisted."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    title: str
    slug: str
    description: str
    short_description: Optional[str] = None
    language: Language
    difficulty_level: DifficultyLevel
    estimated_duration: int = Field(description="Duration in minutes.")
    is_featured: bool
    is_published: bool
    thumbnail_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CreateCourseRequest(BaseModel):
    category_id: int = Field(ge=MIN_INTEGER, le=MAX_INTEGER)
    title: str
    slug: str
    description: str
    short_description: Optional[str] = None
    language: Language
    difficulty_level: DifficultyLevel
    estimated_duration: int = Field(
        gt=0, le=MAX_INTEGER, description="Duration in minutes."
    )
    is_featured: bool = False
    is_published: bool = False
    thumbnail_url: Optional[str] = None
