"""Code example schema definitions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import DifficultyLevel, Language
from schemas.limits import MAX_INTEGER, MIN_INTEGER


class CodeExample(BaseModel):
    """A code snippet, either course material or a landing page demo."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    course_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    language: Language
    code_content: str
    expected_output: Optional[str] = None
    is_demo: bool
    difficulty_level: DifficultyLevel
    created_at: datetime
    updated_at: datetime


class CreateCodeExampleRequest(BaseModel):
    course_id: Optional[int] = Field(
        default=None,
        ge=MIN_INTEGER,
        le=MAX_INTEGER,
        description="Owning course. None for standalone demo examples.",
    )
    title: str
    description: Optional[str] = None
    language: Language
    code_content: str
    expected_output: Optional[str] = None
    is_demo: bool = False
    difficulty_level: DifficultyLevel
