"""Achievement schema definitions for gamification."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.enums import AchievementCategory
from schemas.limits import MAX_INTEGER


class Achievement(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str
    icon: Optional[str] = None
    badge_color: Optional[str] = Field(default=None, description="Gruvbox color for badge.")
    points_required: int
    category: AchievementCategory
    is_active: bool
    created_at: datetime


class CreateAchievementRequest(BaseModel):
    name: str
    description: str
    icon: Optional[str] = None
    badge_color: Optional[str] = None
    points_required: int = Field(ge=0, le=MAX_INTEGER)
    category: AchievementCategory
    is_active: bool = True
