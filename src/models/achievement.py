from sqlalchemy import Boolean, Column, Integer, String, Text

from schemas.enums import AchievementCategory
from .base import Base, UTCDateTime, enum_column_type, utcnow


class AchievementModel(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String, nullable=True)
    badge_color = Column(String, nullable=True)  # gruvbox color for badge
    points_required = Column(Integer, nullable=False)
    category = Column(
        enum_column_type(AchievementCategory, "achievement_category"), nullable=False
    )
    is_active = Column(Boolean, default=True, index=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
