from sqlalchemy import Boolean, Column, Integer, String, Text

from schemas.enums import LandingPageSection
from .base import Base, UTCDateTime, enum_column_type, utcnow


class LandingPageContentModel(Base):
    __tablename__ = "landing_page_content"

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: several rows may exist per section
    section = Column(
        enum_column_type(LandingPageSection, "landing_page_section"),
        index=True,
        nullable=False,
    )
    title = Column(String, nullable=True)
    subtitle = Column(String, nullable=True)
    content = Column(Text, nullable=True)
    cta_text = Column(String, nullable=True)
    cta_link = Column(String, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, nullable=False)
