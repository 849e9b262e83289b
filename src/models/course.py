from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from schemas.enums import DifficultyLevel, Language
from .base import Base, UTCDateTime, enum_column_type, utcnow


class CourseModel(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(
        Integer, ForeignKey("categories.id"), index=True, nullable=False
    )
    title = Column(String, nullable=False)
    slug = Column(String, unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)
    short_description = Column(String, nullable=True)
    language = Column(enum_column_type(Language, "language"), nullable=False)
    difficulty_level = Column(
        enum_column_type(DifficultyLevel, "difficulty_level"), nullable=False
    )
    estimated_duration = Column(Integer, nullable=False)  # minutes
    is_featured = Column(Boolean, default=False, nullable=False)
    is_published = Column(Boolean, default=False, nullable=False)
    thumbnail_url = Column(String, nullable=True)
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, nullable=False)

    category = relationship("CategoryModel", back_populates="courses")
    code_examples = relationship("CodeExampleModel", back_populates="course")
