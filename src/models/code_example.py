from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from schemas.enums import DifficultyLevel, Language
from .base import Base, UTCDateTime, enum_column_type, utcnow


class CodeExampleModel(Base):
    __tablename__ = "code_examples"

    id = Column(Integer, primary_key=True, index=True)
    # Nullable: standalone demo examples belong to no course
    course_id = Column(Integer, ForeignKey("courses.id"), index=True, nullable=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    language = Column(enum_column_type(Language, "language"), nullable=False)
    code_content = Column(Text, nullable=False)
    expected_output = Column(Text, nullable=True)
    is_demo = Column(Boolean, default=False, index=True, nullable=False)
    difficulty_level = Column(
        enum_column_type(DifficultyLevel, "difficulty_level"), nullable=False
    )
    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, nullable=False)

    course = relationship("CourseModel", back_populates="code_examples")
