"""Database models.

Importing this package registers every table with ``Base.metadata``.
"""

from .achievement import AchievementModel
from .base import Base
from .category import CategoryModel
from .code_example import CodeExampleModel
from .course import CourseModel
from .landing_page_content import LandingPageContentModel

__all__ = [
    "AchievementModel",
    "Base",
    "CategoryModel",
    "CodeExampleModel",
    "CourseModel",
    "LandingPageContentModel",
]
