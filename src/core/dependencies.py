"""Dependency injection module for FastAPI.

This module provides dependency injection functions for FastAPI routes.
Every manager is built per request on the request-scoped DB session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from core.database import get_db
from utils import achievement_manager
from utils import category_manager
from utils import code_example_manager
from utils import course_manager
from utils import landing_page_manager


def get_category_manager(db: Session = Depends(get_db)) -> category_manager.CategoryManager:
    """Get CategoryManager instance with request-scoped DB session.

    Args:
        db: Database session.

    Returns:
        CategoryManager instance.
    """
    return category_manager.CategoryManager(db)


def get_course_manager(db: Session = Depends(get_db)) -> course_manager.CourseManager:
    """Get CourseManager instance with request-scoped DB session."""
    return course_manager.CourseManager(db)


def get_code_example_manager(
    db: Session = Depends(get_db),
) -> code_example_manager.CodeExampleManager:
    """Get CodeExampleManager instance with request-scoped DB session."""
    return code_example_manager.CodeExampleManager(db)


def get_achievement_manager(
    db: Session = Depends(get_db),
) -> achievement_manager.AchievementManager:
    """Get AchievementManager instance with request-scoped DB session."""
    return achievement_manager.AchievementManager(db)


def get_landing_page_manager(
    db: Session = Depends(get_db),
) -> landing_page_manager.LandingPageManager:
    """Get LandingPageManager instance with request-scoped DB session."""
    return landing_page_manager.LandingPageManager(db)


# Type aliases for dependency injection
CategoryManagerDep = Annotated[
    category_manager.CategoryManager, Depends(get_category_manager)
]
CourseManagerDep = Annotated[
    course_manager.CourseManager, Depends(get_course_manager)
]
CodeExampleManagerDep = Annotated[
    code_example_manager.CodeExampleManager, Depends(get_code_example_manager)
]
AchievementManagerDep = Annotated[
    achievement_manager.AchievementManager, Depends(get_achievement_manager)
]
LandingPageManagerDep = Annotated[
    landing_page_manager.LandingPageManager, Depends(get_landing_page_manager)
]
