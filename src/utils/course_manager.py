"""Course management utilities."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import DuplicateSlugError, ReferencedRecordNotFoundError, StoreError
from models.base import utcnow
from models.category import CategoryModel
from models.course import CourseModel
from schemas.course import CreateCourseRequest

logger = logging.getLogger(__name__)


class CourseManager:
    """Manages courses and the featured course listing."""

    def __init__(self, db: Session):
        self.db = db

    def create_course(self, req: CreateCourseRequest) -> CourseModel:
        """Create a new course under an existing category.

        Args:
            req: Validated course fields.

        Returns:
            The persisted course with id and timestamps.

        Raises:
            ReferencedRecordNotFoundError: If ``category_id`` does not exist.
            DuplicateSlugError: If a course with the same slug exists.
            StoreError: If the store fails.
        """
        try:
            category = (
                self.db.query(CategoryModel.id)
                .filter(CategoryModel.id == req.category_id)
                .first()
            )
            if not category:
                raise ReferencedRecordNotFoundError("Category", req.category_id)

            if self._slug_taken(req.slug):
                raise DuplicateSlugError("Course", req.slug)

            now = utcnow()
            model = CourseModel(**req.model_dump(), created_at=now, updated_at=now)
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateSlugError("Course", req.slug) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Course creation failed: %s", exc)
            raise StoreError("Course creation failed") from exc

        logger.info("Created course %s (%s)", model.id, model.slug)
        return model

    def _slug_taken(self, slug: str) -> bool:
        return (
            self.db.query(CourseModel.id)
            .filter(CourseModel.slug == slug)
            .first()
        ) is not None

    def list_featured_courses(self) -> List[CourseModel]:
        """Return featured and published courses, most recently updated first."""
        try:
            return (
                self.db.query(CourseModel)
                .filter(
                    CourseModel.is_featured.is_(True),
                    CourseModel.is_published.is_(True),
                )
                .order_by(CourseModel.updated_at.desc(), CourseModel.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch featured courses: %s", exc)
            raise StoreError("Failed to fetch featured courses") from exc
