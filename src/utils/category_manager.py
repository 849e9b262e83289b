"""Category management utilities."""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import DuplicateSlugError, StoreError
from models.base import utcnow
from models.category import CategoryModel
from schemas.category import CreateCategoryRequest

logger = logging.getLogger(__name__)


class CategoryManager:
    """Manages course categories."""

    def __init__(self, db: Session):
        self.db = db

    def create_category(self, req: CreateCategoryRequest) -> CategoryModel:
        """Create a new course category.

        Args:
            req: Validated category fields.

        Returns:
            The persisted category with id and timestamps.

        Raises:
            DuplicateSlugError: If a category with the same slug exists.
            StoreError: If the store fails.
        """
        try:
            if self._slug_taken(req.slug):
                raise DuplicateSlugError("Category", req.slug)

            now = utcnow()
            model = CategoryModel(**req.model_dump(), created_at=now, updated_at=now)
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except IntegrityError as exc:
            # Two requests may pass the lookup; the unique constraint catches the second
            self.db.rollback()
            raise DuplicateSlugError("Category", req.slug) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Category creation failed: %s", exc)
            raise StoreError("Category creation failed") from exc

        logger.info("Created category %s (%s)", model.id, model.slug)
        return model

    def _slug_taken(self, slug: str) -> bool:
        return (
            self.db.query(CategoryModel.id)
            .filter(CategoryModel.slug == slug)
            .first()
        ) is not None

    def list_categories(self) -> List[CategoryModel]:
        """Return every category ordered alphabetically by name."""
        try:
            return (
                self.db.query(CategoryModel)
                .order_by(CategoryModel.name.asc(), CategoryModel.id.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch categories: %s", exc)
            raise StoreError("Failed to fetch categories") from exc
