"""Landing page content management and aggregation.

This module provides the partial update of landing page content rows and the
aggregated read that assembles the landing page from all five tables.
"""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import RecordNotFoundError, StoreError
from models.base import utcnow
from models.landing_page_content import LandingPageContentModel
from schemas.achievement import Achievement
from schemas.category import Category
from schemas.code_example import CodeExample
from schemas.course import Course
from schemas.enums import LandingPageSection
from schemas.landing_page import (
    CreateLandingPageContentRequest,
    LandingPageContent,
    LandingPageContentPatch,
    LandingPageData,
)
from utils.achievement_manager import AchievementManager
from utils.category_manager import CategoryManager
from utils.code_example_manager import CodeExampleManager
from utils.course_manager import CourseManager

logger = logging.getLogger(__name__)


class LandingPageManager:
    """Manages landing page sections and builds the landing page document."""

    def __init__(self, db: Session):
        """Initialize LandingPageManager.

        Args:
            db: SQLAlchemy Session shared with the catalog managers.
        """
        self.db = db
        self.categories = CategoryManager(db)
        self.courses = CourseManager(db)
        self.code_examples = CodeExampleManager(db)
        self.achievements = AchievementManager(db)

    def create_content(
        self, req: CreateLandingPageContentRequest
    ) -> LandingPageContentModel:
        try:
            now = utcnow()
            model = LandingPageContentModel(
                **req.model_dump(), created_at=now, updated_at=now
            )
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Landing page content creation failed: %s", exc)
            raise StoreError("Landing page content creation failed") from exc

        logger.info("Created landing page content %s (%s)", model.id, model.section.value)
        return model

    def get_active_section(
        self, section: LandingPageSection
    ) -> Optional[LandingPageContentModel]:
        """Return the active row for a section, or None.

        When several active rows share a section, the lowest display_order
        wins, then the lowest id.
        """
        return (
            self.db.query(LandingPageContentModel)
            .filter(
                LandingPageContentModel.section == section,
                LandingPageContentModel.is_active.is_(True),
            )
            .order_by(
                LandingPageContentModel.display_order.asc(),
                LandingPageContentModel.id.asc(),
            )
            .first()
        )

    def update_content(
        self, content_id: int, patch: LandingPageContentPatch
    ) -> LandingPageContentModel:
        """Apply a partial update to a landing page content row.

        Only the fields supplied in ``patch`` are written; ``updated_at`` is
        always refreshed.

        Args:
            content_id: ID of the row to update.
            patch: Supplied fields, see ``LandingPageContentPatch``.

        Returns:
            The updated row.

        Raises:
            RecordNotFoundError: If no row has ``content_id``.
            StoreError: If the store fails.
        """
        try:
            model = (
                self.db.query(LandingPageContentModel)
                .filter(LandingPageContentModel.id == content_id)
                .first()
            )
            if not model:
                raise RecordNotFoundError("Landing page content", content_id)

            changes = patch.changes()
            for column, value in changes.items():
                setattr(model, column, value)
            model.updated_at = utcnow()
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Landing page content update failed: %s", exc)
            raise StoreError("Landing page content update failed") from exc

        logger.info(
            "Updated landing page content %s: %s",
            content_id,
            ", ".join(sorted(changes)) or "updated_at only",
        )
        return model

    def get_landing_page_data(self) -> LandingPageData:
        """Assemble the landing page document.

        Every lookup re-queries the store. A failure in any of them fails the
        whole call; no partial document is returned.

        Returns:
            LandingPageData with None for missing sections and empty lists for
            empty collections.

        Raises:
            StoreError: If any lookup fails.
        """
        try:
            hero = self.get_active_section(LandingPageSection.HERO)
            demo = self.get_active_section(LandingPageSection.DEMO)
            cta = self.get_active_section(LandingPageSection.CTA)
        except SQLAlchemyError as exc:
            logger.error("Landing page data fetch failed: %s", exc)
            raise StoreError("Landing page data fetch failed") from exc

        featured_courses = self.courses.list_featured_courses()
        categories = self.categories.list_categories()
        demo_code_examples = self.code_examples.list_demo_code_examples()
        achievements = self.achievements.list_active_achievements()

        return LandingPageData(
            hero=_content_or_none(hero),
            demo=_content_or_none(demo),
            featured_courses=[Course.model_validate(c) for c in featured_courses],
            categories=[Category.model_validate(c) for c in categories],
            demo_code_examples=[
                CodeExample.model_validate(e) for e in demo_code_examples
            ],
            achievements=[Achievement.model_validate(a) for a in achievements],
            cta=_content_or_none(cta),
        )


def _content_or_none(
    model: Optional[LandingPageContentModel],
) -> Optional[LandingPageContent]:
    return LandingPageContent.model_validate(model) if model is not None else None
