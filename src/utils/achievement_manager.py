"""Achievement management utilities for gamification."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import StoreError
from models.achievement import AchievementModel
from schemas.achievement import CreateAchievementRequest

logger = logging.getLogger(__name__)


class AchievementManager:
    def __init__(self, db: Session):
        self.db = db

    def create_achievement(self, req: CreateAchievementRequest) -> AchievementModel:
        try:
            model = AchievementModel(**req.model_dump())
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Achievement creation failed: %s", exc)
            raise StoreError("Achievement creation failed") from exc

        logger.info("Created achievement %s (%s)", model.id, model.name)
        return model

    def list_active_achievements(self) -> List[AchievementModel]:
        """Return active achievements, highest points_required first."""
        try:
            return (
                self.db.query(AchievementModel)
                .filter(AchievementModel.is_active.is_(True))
                .order_by(
                    AchievementModel.points_required.desc(), AchievementModel.id.asc()
                )
                .all()
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch achievements: %s", exc)
            raise StoreError("Failed to fetch achievements") from exc
