"""Code example management utilities."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import ReferencedRecordNotFoundError, StoreError
from models.base import utcnow
from models.code_example import CodeExampleModel
from models.course import CourseModel
from schemas.code_example import CreateCodeExampleRequest

logger = logging.getLogger(__name__)


class CodeExampleManager:
    def __init__(self, db: Session):
        self.db = db

    def create_code_example(self, req: CreateCodeExampleRequest) -> CodeExampleModel:
        """Create a code example, optionally attached to a course.

        Raises:
            ReferencedRecordNotFoundError: If ``course_id`` is set but does not exist.
            StoreError: If the store fails.
        """
        try:
            if req.course_id is not None:
                course = (
                    self.db.query(CourseModel.id)
                    .filter(CourseModel.id == req.course_id)
                    .first()
                )
                if not course:
                    raise ReferencedRecordNotFoundError("Course", req.course_id)

            now = utcnow()
            model = CodeExampleModel(**req.model_dump(), created_at=now, updated_at=now)
            self.db.add(model)
            self.db.commit()
            self.db.refresh(model)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Code example creation failed: %s", exc)
            raise StoreError("Code example creation failed") from exc

        logger.info("Created code example %s (%s)", model.id, model.title)
        return model

    def list_demo_code_examples(self) -> List[CodeExampleModel]:
        """Return demo examples, newest first."""
        try:
            return (
                self.db.query(CodeExampleModel)
                .filter(CodeExampleModel.is_demo.is_(True))
                .order_by(CodeExampleModel.created_at.desc(), CodeExampleModel.id.desc())
                .all()
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to fetch demo code examples: %s", exc)
            raise StoreError("Failed to fetch demo code examples") from exc
