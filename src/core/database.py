"""Database connection and session management.

This module wraps the SQLAlchemy engine and session factory in an explicitly
constructed ``Database`` object. The application builds one at startup and
hands it to request handlers through ``get_db``.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from config import DATABASE_ECHO, DATABASE_URL
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one relational store."""

    def __init__(
        self,
        url: Optional[str] = None,
        echo: Optional[bool] = None,
        **engine_kwargs: Any,
    ):
        """Initialize the engine and session factory.

        Args:
            url: SQLAlchemy database URL. Defaults to ``DATABASE_URL``.
            echo: Whether to log SQL statements. Defaults to ``DATABASE_ECHO``.
            **engine_kwargs: Extra keyword arguments for ``create_engine``
                (e.g. ``poolclass`` for in-memory SQLite).
        """
        self.url = url or DATABASE_URL
        connect_args = engine_kwargs.pop("connect_args", {})
        if self.url.startswith("sqlite"):
            connect_args.setdefault("check_same_thread", False)

        self.engine = create_engine(
            self.url,
            echo=DATABASE_ECHO if echo is None else echo,
            connect_args=connect_args,
            **engine_kwargs,
        )
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)

    def init_db(self) -> None:
        """Create tables if they do not exist."""
        url = make_url(self.url)
        if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database schema ready at %s", url.render_as_string(hide_password=True))

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager yielding a session that is always closed."""
        db = self.SessionLocal()
        try:
            yield db
        finally:
            db.close()

    def dispose(self) -> None:
        """Release every pooled connection."""
        self.engine.dispose()
        logger.info("Database connections released")


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting a request-scoped database session."""
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
