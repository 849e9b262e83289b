import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app import create_app
from core.database import Database


@pytest.fixture()
def database():
    """In-memory SQLite store shared by every session of one test."""
    db = Database(url="sqlite://", echo=False, poolclass=StaticPool)
    db.init_db()
    yield db
    db.dispose()


@pytest.fixture()
def db_session(database):
    with database.session() as session:
        yield session


@pytest.fixture()
def client(database):
    app = create_app(database)
    with TestClient(app) as test_client:
        yield test_client
