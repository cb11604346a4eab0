"""
Test configuration and fixtures for the redirect registry.
This centralizes all test setup, making individual tests clean.
"""

import os

# Point the application at the test database before it is imported
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from main import app
from redirect_app.database.connection import Base, build_engine, get_db
from redirect_app.services.redirect_service import RedirectService
from redirect_app.storage.strategies import (
    RedirectStorageStrategy,
    SQLAlchemyRedirectStorage,
)

# Test database configuration
engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    # Create tables
    Base.metadata.create_all(bind=engine)
    
    # Create session
    db = TestingSessionLocal()
    
    try:
        yield db
    finally:
        # Cleanup
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def service(db_session):
    """RedirectService backed by the test database"""
    return RedirectService(SQLAlchemyRedirectStorage(db_session))


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    # Override the database dependency
    app.dependency_overrides[get_db] = override_get_db
    
    # Create test client
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def session_factory(db_session):
    """Factory for extra sessions on the test database (concurrency tests)"""
    return TestingSessionLocal


class FailingStorage(RedirectStorageStrategy):
    """Storage backend whose every call fails like a locked database"""

    def _fail(self):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    async def get(self, alias):
        self._fail()

    async def list_all(self):
        self._fail()

    async def insert(self, alias, url):
        self._fail()

    async def update_url(self, alias, url):
        self._fail()

    async def delete(self, alias):
        self._fail()


@pytest.fixture(scope="function")
def failing_storage():
    return FailingStorage()
