import os
import sys
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Settings are read at import time, so the environment must be in place first
os.environ["USERS_API_DATABASE_URL"] = "sqlite:///:memory:"
os.environ["USERS_API_TOKENS"] = "test-token"
os.environ["USERS_API_LOG_DIR"] = ""
os.environ["USERS_API_LOG_LEVEL"] = "DEBUG"

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config.settings import Settings, get_settings
from database import Base, build_engine, get_db
from main import create_app
from models import User, Report
from repositories.user_repository import UserRepository
from repositories.report_repository import ReportRepository

TEST_TOKEN = "test-token"


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = build_engine('sqlite:///:memory:', poolclass=StaticPool)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def test_settings():
    return Settings(api_tokens=frozenset({TEST_TOKEN}), log_level="DEBUG", log_dir=None)


@pytest.fixture
def app(db_session, test_settings):
    """Application wired to the in-memory session and test settings"""
    application = create_app(test_settings)
    application.dependency_overrides[get_db] = lambda: db_session
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_TOKEN}"}


@pytest.fixture
def make_user(db_session):
    """Factory that inserts and commits a user"""
    counter = {"n": 0}

    def _make(email=None, first_name="Ada", last_name="Lovelace", **kwargs):
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            first_name=first_name,
            last_name=last_name,
            password_hash="pbkdf2:not-a-real-hash",
            **kwargs
        )
        UserRepository(db_session).create(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture
def make_report(db_session):
    """Factory that inserts and commits a report"""

    def _make(author, title="Quarterly figures", **kwargs):
        report = Report(author_id=author.id, title=title, **kwargs)
        ReportRepository(db_session).create(report)
        db_session.commit()
        return report

    return _make
