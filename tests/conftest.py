"""
Test configuration and fixtures for the SkillConnect API.

The application database is pointed at a throwaway SQLite file before any
``skillconnect`` module is imported, and outbound email is replaced by a
recording fake for every test.
"""

import os
import tempfile
import uuid
from typing import Generator

from dotenv import load_dotenv

load_dotenv()

test_db_url = os.getenv("TEST_DATABASE_URL")
if test_db_url:
    if "postgresql://" in test_db_url and "asyncpg" not in test_db_url:
        test_db_url = test_db_url.replace("postgresql://", "postgresql+asyncpg://")
    os.environ["DATABASE_URL"] = test_db_url
else:
    test_db_path = tempfile.mktemp(suffix=".db")
    os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path}"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from skillconnect.features.auth.models.user import User
from skillconnect.features.auth.services.email_service import EmailResult, get_email_sender
from skillconnect.features.auth.utils.security import hash_password
from skillconnect.platform.db.base import Base


class FakeEmailSender:
    """Records verification emails instead of sending them."""

    def __init__(self):
        self.sent = []
        self.fail_with = None

    def __call__(self, to_email: str, user_name: str, code: str) -> EmailResult:
        if self.fail_with:
            return EmailResult(success=False, message=self.fail_with)
        self.sent.append((to_email, user_name, code))
        return EmailResult(success=True, message="Verification email sent successfully")

    @property
    def last_code(self) -> str:
        return self.sent[-1][2]


@pytest.fixture
def email_sender() -> FakeEmailSender:
    return FakeEmailSender()


@pytest.fixture(scope="session")
def test_app():
    """Create FastAPI test application."""
    from skillconnect.main import app

    return app


@pytest.fixture(scope="function")
def client(test_app, email_sender) -> Generator[TestClient, None, None]:
    """
    A TestClient whose verification emails go to ``email_sender``.
    """
    test_app.dependency_overrides[get_email_sender] = lambda: email_sender

    with TestClient(test_app) as test_client:
        yield test_client

    test_app.dependency_overrides.pop(get_email_sender, None)


@pytest.fixture
def unique_user_data():
    """Generate unique sign-up data for each test"""
    unique_id = uuid.uuid4().hex[:8]
    return {
        "userName": f"tester_{unique_id}",
        "email": f"tester{unique_id}@example.com",
        "password": "secret123",
    }


@pytest_asyncio.fixture
async def db_session():
    """An AsyncSession on its own fresh SQLite database."""
    db_path = tempfile.mktemp(suffix=".db")
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with session_factory() as session:
        yield session

    await engine.dispose()
    if os.path.exists(db_path):
        os.remove(db_path)


@pytest_asyncio.fixture
async def make_user(db_session):
    """Factory that persists an unverified user."""

    async def _make_user(user_name: str = "alice", email: str | None = None, **fields) -> User:
        user = User(
            user_name=user_name,
            email=email or f"{user_name.lower().replace(' ', '_')}@example.com",
            password_hash=hash_password("secret123"),
            **fields,
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _make_user
