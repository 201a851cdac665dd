"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Callable
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import settings
from domain.entities.profile import ProfileRules
from domain.services.auth_param_service import AuthParamService
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory, one database per engine)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "secret_pass"


class FakeCaptchaVerifier:
    """ICaptchaVerifier double that records calls and returns a fixed verdict."""

    def __init__(self, success: bool = True) -> None:
        self.success = success
        self.calls: list[str] = []

    async def verify(self, response: str) -> bool:
        self.calls.append(response)
        return self.success


@dataclass
class Account:
    """A registered user together with an issued master token."""

    user_id: UUID
    sn: str
    password: str
    token_id: UUID
    token_key: str

    @property
    def token_headers(self) -> dict[str, str]:
        return {"X-Token-Id": str(self.token_id), "X-Token-Key": self.token_key}

    @property
    def user_headers(self) -> dict[str, str]:
        return {"X-User-Id": str(self.user_id), "X-User-Pass": self.password}


def fake_render(text: str) -> str:
    """Deterministic stand-in for the Markdown renderer."""
    return f"<p>{text}</p>"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory bound to the test database."""
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture
def profile_rules() -> ProfileRules:
    return settings.profile_rules


@pytest.fixture
def captcha_verifier() -> FakeCaptchaVerifier:
    return FakeCaptchaVerifier()


@pytest.fixture
def profile_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork], profile_rules: ProfileRules
) -> ProfileService:
    return ProfileService(uow_factory, rules=profile_rules, render=fake_render)


@pytest.fixture
def user_service(uow_factory: Callable[[], SQLAlchemyUnitOfWork]) -> UserService:
    return UserService(
        uow_factory,
        sn_rule=settings.user_sn_rule,
        pass_rule=settings.user_pass_rule,
        password_salt=settings.password_salt,
    )


@pytest.fixture
def auth_param_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    captcha_verifier: FakeCaptchaVerifier,
) -> AuthParamService:
    return AuthParamService(
        uow_factory,
        captcha_verifier=captcha_verifier,
        password_salt=settings.password_salt,
    )


async def _register(user_service: UserService, sn: str) -> Account:
    user = await user_service.register(sn, TEST_PASSWORD)
    token, raw_key = await user_service.issue_master_token(
        user.auth(TEST_PASSWORD, settings.password_salt)
    )
    return Account(
        user_id=user.id,
        sn=user.sn,
        password=TEST_PASSWORD,
        token_id=token.id,
        token_key=raw_key,
    )


@pytest.fixture
async def account(user_service: UserService) -> Account:
    """A registered user with a master token."""
    return await _register(user_service, "alice")


@pytest.fixture
async def other_account(user_service: UserService) -> Account:
    """A second, unrelated user with a master token."""
    return await _register(user_service, "bob")


@pytest.fixture
async def client(
    profile_service: ProfileService,
    user_service: UserService,
    auth_param_service: AuthParamService,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create test client wired to the in-memory database.

    Service dependencies are overridden so every request goes through a
    Unit of Work on the test engine and the fake CAPTCHA verifier.
    """
    from api.dependencies.services import (
        get_auth_param_service,
        get_profile_service,
        get_user_service,
    )
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    app.dependency_overrides[get_auth_param_service] = lambda: auth_param_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
