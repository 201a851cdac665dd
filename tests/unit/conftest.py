"""Shared fixtures for unit tests."""

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest

from domain.entities.field_rule import FieldRule
from domain.entities.profile import ProfileRules
from domain.entities.token import AuthToken, TokenType


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.tokens = AsyncMock()
        self.users = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> UUID:
    """A random user ID."""
    return uuid4()


@pytest.fixture
def rules() -> ProfileRules:
    """Small, easy-to-violate rules with distinct messages per field."""
    return ProfileRules(
        name=FieldRule(r"^.{1,10}$", "bad name"),
        text=FieldRule(r"^[\s\S]{1,100}$", "bad text"),
        sn=FieldRule(r"^[a-z0-9_]{3,10}$", "bad sn"),
    )


@pytest.fixture
def owner_token(user_id: UUID) -> AuthToken:
    """Master token identity for user_id."""
    return AuthToken(id=uuid4(), key="owner-key", user=user_id, type=TokenType.MASTER)


@pytest.fixture
def stranger_token() -> AuthToken:
    """Token identity of some other user."""
    return AuthToken(id=uuid4(), key="stranger-key", user=uuid4(), type=TokenType.MASTER)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 28, 10, 0, 0)


def upper_render(text: str) -> str:
    """Recognisable renderer so tests can tell text and mdtext apart."""
    return text.upper()
