"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository
from infrastructure.database.repositories.sqlalchemy_token_repo import SQLAlchemyTokenRepository
from infrastructure.database.repositories.sqlalchemy_user_repo import SQLAlchemyUserRepository


class SQLAlchemyUnitOfWork:
    """One session, and one transaction, shared by the profile, token and user repositories.

    Leaving the block with an exception rolls back; a clean exit without
    ``commit()`` discards the writes when the session closes.
    """

    profiles: SQLAlchemyProfileRepository
    tokens: SQLAlchemyTokenRepository
    users: SQLAlchemyUserRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    async def commit(self) -> None:
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        if self._session:
            raise RuntimeError("UnitOfWork is already in use")
        self._session = self._session_factory()
        self.profiles = SQLAlchemyProfileRepository(self._session)
        self.tokens = SQLAlchemyTokenRepository(self._session)
        self.users = SQLAlchemyUserRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        if not self._session:
            return
        try:
            if exc_type:
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None
