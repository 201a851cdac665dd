"""SQLAlchemy implementation of User repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ScreenNameTakenError
from domain.entities.user import User
from infrastructure.database.errors import is_unique_violation
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        stmt = select(UserModel).where(UserModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def insert(self, user: User) -> None:
        """Persist a new user."""
        self._session.add(
            UserModel(
                id=user.id,
                sn=user.sn,
                pass_hash=user.pass_hash,
                date=user.date,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ScreenNameTakenError(user.sn) from exc
            raise

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            sn=model.sn,
            pass_hash=model.pass_hash,
            date=model.date,
        )
