"""SQLAlchemy implementation of Token repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.token import Token, TokenType
from infrastructure.database.models import TokenModel


class SQLAlchemyTokenRepository:
    """SQLAlchemy implementation of ITokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Token | None:
        """Get a token by ID."""
        stmt = select(TokenModel).where(TokenModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def insert(self, token: Token) -> None:
        """Persist a new token."""
        self._session.add(
            TokenModel(
                id=token.id,
                user_id=token.user,
                key_hash=token.key_hash,
                type=token.type.value,
                date=token.date,
            )
        )
        await self._session.flush()

    def _to_entity(self, model: TokenModel) -> Token:
        """Convert ORM model to domain entity."""
        return Token(
            id=model.id,
            user=model.user_id,
            key_hash=model.key_hash,
            type=TokenType(model.type),
            date=model.date,
        )
