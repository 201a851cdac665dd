"""Token repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.token import Token


class ITokenRepository(Protocol):
    """Repository interface for Token entities."""

    async def get(self, id: UUID) -> Token | None:
        """Get a token by ID."""
        ...

    async def insert(self, token: Token) -> None:
        """Persist a new token."""
        ...
