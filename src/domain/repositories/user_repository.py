"""User repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: UUID) -> User | None:
        """Get a user by ID."""
        ...

    async def insert(self, user: User) -> None:
        """Persist a new user. Raises ScreenNameTakenError on duplicate sn."""
        ...
