"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_in(self, ids: list[UUID]) -> list[Profile]:
        """Get the profiles whose ID is in ids, newest first."""
        ...

    async def get_all_for_user(self, user_id: UUID) -> list[Profile]:
        """Get all profiles owned by a user, newest first."""
        ...

    async def insert(self, profile: Profile) -> None:
        """Persist a new profile. Raises ScreenNameTakenError on duplicate sn."""
        ...

    async def update(self, profile: Profile) -> None:
        """Persist a changed profile. Raises ScreenNameTakenError on duplicate sn."""
        ...
