"""Profile service layer with business logic."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

import structlog

from core.exceptions import ProfileNotFoundError
from domain.entities.profile import MarkdownRenderer, Profile, ProfileRules
from domain.entities.token import AuthToken
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        rules: ProfileRules,
        render: MarkdownRenderer,
    ) -> None:
        self._uow_factory = uow_factory
        self._rules = rules
        self._render = render

    async def get_by_id(self, profile_id: UUID) -> Profile:
        """Get a profile by ID."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))
            return profile

    async def get_in(self, profile_ids: list[UUID]) -> list[Profile]:
        """Get several profiles at once, newest first.

        All-or-nothing: if any requested ID is missing the whole lookup
        fails with ProfileNotFoundError.
        """
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_in(profile_ids)
            if len(profiles) != len(profile_ids):
                raise ProfileNotFoundError()
            return profiles  # type: ignore[no-any-return]

    async def get_all_for_token(self, auth_token: AuthToken) -> list[Profile]:
        """Get every profile owned by the token's user, newest first."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all_for_user(auth_token.user)  # type: ignore[no-any-return]

    async def create(
        self,
        auth_token: AuthToken,
        name: str,
        text: str,
        sn: str,
    ) -> Profile:
        """Create and persist a new profile for the token's user."""
        profile = Profile.create(
            auth_token,
            name,
            text,
            sn,
            datetime.utcnow(),
            rules=self._rules,
            render=self._render,
        )

        async with self._uow_factory() as uow:
            await uow.profiles.insert(profile)
            await uow.commit()

        logger.info("profile_created", profile_id=str(profile.id), sn=profile.sn)
        return profile

    async def update(
        self,
        auth_token: AuthToken,
        profile_id: UUID,
        name: str,
        text: str,
        sn: str,
    ) -> Profile:
        """Change a profile's editable fields. Only the owner may do this."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(profile_id)
            if not profile:
                raise ProfileNotFoundError(str(profile_id))

            profile.change_data(
                auth_token,
                name,
                text,
                sn,
                datetime.utcnow(),
                rules=self._rules,
                render=self._render,
            )

            await uow.profiles.update(profile)
            await uow.commit()

        logger.info("profile_updated", profile_id=str(profile.id), sn=profile.sn)
        return profile
