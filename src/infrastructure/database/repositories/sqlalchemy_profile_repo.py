"""SQLAlchemy implementation of Profile repository."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ProfileNotFoundError, ScreenNameTakenError
from domain.entities.profile import Profile
from infrastructure.database.errors import is_unique_violation
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: UUID) -> Profile | None:
        """Get a profile by ID."""
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_in(self, ids: list[UUID]) -> list[Profile]:
        """Get the profiles whose ID is in ids, newest first."""
        if not ids:
            return []

        stmt = (
            select(ProfileModel)
            .where(ProfileModel.id.in_(ids))
            .order_by(ProfileModel.date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_all_for_user(self, user_id: UUID) -> list[Profile]:
        """Get all profiles owned by a user, newest first."""
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.user_id == user_id)
            .order_by(ProfileModel.date.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def insert(self, profile: Profile) -> None:
        """Persist a new profile."""
        self._session.add(self._to_model(profile))
        await self._flush(profile.sn)

    async def update(self, profile: Profile) -> None:
        """Write the editable fields of an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ProfileNotFoundError(str(profile.id))

        model.name = profile.name
        model.text = profile.text
        model.mdtext = profile.mdtext
        model.update = profile.update
        model.sn = profile.sn

        await self._flush(profile.sn)

    async def _flush(self, sn: str) -> None:
        """Flush pending writes, mapping duplicate screen names to a conflict."""
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if is_unique_violation(exc):
                raise ScreenNameTakenError(sn) from exc
            raise

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user=model.user_id,
            name=model.name,
            text=model.text,
            mdtext=model.mdtext,
            date=model.date,
            update=model.update,
            sn=model.sn,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user,
            name=entity.name,
            text=entity.text,
            mdtext=entity.mdtext,
            date=entity.date,
            update=entity.update,
            sn=entity.sn,
        )
