"""User service layer with business logic."""

from collections.abc import Callable
from datetime import datetime

import structlog

from domain.entities.field_rule import FieldRule
from domain.entities.token import Token
from domain.entities.user import AuthUser, User
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class UserService:
    """Service layer for accounts and the tokens they issue."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        sn_rule: FieldRule,
        pass_rule: FieldRule,
        password_salt: str,
    ) -> None:
        self._uow_factory = uow_factory
        self._sn_rule = sn_rule
        self._pass_rule = pass_rule
        self._password_salt = password_salt

    async def register(self, sn: str, password: str) -> User:
        """Create a new user. Raises ScreenNameTakenError if sn is in use."""
        user = User.create(
            sn,
            password,
            datetime.utcnow(),
            sn_rule=self._sn_rule,
            pass_rule=self._pass_rule,
            salt=self._password_salt,
        )

        async with self._uow_factory() as uow:
            await uow.users.insert(user)
            await uow.commit()

        logger.info("user_created", user_id=str(user.id), sn=user.sn)
        return user

    async def issue_master_token(self, auth_user: AuthUser) -> tuple[Token, str]:
        """Issue a master token for an authenticated user.

        Returns:
            Tuple of (Token, raw_key). The raw key is never stored and
            must be handed to the client now.
        """
        token, raw_key = Token.create_master(auth_user, datetime.utcnow())

        async with self._uow_factory() as uow:
            await uow.tokens.insert(token)
            await uow.commit()

        logger.info("master_token_issued", token_id=str(token.id), user_id=str(auth_user.id))
        return token, raw_key
