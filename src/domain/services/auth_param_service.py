"""Resolution of credentials supplied with an API call."""

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID

import structlog

from core.exceptions import (
    AuthenticationError,
    CaptchaError,
    ErrorCode,
    PrivilegeRequiredError,
    TokenNotFoundError,
    UserNotFoundError,
)
from domain.entities.token import AuthToken, TokenRequirement, TokenType
from domain.entities.user import AuthUser
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.captcha import ICaptchaVerifier

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class TokenParam:
    """Token credentials as sent by the client."""

    id: UUID
    key: str


@dataclass(frozen=True, slots=True)
class UserParam:
    """User credentials as sent by the client."""

    id: UUID
    password: str


class AuthParamService:
    """Turns optional API credentials into authenticated identities.

    Each resolver is a single linear decision: a missing credential is
    either acceptable (``None`` is returned) or an AuthenticationError,
    otherwise the credential is looked up and checked.
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        captcha_verifier: ICaptchaVerifier,
        password_salt: str,
    ) -> None:
        self._uow_factory = uow_factory
        self._captcha = captcha_verifier
        self._password_salt = password_salt

    async def resolve_token(
        self,
        param: TokenParam | None,
        requirement: TokenRequirement,
    ) -> AuthToken | None:
        """Resolve token credentials against the requirement of an endpoint."""
        if param is None:
            if requirement == TokenRequirement.NO:
                return None
            raise AuthenticationError()

        async with self._uow_factory() as uow:
            token = await uow.tokens.get(param.id)
        if not token:
            raise TokenNotFoundError(str(param.id))

        auth_token = token.auth(param.key)

        if requirement == TokenRequirement.MASTER and auth_token.type != TokenType.MASTER:
            raise PrivilegeRequiredError()

        return auth_token

    async def resolve_user(
        self,
        param: UserParam | None,
        required: bool,
    ) -> AuthUser | None:
        """Resolve user id and password."""
        if param is None:
            if not required:
                return None
            raise AuthenticationError()

        async with self._uow_factory() as uow:
            user = await uow.users.get(param.id)
        if not user:
            raise UserNotFoundError(str(param.id))

        return user.auth(param.password, self._password_salt)

    async def resolve_recaptcha(self, response: str | None, required: bool) -> None:
        """Verify a CAPTCHA response when the endpoint demands one."""
        if not required:
            return
        if response is None:
            raise AuthenticationError(
                message="CAPTCHA verification required",
                error_code=ErrorCode.CAPTCHA_REQUIRED,
            )

        if not await self._captcha.verify(response):
            logger.info("captcha_rejected")
            raise CaptchaError()
