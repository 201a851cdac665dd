"""Authentication dependencies for FastAPI.

Credentials travel as request headers:

    X-Token-Id / X-Token-Key    API token
    X-User-Id / X-User-Pass     user password login
    X-Recaptcha                 reCAPTCHA response
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Header

from api.dependencies.services import get_auth_param_service
from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.token import AuthToken, TokenRequirement
from domain.entities.user import AuthUser
from domain.services.auth_param_service import AuthParamService, TokenParam, UserParam


def _parse_id(value: str, error_code: ErrorCode) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        raise AuthenticationError(message="Malformed credential id", error_code=error_code) from None


async def get_token_param(
    x_token_id: Annotated[str | None, Header()] = None,
    x_token_key: Annotated[str | None, Header()] = None,
) -> TokenParam | None:
    """Extract token credentials; None unless both headers are present."""
    if not x_token_id or not x_token_key:
        return None
    return TokenParam(id=_parse_id(x_token_id, ErrorCode.INVALID_TOKEN), key=x_token_key)


async def get_user_param(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_pass: Annotated[str | None, Header()] = None,
) -> UserParam | None:
    """Extract user credentials; None unless both headers are present."""
    if not x_user_id or not x_user_pass:
        return None
    return UserParam(id=_parse_id(x_user_id, ErrorCode.INVALID_PASSWORD), password=x_user_pass)


async def get_optional_token(
    param: Annotated[TokenParam | None, Depends(get_token_param)],
    service: AuthParamService = Depends(get_auth_param_service),
) -> AuthToken | None:
    """Token is optional; a supplied token must still be valid."""
    return await service.resolve_token(param, TokenRequirement.NO)


async def get_current_token(
    param: Annotated[TokenParam | None, Depends(get_token_param)],
    service: AuthParamService = Depends(get_auth_param_service),
) -> AuthToken:
    """
    Dependency requiring any valid token.

    Raises:
        AuthenticationError: If no token provided or the key is wrong
    """
    return await service.resolve_token(param, TokenRequirement.ALL)  # type: ignore[return-value]


async def get_master_token(
    param: Annotated[TokenParam | None, Depends(get_token_param)],
    service: AuthParamService = Depends(get_auth_param_service),
) -> AuthToken:
    """
    Dependency requiring a valid master token.

    Raises:
        AuthenticationError: If no token provided or the key is wrong
        PrivilegeRequiredError: If the token is not a master token
    """
    return await service.resolve_token(param, TokenRequirement.MASTER)  # type: ignore[return-value]


async def get_current_user(
    param: Annotated[UserParam | None, Depends(get_user_param)],
    service: AuthParamService = Depends(get_auth_param_service),
) -> AuthUser:
    """Dependency requiring user id and password."""
    return await service.resolve_user(param, required=True)  # type: ignore[return-value]


async def require_recaptcha(
    x_recaptcha: Annotated[str | None, Header()] = None,
    service: AuthParamService = Depends(get_auth_param_service),
) -> None:
    """Dependency requiring a CAPTCHA response accepted by the verifier."""
    await service.resolve_recaptcha(x_recaptcha, required=True)


# Type aliases for convenience in route handlers
OptionalToken = Annotated[AuthToken | None, Depends(get_optional_token)]
CurrentToken = Annotated[AuthToken, Depends(get_current_token)]
MasterToken = Annotated[AuthToken, Depends(get_master_token)]
CurrentUser = Annotated[AuthUser, Depends(get_current_user)]
Recaptcha = Annotated[None, Depends(require_recaptcha)]
