"""User registration and token issuance routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser, Recaptcha
from api.dependencies.services import get_user_service
from api.v1.schemas.account import (
    TokenDetailResponse,
    TokenResponse,
    UserCreate,
    UserDetailResponse,
    UserResponse,
)
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.user_service import UserService

users_router = APIRouter(prefix="/users", tags=["users"])
tokens_router = APIRouter(prefix="/tokens", tags=["tokens"])


@users_router.post(
    "",
    response_model=UserDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "User created successfully"},
        401: {"description": "CAPTCHA response missing"},
        403: {"description": "CAPTCHA verification failed"},
        409: {"description": "Screen name already taken"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def register_user(
    request: Request,
    body: UserCreate,
    _captcha: Recaptcha,
    service: UserService = Depends(get_user_service),
) -> UserDetailResponse:
    """Register a user. Requires a reCAPTCHA response in X-Recaptcha."""
    user = await service.register(body.sn, body.password)
    return UserDetailResponse(data=UserResponse(id=user.id, sn=user.sn, date=user.date))


@tokens_router.post(
    "/master",
    response_model=TokenDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Issue a master token",
    responses={
        201: {"description": "Token issued; the key is only returned once"},
        401: {"description": "User credentials missing or wrong"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def issue_master_token(
    request: Request,
    user: CurrentUser,
    service: UserService = Depends(get_user_service),
) -> TokenDetailResponse:
    """Issue a master token for the user given in X-User-Id / X-User-Pass."""
    token, raw_key = await service.issue_master_token(user)
    return TokenDetailResponse(
        data=TokenResponse(
            id=token.id,
            key=raw_key,
            user=token.user,
            type=token.type.value,
            date=token.date,
        )
    )
