"""Service factories shared by route handlers and auth dependencies."""

from functools import lru_cache
from typing import Callable

from core.config import settings
from domain.services.auth_param_service import AuthParamService
from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.captcha.recaptcha import RecaptchaVerifier
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.text.markdown import render_markdown


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(
        get_uow_factory(),
        rules=settings.profile_rules,
        render=render_markdown,
    )


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(
        get_uow_factory(),
        sn_rule=settings.user_sn_rule,
        pass_rule=settings.user_pass_rule,
        password_salt=settings.password_salt,
    )


@lru_cache
def get_auth_param_service() -> AuthParamService:
    """Get the API credential resolver."""
    return AuthParamService(
        get_uow_factory(),
        captcha_verifier=RecaptchaVerifier(),
        password_salt=settings.password_salt,
    )
