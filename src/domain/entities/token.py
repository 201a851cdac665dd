"""Token domain entity."""

import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID, uuid4

from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.user import AuthUser


class TokenType(StrEnum):
    """Kind of API token."""

    MASTER = "master"
    GENERAL = "general"


class TokenRequirement(StrEnum):
    """Token an endpoint demands from its caller."""

    MASTER = "master"
    ALL = "all"
    NO = "no"


@dataclass(frozen=True, slots=True)
class AuthToken:
    """Identity produced by a successfully authenticated token."""

    id: UUID
    key: str
    user: UUID
    type: TokenType


def hash_key(key: str) -> str:
    return hashlib.sha256(key.encode()).hexdigest()


@dataclass
class Token:
    """Domain entity for an API token. Only the key hash is stored."""

    user: UUID
    key_hash: str
    type: TokenType = TokenType.GENERAL
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create_master(cls, auth_user: AuthUser, now: datetime) -> tuple["Token", str]:
        """Issue a master token for a user.

        Returns:
            Tuple of (Token, raw_key). The raw key is only available here.
        """
        raw_key = secrets.token_urlsafe(32)
        token = cls(
            user=auth_user.id,
            key_hash=hash_key(raw_key),
            type=TokenType.MASTER,
            date=now,
        )
        return token, raw_key

    def auth(self, key: str) -> AuthToken:
        """Authenticate the token with its key."""
        if not secrets.compare_digest(hash_key(key), self.key_hash):
            raise AuthenticationError(
                message="Invalid token key",
                error_code=ErrorCode.INVALID_TOKEN,
            )
        return AuthToken(id=self.id, key=key, user=self.user, type=self.type)
