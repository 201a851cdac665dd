"""User domain entity."""

import hashlib
import secrets
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.field_rule import FieldRule


@dataclass(frozen=True, slots=True)
class AuthUser:
    """Identity produced by a successful password check."""

    id: UUID
    sn: str


def hash_password(password: str, salt: str) -> str:
    return hashlib.sha256((password + salt).encode()).hexdigest()


@dataclass
class User:
    """Domain entity for an account holder."""

    sn: str
    pass_hash: str
    id: UUID = field(default_factory=uuid4)
    date: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(
        cls,
        sn: str,
        password: str,
        now: datetime,
        *,
        sn_rule: FieldRule,
        pass_rule: FieldRule,
        salt: str,
    ) -> "User":
        """Build a new user after checking screen name and password rules."""
        sn_rule.check(sn, "sn")
        pass_rule.check(password, "pass")
        return cls(sn=sn, pass_hash=hash_password(password, salt), date=now)

    def auth(self, password: str, salt: str) -> AuthUser:
        """Authenticate the user with a password."""
        if not secrets.compare_digest(hash_password(password, salt), self.pass_hash):
            raise AuthenticationError(
                message="Invalid password",
                error_code=ErrorCode.INVALID_PASSWORD,
            )
        return AuthUser(id=self.id, sn=self.sn)
