"""Profile domain entity."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TypedDict
from uuid import UUID, uuid4

from core.exceptions import ProfilePermissionError
from domain.entities.field_rule import FieldRule
from domain.entities.token import AuthToken

MarkdownRenderer = Callable[[str], str]


class ProfileAPI(TypedDict):
    """External representation of a profile."""

    id: str
    user: str | None
    name: str
    text: str
    mdtext: str
    date: str
    update: str
    sn: str


@dataclass(frozen=True, slots=True)
class ProfileRules:
    """Format rules for the user-editable profile fields."""

    name: FieldRule
    text: FieldRule
    sn: FieldRule

    def validate(self, name: str, text: str, sn: str) -> None:
        """Check name, text and sn in that order; the first failure is raised."""
        self.name.check(name, "name")
        self.text.check(text, "text")
        self.sn.check(sn, "sn")


def _iso(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


@dataclass
class Profile:
    """Domain entity for a user's public profile."""

    user: UUID
    name: str
    text: str
    mdtext: str
    date: datetime
    update: datetime
    sn: str
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def create(
        cls,
        auth_token: AuthToken,
        name: str,
        text: str,
        sn: str,
        now: datetime,
        *,
        rules: ProfileRules,
        render: MarkdownRenderer,
    ) -> "Profile":
        """Build a new profile owned by the token's user. Nothing is persisted."""
        rules.validate(name, text, sn)
        return cls(
            user=auth_token.user,
            name=name,
            text=text,
            mdtext=render(text),
            date=now,
            update=now,
            sn=sn,
        )

    def change_data(
        self,
        auth_token: AuthToken,
        name: str,
        text: str,
        sn: str,
        now: datetime,
        *,
        rules: ProfileRules,
        render: MarkdownRenderer,
    ) -> None:
        """Replace the editable fields. Only the owner may do this."""
        if auth_token.user != self.user:
            raise ProfilePermissionError()
        rules.validate(name, text, sn)

        self.name = name
        self.text = text
        self.sn = sn
        self.mdtext = render(text)
        self.update = now

    def is_owned_by(self, auth_token: AuthToken | None) -> bool:
        return auth_token is not None and auth_token.user == self.user

    def to_api(self, auth_token: AuthToken | None) -> ProfileAPI:
        """Project to the API shape; the owner id is only shown to the owner."""
        return ProfileAPI(
            id=str(self.id),
            user=str(self.user) if self.is_owned_by(auth_token) else None,
            name=self.name,
            text=self.text,
            # Mirrors the raw text, not the stored rendering.
            mdtext=self.text,
            date=_iso(self.date),
            update=_iso(self.update),
            sn=self.sn,
        )
