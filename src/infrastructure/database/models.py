"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """Account holder model."""

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    sn: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    pass_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    # Relationships
    profiles: Mapped[list["ProfileModel"]] = relationship(
        "ProfileModel",
        back_populates="owner",
        cascade="all, delete-orphan",
    )
    tokens: Mapped[list["TokenModel"]] = relationship(
        "TokenModel",
        back_populates="owner",
        cascade="all, delete-orphan",
    )


class TokenModel(Base):
    """API token model. Only the key hash is stored."""

    __tablename__ = "tokens"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        "user",
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    key_hash: Mapped[str] = mapped_column(String(64), nullable=False)
    type: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint("type IN ('master', 'general')"),
        nullable=False,
        default="general",
    )
    date: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    owner: Mapped["UserModel"] = relationship("UserModel", back_populates="tokens")


class ProfileModel(Base):
    """Public profile model; screen names are unique across all profiles."""

    __tablename__ = "profiles"

    id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    user_id: Mapped[UUID] = mapped_column(
        "user",
        PG_UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    mdtext: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    update: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    sn: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    owner: Mapped["UserModel"] = relationship("UserModel", back_populates="profiles")
