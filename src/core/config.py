"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.entities.field_rule import FieldRule
from domain.entities.profile import ProfileRules


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profiles API")
    app_version: str = Field(default="1.0.0")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Database
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/profiles",
        description="PostgreSQL connection URL with asyncpg driver",
    )

    # Logging
    log_level: str = Field(default="info")
    log_format: str = Field(
        default="console",
        description="'console' for development, 'json' for production",
    )

    # Profile field rules
    profile_name_regex: str = Field(default=r"^[^<>]{1,50}$")
    profile_name_msg: str = Field(default="Name must be 1 to 50 characters")
    profile_text_regex: str = Field(default=r"^[\s\S]{1,3000}$")
    profile_text_msg: str = Field(default="Text must be 1 to 3000 characters")
    profile_sn_regex: str = Field(default=r"^[a-zA-Z0-9_]{3,20}$")
    profile_sn_msg: str = Field(
        default="Screen name must be 3 to 20 letters, digits or underscores"
    )

    # User field rules
    user_sn_regex: str = Field(default=r"^[a-zA-Z0-9_]{3,20}$")
    user_sn_msg: str = Field(
        default="Screen name must be 3 to 20 letters, digits or underscores"
    )
    user_pass_regex: str = Field(default=r"^[a-zA-Z0-9_]{3,50}$")
    user_pass_msg: str = Field(
        default="Password must be 3 to 50 letters, digits or underscores"
    )
    password_salt: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Salt appended to passwords before hashing",
    )

    # reCAPTCHA
    recaptcha_secret_key: str = Field(
        default="",
        description="reCAPTCHA server-side secret (keep secret)",
    )
    recaptcha_verify_url: str = Field(
        default="https://www.google.com/recaptcha/api/siteverify",
    )
    recaptcha_timeout_seconds: float = Field(default=10.0)

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses the asyncpg driver scheme.

        Hosting providers usually supply a standard ``postgresql://`` URL.
        SQLAlchemy's async engine requires ``postgresql+asyncpg://``.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def profile_rules(self) -> ProfileRules:
        """Field rules applied to profile name, text and screen name."""
        return ProfileRules(
            name=FieldRule(self.profile_name_regex, self.profile_name_msg),
            text=FieldRule(self.profile_text_regex, self.profile_text_msg),
            sn=FieldRule(self.profile_sn_regex, self.profile_sn_msg),
        )

    @property
    def user_sn_rule(self) -> FieldRule:
        return FieldRule(self.user_sn_regex, self.user_sn_msg)

    @property
    def user_pass_rule(self) -> FieldRule:
        return FieldRule(self.user_pass_regex, self.user_pass_msg)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
