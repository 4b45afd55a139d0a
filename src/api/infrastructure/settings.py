"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_JWT_SECRET_LENGTH = 32


class DatabaseSettings(BaseSettings):
    """Authorization store connection settings.

    Environment variables:
        WARDEN_DB_DRIVER: SQLAlchemy async driver (default: postgresql+asyncpg)
        WARDEN_DB_HOST: Database host (default: localhost)
        WARDEN_DB_PORT: Database port (default: 5432)
        WARDEN_DB_DATABASE: Database name, or file path for SQLite (default: warden)
        WARDEN_DB_USERNAME: Database user (default: warden)
        WARDEN_DB_PASSWORD: Database password (required in production)
        WARDEN_DB_POOL_MAX_CONNECTIONS: Connections per engine (default: 10)
        WARDEN_DB_ECHO: Log every SQL statement (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="WARDEN_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    driver: str = Field(
        default="postgresql+asyncpg", description="SQLAlchemy async driver"
    )
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="warden", description="Database name")
    username: str = Field(default="warden", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_max_connections: int = Field(
        default=10,
        description="Connections per engine; overflow is disabled",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log SQL statements")

    @property
    def connection_string(self) -> str:
        """Connection target without the password, for log lines."""
        if self.driver.startswith("sqlite"):
            return f"{self.driver}:///{self.database}"
        return f"{self.driver}://{self.username}@{self.host}:{self.port}/{self.database}"


class AuthSettings(BaseSettings):
    """Bearer token validation settings.

    Environment variables:
        WARDEN_AUTH_JWT_SECRET: Shared secret used to verify token signatures
            (required, at least 32 characters)
        WARDEN_AUTH_JWT_ALGORITHM: Signing algorithm (default: HS256)
        WARDEN_AUTH_AUDIENCE: Expected audience, unchecked when unset
        WARDEN_AUTH_ISSUER: Expected issuer, unchecked when unset
    """

    model_config = SettingsConfigDict(
        env_prefix="WARDEN_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    jwt_secret: SecretStr = Field(description="Shared secret for token signatures")
    jwt_algorithm: str = Field(default="HS256", description="Signing algorithm")
    audience: str | None = Field(default=None, description="Expected audience")
    issuer: str | None = Field(default=None, description="Expected issuer")

    @field_validator("jwt_secret")
    @classmethod
    def validate_secret_length(cls, value: SecretStr) -> SecretStr:
        """Reject secrets short enough to brute-force."""
        if len(value.get_secret_value()) < MIN_JWT_SECRET_LENGTH:
            raise ValueError(
                f"jwt_secret must be at least {MIN_JWT_SECRET_LENGTH} characters"
            )
        return value


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Warden Authorization API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def auth(self) -> AuthSettings:
        """Get auth settings."""
        return get_auth_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_auth_settings() -> AuthSettings:
    """Get cached auth settings."""
    return AuthSettings()
