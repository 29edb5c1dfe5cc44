"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

AZURE_AD_OBJECT_ID_CLAIM = "http://schemas.microsoft.com/identity/claims/objectidentifier"


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        PORTAL_DB_DRIVER: SQLAlchemy async driver (default: postgresql+asyncpg)
        PORTAL_DB_HOST: Database host (default: localhost)
        PORTAL_DB_PORT: Database port (default: 5432)
        PORTAL_DB_DATABASE: Database name, or file path for SQLite (default: portal)
        PORTAL_DB_USERNAME: Database user (default: portal)
        PORTAL_DB_PASSWORD: Database password (required in production)
        PORTAL_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        PORTAL_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        PORTAL_DB_ECHO: Log emitted SQL (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    driver: str = Field(
        default="postgresql+asyncpg",
        description="SQLAlchemy async driver name",
    )
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="portal", description="Database name")
    username: str = Field(default="portal", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def is_sqlite(self) -> bool:
        """Whether the configured driver is a SQLite dialect."""
        return self.driver.startswith("sqlite")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        if self.is_sqlite:
            return f"{self.driver}:///{self.database}"
        return f"{self.driver}://{self.username}@{self.host}:{self.port}/{self.database}"


class IdentitySettings(BaseSettings):
    """Settings for mapping identity-provider claims onto local users.

    Environment variables:
        PORTAL_IDENTITY_OBJECT_ID_CLAIM: Claim carrying the external object id
        PORTAL_IDENTITY_NAME_CLAIM: Claim carrying the display name (default: name)
        PORTAL_IDENTITY_FALLBACK_LOCATION_ID: Location id given to new users
            when no location exists yet (default: 1)
    """

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_IDENTITY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    object_id_claim: str = Field(
        default=AZURE_AD_OBJECT_ID_CLAIM,
        description="Claim name holding the identity-provider object id",
    )
    name_claim: str = Field(
        default="name",
        description="Claim name holding the user's display name",
    )
    fallback_location_id: int = Field(
        default=1,
        description="Placeholder location id for users created before any location exists",
        ge=0,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="PORTAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="UPortal", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Minimum log level")
    seed_on_startup: bool = Field(
        default=True,
        description="Seed default locations, machines and permissions at startup",
    )

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def identity(self) -> IdentitySettings:
        """Get identity settings."""
        return get_identity_settings()


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
def get_identity_settings() -> IdentitySettings:
    """Get cached identity settings."""
    return IdentitySettings()
