"""Application configuration."""

from pathlib import Path
from typing import Literal
from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreSettings(BaseModel):
    """Binding store (database) configuration."""

    # SQLAlchemy async driver: "postgresql+asyncpg" or "sqlite+aiosqlite"
    driver: str = "postgresql+asyncpg"

    host: str = "localhost"
    port: int = 5432
    username: str = "nameguard"
    password: str = "nameguard"
    database: str = "nameguard"

    # Full URL override (e.g. "sqlite+aiosqlite:///./nameguard.db")
    # When set, driver/host/port/credentials are ignored
    url: str | None = None

    pool_size: int = 5
    max_overflow: int = 10

    # Seconds allowed for establishing a connection
    connect_timeout: float = 5.0

    # Seconds allowed for a single store operation (lookup or write)
    # A timeout is reported as an unavailable store, never as a rejection
    operation_timeout: float = 5.0

    @computed_field
    @property
    def dsn(self) -> str:
        """Connection URL built from the individual parameters."""
        if self.url:
            return self.url
        if self.driver.startswith("sqlite"):
            return f"{self.driver}:///{self.database}"
        return (
            f"{self.driver}://{self.username}:{self.password}"
            f"@{self.host}:{self.port}/{self.database}"
        )


class BindingSettings(BaseModel):
    """Name binding policy configuration."""

    # Whether first/last seen origin addresses are recorded
    # When False, address columns are left empty on insert and untouched on update
    track_addresses: bool = True

    # Message shown to a player whose name is bound to a different identity
    rejection_message: str = (
        "Login rejected: a player with your name but a different identity "
        "has already joined this server."
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        STORE__HOST=db.internal
        STORE__PASSWORD=secret
        STORE__URL=sqlite+aiosqlite:///./nameguard.db
        BINDINGS__TRACK_ADDRESSES=false
        BINDINGS__REJECTION_MESSAGE="..."
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows STORE__HOST syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    # Address the host-facing API binds to
    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    store: StoreSettings = StoreSettings()
    bindings: BindingSettings = BindingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_git_sha(self) -> "Settings":
        """Load git SHA from the version file if one is deployed."""
        self.git_sha = self._load_git_sha(self.git_sha)
        return self

    @staticmethod
    def _load_git_sha(default: str) -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise the configured value
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return default
        return default

    @property
    def database_url(self) -> str:
        """Shortcut for the store connection URL."""
        return self.store.dsn
