"""Configuration settings for miro_boards.

Uses pydantic-settings for config parsing from environment variables
and defaults. Configuration precedence: CLI flags > env vars > defaults.

The only value shared across invocations is the ClientConfig built at
startup from these settings; it is frozen and passed explicitly to the
client rather than kept as a module-level singleton.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from miro_boards.errors import StartupError

MIRO_API_BASE = "https://api.miro.com/v2"


def _default_prompt_path() -> Path:
    """Return the bundled key-facts prompt file."""
    return Path(__file__).parent / "data" / "boards-key-facts.md"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable connection settings for the Miro API.

    Attributes:
        token: OAuth bearer token.
        base_url: API root, e.g. ``https://api.miro.com/v2``.
    """

    token: str
    base_url: str = MIRO_API_BASE

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        if not self.token:
            raise StartupError("Miro OAuth token must not be empty")
        if not self.base_url:
            raise StartupError("Miro API base URL must not be empty")

    def __repr__(self) -> str:
        return f"ClientConfig(token='***', base_url={self.base_url!r})"


class Settings(BaseSettings):
    """Application settings.

    Settings are loaded from environment variables with the MIRO_ prefix.
    CLI flags can override these at runtime.
    """

    model_config = SettingsConfigDict(
        env_prefix="MIRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    oauth_token: SecretStr | None = Field(
        default=None,
        description="Miro OAuth token used as bearer credential",
    )
    api_base_url: str = Field(
        default=MIRO_API_BASE,
        description="Root URL of the Miro REST API",
    )
    prompt_path: Path = Field(
        default_factory=_default_prompt_path,
        description="Markdown file served as the 'Working with MIRO' prompt",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    def client_config(self, token: str | None = None) -> ClientConfig:
        """Build the immutable client configuration.

        Args:
            token: Token override (e.g. from ``--token``); takes precedence
                over MIRO_OAUTH_TOKEN.

        Returns:
            ClientConfig for MiroClient.

        Raises:
            StartupError: If no token is available.
        """
        resolved = token or (
            self.oauth_token.get_secret_value() if self.oauth_token else None
        )
        if not resolved:
            raise StartupError(
                "Miro OAuth token is required. Provide it via MIRO_OAUTH_TOKEN "
                "environment variable or --token argument"
            )
        return ClientConfig(token=resolved, base_url=self.api_base_url.rstrip("/"))


def get_settings() -> Settings:
    """Get the application settings.

    Returns:
        Settings instance loaded from environment.
    """
    return Settings()


def print_settings_json(settings: Settings | None = None) -> str:
    """Render effective settings as JSON.

    The OAuth token is masked by pydantic's SecretStr serialization.

    Args:
        settings: Optional settings instance; uses default if not provided.

    Returns:
        JSON string of effective settings.
    """
    if settings is None:
        settings = get_settings()
    return settings.model_dump_json(indent=2)


__all__ = [
    "MIRO_API_BASE",
    "ClientConfig",
    "Settings",
    "get_settings",
    "print_settings_json",
]
