"""
Configuration management using Pydantic for validation.

Supports loading from:
- YAML files (primary)
- Environment variables with GPHOTOS_ prefix
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gphotos.auth import SCOPES


class AuthSettings(BaseModel):
    """OAuth client and token locations."""

    token_path: Path = Field(
        default=Path("token.json"),
        description="Where the authorized user token is cached",
    )
    client_secret_path: Path = Field(
        default=Path("client_secret.json"),
        description="OAuth client secret downloaded from the Cloud console",
    )
    scopes: list[str] = Field(
        default_factory=lambda: list(SCOPES),
        min_length=1,
        description="OAuth scopes requested during consent. "
        "Changing scopes requires deleting the cached token.",
    )

    @field_validator("token_path", "client_secret_path", mode="before")
    @classmethod
    def parse_path(cls, v):
        """Convert string path to Path object."""
        if isinstance(v, str):
            return Path(v)
        return v


class UploadSettings(BaseModel):
    """Upload orchestration configuration."""

    album_page_size: int = Field(
        default=50,
        ge=1,
        le=50,
        description="Page size used when searching albums by title (API maximum is 50)",
    )
    delete_after_upload: bool = Field(
        default=True,
        description="Delete local files once every item of a batch was created. "
        "WARNING: Destructive - files are permanently deleted!",
    )
    resumable_chunk_size: int = Field(
        default=8 * 1024 * 1024,
        ge=256 * 1024,
        description="Chunk size in bytes for resumable uploads "
        "(rounded down to the server's chunk granularity)",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Can be loaded from:
    - YAML file: Settings.from_yaml("config.yaml")
    - Environment variables: GPHOTOS_LOG_LEVEL=DEBUG, GPHOTOS_AUTH__TOKEN_PATH=...
    """

    model_config = SettingsConfigDict(
        env_prefix="GPHOTOS_",
        env_nested_delimiter="__",
        extra="ignore",  # Ignore unknown fields for forward compatibility
    )

    auth: AuthSettings = Field(
        default_factory=AuthSettings,
        description="OAuth settings",
    )
    upload: UploadSettings = Field(
        default_factory=UploadSettings,
        description="Upload settings",
    )
    request_timeout: float | None = Field(
        default=60.0,
        gt=0,
        description="Seconds to wait for each HTTP request (None waits forever)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Settings instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save settings to a YAML file."""
        data = self.model_dump(mode="json")

        with open(Path(path), "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
