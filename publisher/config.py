"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class HaloSettings(BaseSettings):
    """Halo backend connection settings.

    Read from HALO_BASE_URL, HALO_TOKEN and HALO_TIMEOUT so the server can be
    configured from the MCP host's environment block.
    """

    model_config = SettingsConfigDict(
        env_prefix="HALO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "http://localhost:8090"
    token: str = ""

    # Seconds per request; None waits indefinitely
    timeout: float | None = 30.0

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended directly."""
        return v.rstrip("/")

    @computed_field
    @property
    def api_url(self) -> str:
        """Versioned API root for endpoints outside the /apis/ namespace."""
        return f"{self.base_url}/api/v1alpha1"

    def headers(self) -> dict[str, str]:
        """Build standard request headers.

        Returns:
            Bearer authorization and JSON content type headers
        """
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to the console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # If None, sends only when a token is present
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Halo connection values use the HALO_ prefix; everything else follows the
    nested delimiter syntax (e.g. OBSERVABILITY__LOGFIRE_TOKEN).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    environment: Literal["test", "development", "production"] = "development"
    debug: bool = False

    halo: HaloSettings = Field(default_factory=HaloSettings)
    observability: ObservabilitySettings = ObservabilitySettings()
