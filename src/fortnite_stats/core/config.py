from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fortnite_stats.providers.base.errors import ConfigurationError

API_KEY_HINTS = (
    "Get an API key from https://fortnite-api.com/",
    "Usage: FORTNITE_API_KEY=your_api_key fortnite-stats <username|accountId> [accountType]",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    fortnite_api_key: str | None = Field(default=None, repr=False)

    # fortnite-api.com (payload shape A)
    fortnite_api_base_url: str = "https://fortnite-api.com/v2"
    # fortniteapi.io (payload shape B)
    fortniteapi_io_base_url: str = "https://fortniteapi.io/v1"

    fortnite_stats_source: str = "fortnite-api"
    fortnite_stats_image: str = "all"

    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_fortnite_api_key(self) -> str:
        if not self.fortnite_api_key:
            raise ConfigurationError(
                "FORTNITE_API_KEY environment variable is required",
                hints=API_KEY_HINTS,
            )
        return self.fortnite_api_key


def load_settings() -> Settings:
    return Settings()
