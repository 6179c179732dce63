from functools import lru_cache

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., DEBUG, PRICE_FEED_URL, HTTP_TIMEOUT_SECONDS, FETCH_ON_STARTUP).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Basic app metadata
    app_name: str = "Currency Swap"
    debug: bool = False
    version: str = "0.1.0"

    # Price feed
    price_feed_url: AnyHttpUrl = "https://interview.switcheo.com/prices.json"
    http_timeout_seconds: float = 5.0
    # Refresh the price store once when the app starts (form mount)
    fetch_on_startup: bool = True

    # Presentation
    amount_display_places: int = 6

    def init_post_load(self) -> None:
        """Validate derived values; raise ValueError on nonsense."""
        if self.http_timeout_seconds <= 0:
            raise ValueError(
                f"http_timeout_seconds must be positive, got {self.http_timeout_seconds}"
            )
        if not 0 <= self.amount_display_places <= 18:
            raise ValueError(
                f"amount_display_places must be within 0..18, got {self.amount_display_places}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
