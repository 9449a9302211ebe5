"""Client configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings for the booking platform client."""

    base_url: str = "https://jmtest.booking.jambojet.com/jm/dotrez/"
    subscription_key: str = ""
    access_token: str = ""
    environment: str = "test"

    # HTTP
    timeout: float = 30.0
    retry_attempts: int = 3
    retry_base_delay: float = 1.0  # seconds, doubled per attempt
    retry_max_delay: float = 30.0

    # Debug-log every request and response summary
    log_requests: bool = False

    model_config = SettingsConfigDict(
        env_prefix="JAMBOJET_", env_file=".env", extra="ignore"
    )


settings = ClientSettings()
