# shippo_adapter/core/config.py

import os
from functools import lru_cache
from typing import Optional
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from shippo_adapter.core.enums import SHIPPO_API_BASE_URL, WebhookEvent


class Settings(BaseSettings):
    """
    Adapter settings.
    Loads values from environment variables (.env file)
    """
    # Shippo API
    SHIPPO_API_TOKEN: str = ""  # shippo_test_... or shippo_live_...
    SHIPPO_API_BASE_URL: str = SHIPPO_API_BASE_URL
    SHIPPO_AUTH_SCHEME: str = "ShippoToken"
    SHIPPO_TIMEOUT: float = 30.0  # Handed to the HTTP transport, nothing else times out

    # Trigger / inbound webhook receiver
    SHIPPO_WEBHOOK_URL: str = ""
    SHIPPO_WEBHOOK_EVENT: str = WebhookEvent.TRACK_UPDATED.value
    SHIPPO_WEBHOOK_IS_TEST: Optional[bool] = None
    SHIPPO_STATIC_DATA_FILE: str = ".shippo_static_data.json"

    # Licensing notice logged once per dispatcher / trigger instance
    SHIPPO_LICENSE_NOTICE: bool = True

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=os.environ.get('ENV_FILE', '.env'),
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Cached settings to avoid loading .env file for every request"""
    return Settings()


def clear_settings_cache():
    """Clear the settings cache - useful when switching between environments"""
    get_settings.cache_clear()
