"""Library configuration via environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

UnknownPropPolicy = Literal["ignore", "reject"]


class Settings(BaseSettings):
    """Settings loaded from ``PROPERIUM_*`` environment variables."""

    # Validation
    UNKNOWN_PROPS: UnknownPropPolicy = "ignore"

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "warning"

    model_config = {"env_prefix": "PROPERIUM_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
