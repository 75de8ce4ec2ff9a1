import os
from functools import lru_cache

from pydantic import BaseModel, field_validator

DEFAULT_ALPHA_VANTAGE_BASE_URL = "https://www.alphavantage.co/query"


class Settings(BaseModel):
    ALPHA_VANTAGE_API_KEY: str | None = None
    ALPHA_VANTAGE_BASE_URL: str = DEFAULT_ALPHA_VANTAGE_BASE_URL
    UPSTREAM_TIMEOUT_SEC: float = 10.0

    @field_validator("UPSTREAM_TIMEOUT_SEC")
    @classmethod
    def require_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("UPSTREAM_TIMEOUT_SEC must be positive")
        return value

    @property
    def api_key_configured(self) -> bool:
        return bool(self.ALPHA_VANTAGE_API_KEY)

    @classmethod
    def from_env(cls) -> "Settings":
        # empty values count as unset so a blank secret reports as unconfigured
        return cls.model_validate(
            {
                "ALPHA_VANTAGE_API_KEY": os.getenv("ALPHA_VANTAGE_API_KEY") or None,
                "ALPHA_VANTAGE_BASE_URL": os.getenv("ALPHA_VANTAGE_BASE_URL")
                or DEFAULT_ALPHA_VANTAGE_BASE_URL,
                "UPSTREAM_TIMEOUT_SEC": os.getenv("UPSTREAM_TIMEOUT_SEC") or 10.0,
            }
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
