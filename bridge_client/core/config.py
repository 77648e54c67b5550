from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    QUOTE_SERVICE_BASE_URL, HTTP_TIMEOUT_SECONDS, STRICT_AMOUNT_VALIDATION).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Bridge: Crypto/Fiat Converter"
    debug: bool = False
    version: str = "0.1.0"

    # Quote service
    quote_service_base_url: str = "http://localhost:8000"
    http_timeout_seconds: float = 10.0

    # Reject NaN / infinite / negative amounts before any request goes out
    strict_amount_validation: bool = False

    @field_validator("quote_service_base_url")
    @classmethod
    def normalize_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("quote_service_base_url must be an http(s) URL")
        return v

    @field_validator("http_timeout_seconds")
    @classmethod
    def positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
