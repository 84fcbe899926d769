from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_ENV: str = "dev"
    API_VERSION: str = "v1.0.0"
    LOG_LEVEL: str = "INFO"

    ALLOW_ORIGINS: List[str] = ["*"]

    # simulated "thinking" before the agent replies, drawn uniformly
    THINKING_DELAY_MIN_SECONDS: float = 1.0
    THINKING_DELAY_MAX_SECONDS: float = 3.0

    GREETING_ENABLED: bool = True
    ALERT_LOG_LIMIT: int = 200

    # exposes POST /chat/classify
    ALLOW_DEV_DEBUG_META: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
