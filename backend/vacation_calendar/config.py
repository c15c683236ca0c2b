from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    APP_NAME: str = "VacationCalendar"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Calendarific (calendarific.api.key / calendarific.api.baseUrl)
    CALENDARIFIC_API_KEY: SecretStr = SecretStr("")
    CALENDARIFIC_API_BASE_URL: str = "https://calendarific.com/api/v2"

    # None = requests default (no timeout)
    UPSTREAM_TIMEOUT_SECONDS: float | None = None

    @field_validator("CALENDARIFIC_API_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    return Settings()
