from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    BACKEND_URL: str | None = None
    BACKEND_API_KEY: str | None = None
    BACKEND_TIMEOUT_SECONDS: float = 10.0

    CALENDAR_LOCALE: str = "pt-BR"
    CALENDAR_COMPACT: bool = False
    UTC_OFFSET_LABEL: str = "GMT-03"


settings = Settings()
