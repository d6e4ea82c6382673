from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, env_prefix="SQLPAGER_")

    # Pagination defaults
    # For the hard page size ceiling, see MAX_PAGE_SIZE below
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int | None = None

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["human", "json"] = "human"
    LOG_FILE_PATH: str | None = None

    ENVIRONMENT: str = "development"


app_settings = Settings()
