from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from customer_api import __version__


class Settings(BaseSettings):
    APP_NAME: str = "Customer API"
    VERSION: str = __version__

    # Server
    HOST: str = "0.0.0.0"  # containers need the wildcard bind
    PORT: int = 3000
    ENVIRONMENT: str = "development"

    # Browser clients; "*" mirrors an open cors() setup
    CORS_ORIGINS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    SEED_DATA: bool = True

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
