# hotel_search/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    APP_NAME: str = "Hotel Search"
    ENV: str = "dev"

    # DB
    DATABASE_URL: str = Field(default="sqlite:///./hotels.db")  # e.g. mysql+pymysql://...
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10

    # Search
    # 1 keeps enrichment sequential; raise it up to the pool size to fan out per hotel
    SEARCH_MAX_WORKERS: int = Field(default=1, ge=1)

    # Observability
    LOG_LEVEL: str = "INFO"
    TIMERS_ENABLED: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,  # allow DATABASE_URL or database_url, etc.
        extra="ignore",
    )


settings = Settings()
