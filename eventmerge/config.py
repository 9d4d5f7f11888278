from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = "Event Merge Service"
    log_level: str = "INFO"

    # Load a demo user with overlapping events at startup
    seed_sample_data: bool = False

    model_config = SettingsConfigDict(
        env_prefix="EVENTMERGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
