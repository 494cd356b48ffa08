from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = (
    "Settings",

    "get_settings"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UNISTORE_",
        extra="ignore",
        case_sensitive=False
    )

    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
