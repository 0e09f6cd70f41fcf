from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "GitHub Impact Leaderboard"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # GitHub API
    github_token: str | None = None
    github_api_base_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"
    github_timeout_seconds: float = 30.0

    # Upstream page sizes
    events_per_page: int = 50
    repos_per_page: int = 100

    # API settings
    leaderboard_default_limit: int = 10
    max_usernames_per_request: int = 100

    @field_validator("github_token", mode="before")
    @classmethod
    def blank_token_is_none(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
