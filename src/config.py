"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    base_url: str = "https://jsonplaceholder.typicode.com/posts"
    request_timeout: float | None = None

    output_dir: str = "out"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
