from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STENCIL_", case_sensitive=False)

    package_manager: str = "npm"
    json_indent: int = Field(default=4, ge=0)
    log_level: str = "INFO"
    assume_yes: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
