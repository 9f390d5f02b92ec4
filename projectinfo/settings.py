# /projectinfo/settings.py
# This file defines the configuration settings for the Project Info API.
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True)

    app_name: str = "Project Info API"

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # GitHub
    github_api_base: str = Field(default="https://api.github.com", alias="GITHUB_API_BASE")
    github_token: str | None = Field(default=None, alias="GITHUB_TOKEN") # Optional, for higher rate limits.
    http_timeout_s: float | None = Field(default=None, alias="HTTP_TIMEOUT_S") # None keeps the httpx default.


settings = Settings()
