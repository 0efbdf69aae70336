from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8076", description="API bind address")
    APP_ENV: str = Field(default="production", description="Runtime environment: development | production")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # LLM
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")
    OPENAI_API_ORG: str = Field(default="", description="OpenAI organization ID")
    OPENAI_BASE_URL: str = Field(default="https://api.openai.com/v1", description="OpenAI base URL")
    CHAT_MODEL: str = Field(default="gpt-3.5-turbo", description="Chat model ID")
    LLM_REQUEST_TIMEOUT: Optional[float] = Field(default=None, description="LLM HTTP timeout (seconds); unset keeps the httpx default")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.strip().lower() == "development"


settings = Settings()
