from __future__ import annotations

from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict

from epicurain.shared.config.settings import Settings, settings as default_settings


class OpenAICredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    organization: Optional[str] = None


class CredentialsProvider(Protocol):
    def get_credentials(self) -> OpenAICredentials: ...


class SettingsCredentialsProvider:
    """
    Reads OPENAI_API_KEY / OPENAI_API_ORG from the application settings
    (environment or .env) each time credentials are requested.
    """

    def __init__(self, cfg: Optional[Settings] = None) -> None:
        self._cfg = cfg or default_settings

    def get_credentials(self) -> OpenAICredentials:
        return OpenAICredentials(
            api_key=self._cfg.OPENAI_API_KEY,
            organization=self._cfg.OPENAI_API_ORG or None,
        )


class StaticCredentialsProvider:
    def __init__(self, api_key: str, organization: Optional[str] = None) -> None:
        self._creds = OpenAICredentials(api_key=api_key, organization=organization)

    def get_credentials(self) -> OpenAICredentials:
        return self._creds
