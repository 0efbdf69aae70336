from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from epicurain.shared.config.credentials import CredentialsProvider, SettingsCredentialsProvider
from epicurain.shared.config.settings import settings

log = logging.getLogger("openai")


class ChatClient(Protocol):
    async def create_chat_completion(
        self, messages: List[Dict[str, str]], *, model: Optional[str] = None
    ) -> Dict[str, Any]: ...


def extract_first_message(data: Dict[str, Any]) -> str:
    """
    Return the content of the first choice's message.
    A missing or null content yields an empty string; a response without
    choices raises KeyError/IndexError/TypeError.
    """
    message = data["choices"][0].get("message") or {}
    return message.get("content") or ""


class OpenAIChatClient:
    """
    Minimal client for the OpenAI chat completions endpoint.
    A new httpx.AsyncClient is opened for every request.
    """

    def __init__(
        self,
        credentials: Optional[CredentialsProvider] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials or SettingsCredentialsProvider()
        self.base_url = (base_url or settings.OPENAI_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.LLM_REQUEST_TIMEOUT
        self._transport = transport

    @property
    def chat_url(self) -> str:
        return f"{self.base_url}/chat/completions"

    def _headers(self) -> Dict[str, str]:
        creds = self.credentials.get_credentials()
        headers = {
            "Authorization": f"Bearer {creds.api_key}",
            "Content-Type": "application/json",
        }
        if creds.organization:
            headers["OpenAI-Organization"] = creds.organization
        return headers

    async def create_chat_completion(
        self, messages: List[Dict[str, str]], *, model: Optional[str] = None
    ) -> Dict[str, Any]:
        payload = {
            "model": (model or settings.CHAT_MODEL),
            "messages": messages,
        }
        client_kwargs: Dict[str, Any] = {"transport": self._transport}
        if self.timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(self.timeout)
        async with httpx.AsyncClient(**client_kwargs) as client:
            resp = await client.post(self.chat_url, headers=self._headers(), json=payload)
            resp.raise_for_status()
            data = resp.json()
        log.debug("chat completion ok model=%s id=%s", payload["model"], data.get("id"))
        return data
