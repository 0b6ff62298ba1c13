"""Chat-completions client for the Groq / OpenAI providers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol

import httpx

from src.pipeline_config import ProviderRole
from src.summarization.errors import (
    ApiError,
    InvalidProviderError,
    MalformedResponseError,
    ProviderTransportError,
    RateLimitedError,
)
from src.summarization.models import ProviderConfig


class CompletionClient(Protocol):
    """Anything that can turn an instruction plus body text into generated text."""

    def provider_name(self, provider: ProviderRole | str) -> str: ...

    async def complete(
        self, instruction: str, body: str, provider: ProviderRole | str
    ) -> str: ...


def build_payload(config: ProviderConfig, instruction: str, body: str) -> dict[str, Any]:
    """Build the chat-completions request body for *config*."""
    return {
        "model": config.model,
        "messages": [{"role": "user", "content": f"{instruction}\n\n{body}"}],
        "temperature": config.temperature,
    }


def extract_content(data: Any, provider: str) -> str:
    """Return ``choices[0].message.content`` or raise MalformedResponseError."""
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise MalformedResponseError(provider) from None
    if not isinstance(content, str) or not content:
        raise MalformedResponseError(provider)
    return content


class ProviderClient:
    """Issues a single chat-completion request to a configured provider.

    No retries happen here; see :mod:`src.summarization.retry`.

    Args:
        providers: Provider configs, at most one per role.
        http_client: Optional shared ``httpx.AsyncClient``.  When omitted a
            client is opened for each call.
        timeout: Request timeout in seconds for per-call clients.
    """

    def __init__(
        self,
        providers: Iterable[ProviderConfig],
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 60.0,
    ) -> None:
        self._providers: dict[ProviderRole, ProviderConfig] = {p.role: p for p in providers}
        self._http_client = http_client
        self._timeout = timeout

    def resolve(self, provider: ProviderRole | str) -> ProviderConfig:
        try:
            return self._providers[ProviderRole(provider)]
        except (ValueError, KeyError):
            raise InvalidProviderError(str(provider)) from None

    def provider_name(self, provider: ProviderRole | str) -> str:
        return self.resolve(provider).name

    async def complete(self, instruction: str, body: str, provider: ProviderRole | str) -> str:
        """Send ``instruction + "\\n\\n" + body`` to *provider* and return the reply text."""
        config = self.resolve(provider)
        headers = {
            "Authorization": f"Bearer {config.api_key}",
            "Content-Type": "application/json",
        }
        payload = build_payload(config, instruction, body)

        try:
            if self._http_client is not None:
                response = await self._http_client.post(
                    config.endpoint_url, headers=headers, json=payload
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(
                        config.endpoint_url, headers=headers, json=payload
                    )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ProviderTransportError(
                f"Error calling {config.name} API: {exc}", config.name
            ) from exc

        if response.status_code == 429:
            raise RateLimitedError(config.name)
        if not response.is_success:
            raise ApiError(response.status_code, config.name)

        try:
            data = response.json()
        except ValueError:
            raise MalformedResponseError(config.name) from None
        return extract_content(data, config.name)
