"""Shared fixtures: a scripted completion client and a sleep recorder."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from src.pipeline_config import ProviderRole
from src.summarization.errors import InvalidProviderError

PROVIDER_NAMES = {ProviderRole.PRIMARY: "groq", ProviderRole.SECONDARY: "openai"}

Response = str | Exception
Responder = Callable[[str, str, ProviderRole], Response]


class FakeCompletionClient:
    """In-memory stand-in for ProviderClient.

    ``responses`` maps a role to a script of texts/exceptions; the last entry
    repeats once the script runs out.  ``responder`` computes a response from
    the call arguments instead.
    """

    def __init__(
        self,
        responses: dict[ProviderRole, list[Response]] | None = None,
        responder: Responder | None = None,
        delay: float = 0.0,
    ) -> None:
        self.responses = {role: list(script) for role, script in (responses or {}).items()}
        self.responder = responder
        self.delay = delay
        self.calls: list[tuple[str, str, ProviderRole]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def provider_name(self, provider: ProviderRole | str) -> str:
        try:
            return PROVIDER_NAMES[ProviderRole(provider)]
        except ValueError:
            raise InvalidProviderError(str(provider)) from None

    def calls_to(self, role: ProviderRole) -> list[tuple[str, str, ProviderRole]]:
        return [c for c in self.calls if c[2] is role]

    async def complete(self, instruction: str, body: str, provider: ProviderRole | str) -> str:
        self.provider_name(provider)
        role = ProviderRole(provider)
        self.calls.append((instruction, body, role))

        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
        finally:
            self.in_flight -= 1

        if self.responder is not None:
            result = self.responder(instruction, body, role)
        else:
            script = self.responses[role]
            result = script.pop(0) if len(script) > 1 else script[0]
        if isinstance(result, Exception):
            raise result
        return result


class SleepRecorder:
    """Async sleep replacement that records delays without waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)

    @property
    def total(self) -> float:
        return sum(self.delays)


@pytest.fixture
def make_client() -> Callable[..., FakeCompletionClient]:
    def factory(**kwargs: Any) -> FakeCompletionClient:
        return FakeCompletionClient(**kwargs)

    return factory


@pytest.fixture
def recorded_sleep() -> SleepRecorder:
    return SleepRecorder()
