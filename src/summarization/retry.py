"""Bounded exponential-backoff retry around a single provider call."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from src.pipeline_config import ProviderRole, RetryPolicy
from src.summarization.errors import (
    InvalidProviderError,
    ProviderError,
    RateLimitedError,
    RetriesExhaustedError,
)
from src.summarization.models import CompletionOutcome
from src.summarization.providers import CompletionClient

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


async def complete_with_retry(
    client: CompletionClient,
    instruction: str,
    body: str,
    provider: ProviderRole | str,
    policy: RetryPolicy | None = None,
    *,
    sleep: Sleep = asyncio.sleep,
) -> CompletionOutcome:
    """Call ``client.complete`` until it succeeds or the attempt budget runs out.

    Rate limiting (429) and every other provider error draw on the same
    counter.  After failed attempt ``n`` the task suspends for
    ``policy.delay_for(n)`` seconds, including after the last attempt.

    Returns:
        A successful outcome with the generated text, or a failed outcome
        carrying :class:`RetriesExhaustedError` (or
        :class:`InvalidProviderError`, which is never retried).
    """
    policy = policy or RetryPolicy()
    try:
        name = client.provider_name(provider)
    except InvalidProviderError as exc:
        return CompletionOutcome(provider=str(provider), error=exc)

    last_error: ProviderError | None = None
    for attempt in range(policy.max_attempts):
        try:
            text = await client.complete(instruction, body, provider)
        except ProviderError as exc:
            last_error = exc
            delay = policy.delay_for(attempt)
            if isinstance(exc, RateLimitedError):
                logger.warning("Rate limit exceeded on %s. Retrying in %g seconds...", name, delay)
            else:
                logger.error("Error calling %s API: %s", name, exc)
                logger.error("An error occurred. Retrying in %g seconds...", delay)
            await sleep(delay)
            continue
        return CompletionOutcome(provider=name, text=text, attempts=attempt + 1)

    return CompletionOutcome(
        provider=name,
        error=RetriesExhaustedError(name, policy.max_attempts, last_error),
        attempts=policy.max_attempts,
    )
