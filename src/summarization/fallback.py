"""Primary -> secondary provider fallback for transcripts that fit in one request."""

from __future__ import annotations

import logging

from src.pipeline_config import ProviderRole, RetryPolicy
from src.summarization.errors import SummarizationFailedError
from src.summarization.models import CompletionOutcome
from src.summarization.prompts import direct_instruction
from src.summarization.providers import CompletionClient
from src.summarization.retry import Sleep, complete_with_retry

logger = logging.getLogger(__name__)


async def summarize_with_fallback(
    client: CompletionClient,
    transcript: str,
    instruction: str,
    policy: RetryPolicy | None = None,
    *,
    sleep: Sleep | None = None,
) -> CompletionOutcome:
    """Summarize *transcript* with the primary provider, falling back to the secondary.

    Both providers get the same composite instruction and go through the
    same retry policy.  There is no further fallback after the secondary.
    """
    prompt = direct_instruction(instruction)
    retry_kwargs = {"sleep": sleep} if sleep is not None else {}

    primary = await complete_with_retry(
        client, prompt, transcript, ProviderRole.PRIMARY, policy, **retry_kwargs
    )
    if primary.ok:
        return primary

    logger.error(
        "%s API failed. Attempting with the secondary provider as a fallback... (%s)",
        primary.provider,
        primary.error,
    )
    secondary = await complete_with_retry(
        client, prompt, transcript, ProviderRole.SECONDARY, policy, **retry_kwargs
    )
    if secondary.ok:
        return secondary

    logger.error("%s API also failed. (%s)", secondary.provider, secondary.error)
    error = SummarizationFailedError(
        f"Failed to generate summary with both {primary.provider} and {secondary.provider} APIs."
    )
    error.__cause__ = secondary.error
    return CompletionOutcome(
        provider=secondary.provider,
        error=error,
        attempts=primary.attempts + secondary.attempts,
    )
