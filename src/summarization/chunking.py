"""Word-budget chunking and map-reduce summarization of long transcripts."""

from __future__ import annotations

import asyncio
import logging
import re
from contextlib import AbstractAsyncContextManager, nullcontext

from src.pipeline_config import ProviderRole, SummarizationConfig
from src.summarization.errors import SummarizationFailedError
from src.summarization.models import Chunk, CompletionOutcome
from src.summarization.prompts import CHUNK_INSTRUCTION, CHUNK_SEPARATOR, combine_instruction
from src.summarization.providers import CompletionClient
from src.summarization.retry import Sleep, complete_with_retry

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\S+")


def split_into_chunks(transcript: str, max_words: int = 8000) -> list[Chunk]:
    """Split *transcript* into consecutive chunks of at most *max_words* words.

    Word count is a rough stand-in for token count.  Each chunk's content is
    the slice of the original transcript from its first word to its last, so
    the original spacing inside a chunk is kept.

    Args:
        transcript: Raw transcript text.
        max_words: Maximum words per chunk.

    Returns:
        Chunks in transcript order; empty if the transcript has no words.
    """
    if max_words < 1:
        raise ValueError(f"max_words must be at least 1, got {max_words}")

    chunks: list[Chunk] = []
    start: int | None = None
    end = 0
    count = 0

    for match in _WORD_RE.finditer(transcript):
        if count + 1 > max_words:
            chunks.append(Chunk(index=len(chunks), content=transcript[start:end], word_count=count))
            start = None
            count = 0
        if start is None:
            start = match.start()
        end = match.end()
        count += 1

    if count:
        chunks.append(Chunk(index=len(chunks), content=transcript[start:end], word_count=count))

    return chunks


async def summarize_chunked(
    client: CompletionClient,
    transcript: str,
    instruction: str,
    config: SummarizationConfig | None = None,
    *,
    sleep: Sleep | None = None,
) -> CompletionOutcome:
    """Summarize each chunk concurrently, then combine the partials in one final pass.

    Only the primary provider is used.  The fan-in waits for every chunk; if
    any chunk or the final pass fails, the outcome carries
    :class:`SummarizationFailedError` and no partial output is returned.
    """
    config = config or SummarizationConfig()
    retry_kwargs = {"sleep": sleep} if sleep is not None else {}

    chunks = split_into_chunks(transcript, config.chunk_word_budget)
    if not chunks:
        return CompletionOutcome(
            provider=str(ProviderRole.PRIMARY),
            error=SummarizationFailedError("Transcript contains no words to summarize."),
        )
    logger.info("Summarizing transcript in %d chunks", len(chunks))

    limiter: AbstractAsyncContextManager[object] = (
        asyncio.Semaphore(config.max_concurrent_chunks)
        if config.max_concurrent_chunks > 0
        else nullcontext()
    )

    async def summarize_chunk(chunk: Chunk) -> CompletionOutcome:
        async with limiter:
            return await complete_with_retry(
                client,
                CHUNK_INSTRUCTION,
                chunk.content,
                ProviderRole.PRIMARY,
                config.retry,
                **retry_kwargs,
            )

    # gather keeps results in chunk order
    partials = await asyncio.gather(*(summarize_chunk(c) for c in chunks))

    attempts = sum(p.attempts for p in partials)
    for chunk, partial in zip(chunks, partials, strict=True):
        if not partial.ok:
            logger.error("Chunk %d of %d failed: %s", chunk.index + 1, len(chunks), partial.error)
            error = SummarizationFailedError(
                f"Failed to summarize chunk {chunk.index + 1} of {len(chunks)}."
            )
            error.__cause__ = partial.error
            return CompletionOutcome(provider=partial.provider, error=error, attempts=attempts)

    combined = CHUNK_SEPARATOR.join(p.text or "" for p in partials)
    final = await complete_with_retry(
        client,
        combine_instruction(instruction),
        combined,
        ProviderRole.PRIMARY,
        config.retry,
        **retry_kwargs,
    )
    attempts += final.attempts
    if final.ok:
        return CompletionOutcome(provider=final.provider, text=final.text, attempts=attempts)

    logger.error("Final combine pass failed: %s", final.error)
    error = SummarizationFailedError("Failed to combine partial summaries.")
    error.__cause__ = final.error
    return CompletionOutcome(provider=final.provider, error=error, attempts=attempts)
