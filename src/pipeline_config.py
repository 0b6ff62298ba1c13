"""Pipeline configuration: provider roles, retry policy and SummarizationConfig."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ProviderRole(StrEnum):
    """Which slot an LLM provider fills in the fallback chain."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded exponential backoff shared by every provider call.

    The delay after failed attempt ``n`` (0-based) is ``base_delay * 2**n``,
    so the default schedule is 1, 2, 4, 8, 16 seconds.
    """

    max_attempts: int = 5
    base_delay: float = 1.0

    def delay_for(self, attempt: int) -> float:
        return self.base_delay * (2**attempt)


@dataclass(frozen=True)
class SummarizationConfig:
    """Immutable knobs for the summarization pipeline.

    Word count stands in for token count: ``chunk_word_budget`` words per chunk,
    and transcripts longer than ``chars_per_word`` times that many characters
    go through the chunked path.
    """

    chunk_word_budget: int = 8000
    chars_per_word: int = 4
    max_concurrent_chunks: int = 0  # 0 = no limit
    retry: RetryPolicy = field(default_factory=RetryPolicy)

    @property
    def chunk_threshold_chars(self) -> int:
        return self.chunk_word_budget * self.chars_per_word
