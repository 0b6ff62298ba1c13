"""Data models for the summarization pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from src.pipeline_config import ProviderRole
from src.summarization.errors import SummarizationError, SummarizationFailedError


@dataclass(frozen=True)
class ProviderConfig:
    """Connection details for one OpenAI-compatible chat-completions provider."""

    name: str  # "groq", "openai"
    role: ProviderRole
    endpoint_url: str
    api_key: str
    model: str
    temperature: float = 0.5


@dataclass(frozen=True)
class Chunk:
    """A contiguous, word-bounded slice of a transcript."""

    index: int
    content: str
    word_count: int


@dataclass(frozen=True)
class CompletionOutcome:
    """Result of a (possibly retried) provider call.

    Exactly one of ``text`` and ``error`` is set.
    """

    provider: str
    text: str | None = None
    error: SummarizationError | None = None
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None

    def unwrap(self) -> str:
        """Return the generated text or raise the carried error."""
        if self.ok:
            return self.text  # type: ignore[return-value]
        if self.error is not None:
            raise self.error
        raise SummarizationFailedError(f"No output from {self.provider}")
