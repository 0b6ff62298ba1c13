"""Top-level summarization: route by transcript size to direct or chunked summarization."""

from __future__ import annotations

import logging

from src.config import Settings, settings
from src.pipeline_config import SummarizationConfig
from src.summarization.chunking import summarize_chunked
from src.summarization.errors import SummarizationFailedError
from src.summarization.fallback import summarize_with_fallback
from src.summarization.models import CompletionOutcome
from src.summarization.providers import CompletionClient, ProviderClient
from src.summarization.retry import Sleep

logger = logging.getLogger(__name__)


class Summarizer:
    """Summarizes transcripts with a primary/secondary provider pair.

    Transcripts longer than ``config.chunk_threshold_chars`` characters go
    through chunked map-reduce on the primary provider; everything else is a
    single request with fallback to the secondary.  Holds no per-call state.
    """

    def __init__(
        self,
        client: CompletionClient,
        config: SummarizationConfig | None = None,
        *,
        sleep: Sleep | None = None,
    ) -> None:
        self.client = client
        self.config = config or SummarizationConfig()
        self._sleep = sleep

    def needs_chunking(self, transcript: str) -> bool:
        return len(transcript) > self.config.chunk_threshold_chars

    async def summarize_outcome(self, transcript: str, instruction: str) -> CompletionOutcome:
        if self.needs_chunking(transcript):
            logger.info(
                "Transcript is %d characters (> %d); using chunked summarization",
                len(transcript),
                self.config.chunk_threshold_chars,
            )
            return await summarize_chunked(
                self.client, transcript, instruction, self.config, sleep=self._sleep
            )
        return await summarize_with_fallback(
            self.client, transcript, instruction, self.config.retry, sleep=self._sleep
        )

    async def summarize(self, transcript: str, instruction: str) -> str:
        """Return the final summary text.

        Raises:
            SummarizationFailedError: Whatever went wrong underneath, chained
                as ``__cause__``.
        """
        outcome = await self.summarize_outcome(transcript, instruction)
        if outcome.ok:
            return outcome.text  # type: ignore[return-value]

        if isinstance(outcome.error, SummarizationFailedError):
            raise outcome.error
        raise SummarizationFailedError("Failed to generate summary.") from outcome.error


def build_summarizer(app_settings: Settings | None = None) -> Summarizer:
    """Create a Summarizer wired to the configured Groq and OpenAI providers."""
    app_settings = app_settings or settings
    client = ProviderClient(
        app_settings.provider_configs(),
        timeout=app_settings.request_timeout,
    )
    return Summarizer(client, app_settings.summarization_config())
