"""Error taxonomy for provider calls and the summarization pipeline."""

from __future__ import annotations


class SummarizationError(Exception):
    """Base class for every error raised by the summarization core."""


class InvalidProviderError(SummarizationError):
    """An unknown provider id was requested. Never retried."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Invalid AI provider specified: {provider!r}")
        self.provider = provider


class ProviderError(SummarizationError):
    """A single provider attempt failed. Retried by the retry controller."""

    def __init__(self, message: str, provider: str) -> None:
        super().__init__(message)
        self.provider = provider


class ApiError(ProviderError):
    """The provider answered with a non-2xx status other than 429."""

    def __init__(self, status_code: int, provider: str) -> None:
        super().__init__(
            f"API call failed with status: {status_code} from {provider} API", provider
        )
        self.status_code = status_code


class RateLimitedError(ProviderError):
    """The provider answered with HTTP 429."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Rate limit exceeded on {provider} API", provider)
        self.status_code = 429


class MalformedResponseError(ProviderError):
    """A 2xx response without ``choices[0].message.content``."""

    def __init__(self, provider: str) -> None:
        super().__init__(f"Invalid API response from {provider}: No content found.", provider)


class ProviderTransportError(ProviderError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class RetriesExhaustedError(SummarizationError):
    """The attempt budget for one provider ran out without a success."""

    def __init__(
        self, provider: str, attempts: int, last_error: Exception | None = None
    ) -> None:
        super().__init__(
            f"Failed to generate summary after {attempts} attempts with {provider}."
        )
        self.provider = provider
        self.attempts = attempts
        self.last_error = last_error


class SummarizationFailedError(SummarizationError):
    """Terminal failure surfaced to the endpoint layer."""
