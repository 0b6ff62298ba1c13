from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from src.pipeline_config import ProviderRole, RetryPolicy, SummarizationConfig
from src.summarization.models import ProviderConfig


class Settings(BaseSettings):
    """Application settings validated via Pydantic.

    Values are loaded from environment variables and/or a .env file.
    """

    # API Keys
    groq_api_key: str = ""
    openai_api_key: str = ""

    # LLM providers (both speak the OpenAI chat-completions protocol)
    groq_api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    openai_api_url: str = "https://api.openai.com/v1/chat/completions"
    groq_model: str = "llama3-8b-8192"
    openai_model: str = "gpt-3.5-turbo"
    llm_temperature: float = 0.5
    request_timeout: float = 60.0

    # Summarization pipeline
    chunk_word_budget: int = 8000
    chars_per_word: int = 4
    max_concurrent_chunks: int = 0
    max_retries: int = 5
    retry_base_delay: float = 1.0

    # Email sharing
    email_service_user: str = ""
    email_service_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    email_subject: str = "Meeting Notes Summary"

    # App config
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8501"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def provider_configs(self) -> list[ProviderConfig]:
        """Build the primary (Groq) and secondary (OpenAI) provider configs."""
        return [
            ProviderConfig(
                name="groq",
                role=ProviderRole.PRIMARY,
                endpoint_url=self.groq_api_url,
                api_key=self.groq_api_key,
                model=self.groq_model,
                temperature=self.llm_temperature,
            ),
            ProviderConfig(
                name="openai",
                role=ProviderRole.SECONDARY,
                endpoint_url=self.openai_api_url,
                api_key=self.openai_api_key,
                model=self.openai_model,
                temperature=self.llm_temperature,
            ),
        ]

    def summarization_config(self) -> SummarizationConfig:
        return SummarizationConfig(
            chunk_word_budget=self.chunk_word_budget,
            chars_per_word=self.chars_per_word,
            max_concurrent_chunks=self.max_concurrent_chunks,
            retry=RetryPolicy(
                max_attempts=self.max_retries,
                base_delay=self.retry_base_delay,
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Gracefully handles missing .env files (e.g. in CI/testing) by falling
    back to environment variables and defaults.
    """
    try:
        return Settings()
    except Exception:
        # If .env is missing or unreadable, build settings from env vars only.
        return Settings(_env_file=None)  # type: ignore[call-arg]


settings = get_settings()
