"""Summarize endpoint: turn a transcript plus instruction into a summary."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from src.api.models import SummarizeRequest, SummarizeResponse
from src.summarization.orchestrator import Summarizer, build_summarizer

logger = logging.getLogger(__name__)

router = APIRouter()


def get_summarizer() -> Summarizer:
    """Return the Summarizer used by the endpoint (patched in tests)."""
    return build_summarizer()


@router.post("/summarize", response_model=SummarizeResponse)
async def summarize(request: SummarizeRequest) -> SummarizeResponse:
    """Summarize a transcript following the caller's instruction.

    Long transcripts are chunked and summarized piecewise; shorter ones fall
    back from Groq to OpenAI.  Failures return an opaque 500 so provider
    details and credentials never reach the caller.
    """
    if not request.transcript.strip() or not request.prompt.strip():
        raise HTTPException(status_code=400, detail="Transcript and prompt are required.")

    summarizer = get_summarizer()
    try:
        summary = await summarizer.summarize(request.transcript, request.prompt)
    except Exception as exc:
        logger.exception("Error generating summary")
        raise HTTPException(status_code=500, detail="Failed to generate summary.") from exc

    return SummarizeResponse(summary=summary)
