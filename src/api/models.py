"""Pydantic request/response schemas for the Meeting Notes Summarizer API."""

from __future__ import annotations

from pydantic import BaseModel


class SummarizeRequest(BaseModel):
    """Request body for the /summarize endpoint."""

    transcript: str
    prompt: str


class SummarizeResponse(BaseModel):
    """Response body for the /summarize endpoint."""

    summary: str


class ShareRequest(BaseModel):
    """Request body for the /share endpoint."""

    summary: str
    recipients: list[str]


class ShareResponse(BaseModel):
    """Response body for the /share endpoint."""

    message: str
