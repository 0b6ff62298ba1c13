"""HTTP client wrapper for the Meeting Notes Summarizer FastAPI backend."""

from __future__ import annotations

import os

import httpx
import streamlit as st

API_URL = os.getenv("API_URL", "http://localhost:3001")


def check_health() -> bool:
    """Return True if the API server responds to /health."""
    try:
        r = httpx.get(f"{API_URL}/health", timeout=5.0)
        return r.status_code == 200
    except httpx.ConnectError:
        return False


def _error_detail(e: httpx.HTTPError) -> str:
    if isinstance(e, httpx.HTTPStatusError):
        try:
            return str(e.response.json().get("detail", e))
        except ValueError:
            return str(e)
    return str(e)


def summarize_transcript(transcript: str, prompt: str) -> str | None:
    """Request a summary; returns None (after showing an error) on failure."""
    try:
        # chunked summaries with retries can take minutes
        r = httpx.post(
            f"{API_URL}/summarize",
            json={"transcript": transcript, "prompt": prompt},
            timeout=300.0,
        )
        r.raise_for_status()
        return r.json()["summary"]  # type: ignore[no-any-return]
    except httpx.HTTPError as e:
        st.error(f"Summarization failed: {_error_detail(e)}")
        return None


def share_summary(summary: str, recipients: list[str]) -> bool:
    """Email the summary to recipients; returns True on success."""
    try:
        r = httpx.post(
            f"{API_URL}/share",
            json={"summary": summary, "recipients": recipients},
            timeout=60.0,
        )
        r.raise_for_status()
        return True
    except httpx.HTTPError as e:
        st.error(f"Sharing failed: {_error_detail(e)}")
        return False


def parse_recipients(raw: str) -> list[str]:
    """Split a comma/semicolon/newline separated address list."""
    parts = raw.replace(";", ",").replace("\n", ",").split(",")
    return [p.strip() for p in parts if p.strip()]
