"""Share endpoint: email a finished summary to a list of recipients."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException

from src.api.models import ShareRequest, ShareResponse
from src.sharing.mailer import send_summary_email

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/share", response_model=ShareResponse)
async def share(request: ShareRequest) -> ShareResponse:
    """Email the summary to every recipient.

    Validation happens before any SMTP connection is attempted.
    """
    recipients = [r.strip() for r in request.recipients if r.strip()]
    if not request.summary.strip() or not recipients:
        raise HTTPException(
            status_code=400,
            detail="Summary and at least one recipient are required.",
        )

    try:
        await asyncio.to_thread(send_summary_email, request.summary, recipients)
    except Exception as exc:
        logger.exception("Error sharing summary")
        raise HTTPException(status_code=500, detail="Failed to share summary.") from exc

    return ShareResponse(message="Summary shared successfully.")
