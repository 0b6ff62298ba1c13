"""Email delivery of finished summaries over SMTP."""

from __future__ import annotations

import html
import logging
import smtplib
from email.message import EmailMessage

from src.config import settings

logger = logging.getLogger(__name__)


def build_summary_email(
    summary: str,
    recipients: list[str],
    sender: str,
    subject: str = "Meeting Notes Summary",
) -> EmailMessage:
    """Build a plain-text email with an HTML alternative for *summary*.

    Raises:
        ValueError: If the summary is blank or there are no recipients.
    """
    if not summary.strip():
        raise ValueError("Summary must not be empty")
    if not recipients:
        raise ValueError("At least one recipient is required")

    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = ",".join(recipients)
    msg["Subject"] = subject
    msg.set_content(f"Hello,\n\nHere is the summary of the meeting notes:\n\n{summary}")

    body_html = html.escape(summary).replace("\n", "<br>")
    msg.add_alternative(
        f"<h3>{html.escape(subject)}</h3>"
        "<p>Hello,</p>"
        "<p>Here is the summary of the meeting notes:</p>"
        f"<p>{body_html}</p>",
        subtype="html",
    )
    return msg


def send_summary_email(summary: str, recipients: list[str]) -> None:
    """Send *summary* to *recipients* using the configured SMTP account.

    Blocking; call from a worker thread inside request handlers.
    """
    msg = build_summary_email(
        summary,
        recipients,
        sender=settings.email_service_user,
        subject=settings.email_subject,
    )
    with smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port) as smtp:
        smtp.login(settings.email_service_user, settings.email_service_pass)
        smtp.send_message(msg)
    logger.info("Shared summary with %d recipient(s)", len(recipients))
