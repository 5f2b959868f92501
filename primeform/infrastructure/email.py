"""Transactional email sent through SendGrid."""

from __future__ import annotations

import json
import logging
from html import escape
from typing import Any

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from primeform.config import get_settings

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome to PrimeForm - Let's Start Your Fitness Journey!"

_WELCOME_FEATURES = (
    ("Personalized Workouts", "plans tailored to your goals."),
    ("Nutrition Guidance", "meal plans that fuel your workouts."),
    ("Progress Tracking", "follow your journey in detail."),
    ("Achievement System", "unlock badges as you reach your goals."),
)


def _error_messages(body: Any) -> str | None:
    """Return the ``errors[].message`` entries of a SendGrid error body."""

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not body:
        return None
    try:
        payload = json.loads(body) if isinstance(body, str) else body
    except json.JSONDecodeError:
        return str(body).strip() or None

    errors = payload.get("errors") if isinstance(payload, dict) else None
    if not isinstance(errors, list):
        return None
    messages = [
        str(item["message"]) for item in errors if isinstance(item, dict) and item.get("message")
    ]
    return "; ".join(messages) or None


def _log_failure(recipient: str, status_code: Any, body: Any) -> None:
    details = _error_messages(body)
    if details:
        logger.error(
            "SendGrid rejected email to %s with status %s: %s", recipient, status_code, details
        )
    else:
        logger.error("SendGrid rejected email to %s with status %s", recipient, status_code)


def send_email(subject: str, html_content: str, recipient: str) -> bool:
    """Send an HTML email; return ``False`` when email is disabled or delivery fails."""

    settings = get_settings()
    if not (settings.sendgrid_api_key and settings.sendgrid_sender):
        logger.info("SendGrid is not configured; skipping email to %s", recipient)
        return False

    message = Mail(
        from_email=settings.sendgrid_sender,
        to_emails=recipient,
        subject=subject,
        html_content=html_content,
    )
    try:
        response = SendGridAPIClient(settings.sendgrid_api_key).send(message)
    except Exception as exc:
        # python-http-client raises HTTPError subclasses carrying status_code and body.
        status_code = getattr(exc, "status_code", None)
        if status_code is None:
            logger.exception("Error sending email to %s via SendGrid", recipient)
        else:
            _log_failure(recipient, status_code, getattr(exc, "body", None))
        return False

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or not 200 <= status_code < 300:
        _log_failure(recipient, status_code, getattr(response, "body", None))
        return False
    return True


def render_welcome_email(full_name: str) -> str:
    features = "".join(
        f"<li><strong>{title}</strong>: {text}</li>" for title, text in _WELCOME_FEATURES
    )
    return (
        "<h1>Welcome to PrimeForm!</h1>"
        f"<p>Hello {escape(full_name or 'there')}!</p>"
        "<p>Congratulations on taking the first step towards a healthier, "
        "stronger you. We're thrilled to have you join the PrimeForm family.</p>"
        f"<ul>{features}</ul>"
        "<p>This is an automated email. Please do not reply.</p>"
    )


def send_welcome_email(email: str, full_name: str) -> bool:
    """Send the welcome email that greets a newly registered user."""

    return send_email(WELCOME_SUBJECT, render_welcome_email(full_name), email)


__all__ = ["render_welcome_email", "send_email", "send_welcome_email"]
