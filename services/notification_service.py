import html
import logging
import os
from typing import Optional, Protocol

import httpx

from schemas.contact import ContactMessage, NotificationResult


logger = logging.getLogger(__name__)

FORMSUBMIT_URL = "https://formsubmit.co/ajax"
RESEND_URL = "https://api.resend.com/emails"


class NotificationSender(Protocol):
    async def send(self, message: ContactMessage) -> NotificationResult:
        ...


def get_contact_recipient() -> str:
    recipient = os.getenv("CONTACT_RECIPIENT")
    if not recipient:
        raise ValueError("Missing CONTACT_RECIPIENT environment variable")
    return recipient


def get_resend_settings():
    api_key = os.getenv("RESEND_API_KEY")
    from_email = os.getenv("RESEND_FROM_EMAIL")

    if not api_key or not from_email:
        raise ValueError("Missing Resend environment variables")

    return api_key, from_email


def build_email_subject(message: ContactMessage) -> str:
    return f"New Message from {message.name}: {message.subject}"


def build_email_html(message: ContactMessage) -> str:
    body = html.escape(message.message).replace("\n", "<br>")
    return (
        "<h2>New Contact Form Submission</h2>"
        f"<p><strong>Name:</strong> {html.escape(message.name)}</p>"
        f"<p><strong>Email:</strong> {html.escape(message.email)}</p>"
        f"<p><strong>Subject:</strong> {html.escape(message.subject)}</p>"
        "<p><strong>Message:</strong></p>"
        f"<p>{body}</p>"
    )


class LogNotificationSender:
    """Logs the submission instead of delivering it."""

    async def send(self, message: ContactMessage) -> NotificationResult:
        logger.info(
            "Contact message from %s <%s>: %s",
            message.name,
            message.email,
            message.subject,
        )
        return NotificationResult(success=True, message="Email sent successfully")


class FormSubmitSender:
    """Relays the submission through formsubmit.co's AJAX endpoint."""

    def __init__(
        self,
        recipient: str,
        timeout: float = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.recipient = recipient
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: ContactMessage) -> NotificationResult:
        url = f"{FORMSUBMIT_URL}/{self.recipient}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, headers=headers, json=message.model_dump())
        except httpx.HTTPError as exc:
            logger.exception("formsubmit relay error")
            return NotificationResult(success=False, message=f"Relay error: {exc}")

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning("formsubmit relay failed: %s", response.status_code)
            return NotificationResult(success=False, message=f"Relay responded with {response.status_code}")
        return NotificationResult(success=True, message="Email sent successfully")


class ResendSender:
    """Delivers the submission as an HTML email through the Resend API."""

    def __init__(
        self,
        api_key: str,
        from_email: str,
        recipient: str,
        timeout: float = 5,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.from_email = from_email
        self.recipient = recipient
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: ContactMessage) -> NotificationResult:
        payload = {
            "from": self.from_email,
            "to": [self.recipient],
            "reply_to": message.email,
            "subject": build_email_subject(message),
            "html": build_email_html(message),
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(RESEND_URL, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            logger.exception("Resend delivery error")
            return NotificationResult(success=False, message=f"Delivery error: {exc}")

        if response.status_code < 200 or response.status_code >= 300:
            logger.warning("Resend delivery failed: %s", response.status_code)
            return NotificationResult(success=False, message=f"Resend responded with {response.status_code}")
        return NotificationResult(success=True, message="Email sent successfully")


def get_notification_sender() -> NotificationSender:
    backend = (os.getenv("NOTIFICATION_BACKEND") or "log").strip().lower()
    if backend == "log":
        return LogNotificationSender()
    if backend == "formsubmit":
        return FormSubmitSender(get_contact_recipient())
    if backend == "resend":
        api_key, from_email = get_resend_settings()
        return ResendSender(api_key, from_email, get_contact_recipient())
    raise ValueError(f"Unsupported NOTIFICATION_BACKEND: {backend}")
