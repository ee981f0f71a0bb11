import logging
import os
import re
import urllib.parse
from typing import Dict, Optional

import anyio

from schemas.contact import ContactMessage, ContactSubmissionResult
from services.notification_service import NotificationSender


logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_MESSAGE_LENGTH = 10
DEFAULT_TIMEOUT_SECONDS = 5.0

TIMEOUT_MESSAGE = (
    "The form is taking longer than expected. "
    "Please try sending an email directly or try again later."
)
FAILURE_MESSAGE = (
    "There was an error sending your message. "
    "Please try sending an email directly or try again later."
)
SUCCESS_MESSAGE = "Thank you for your message! I'll get back to you soon."
INVALID_MESSAGE = "Please correct the highlighted fields."


def get_contact_timeout() -> float:
    raw = os.getenv("CONTACT_TIMEOUT_SECONDS")
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Invalid CONTACT_TIMEOUT_SECONDS: {raw}")


def validate_contact_form(form: ContactMessage) -> Dict[str, str]:
    """Returns field name -> error text; empty when the form is valid."""
    form = form.stripped()
    errors: Dict[str, str] = {}

    if not form.name:
        errors["name"] = "Please enter your name"

    if not form.email:
        errors["email"] = "Please enter your email"
    elif not EMAIL_RE.match(form.email):
        errors["email"] = "Please enter a valid email address"

    if not form.subject:
        errors["subject"] = "Please enter a subject"

    if not form.message:
        errors["message"] = "Please enter your message"
    elif len(form.message) < MIN_MESSAGE_LENGTH:
        errors["message"] = f"Message must be at least {MIN_MESSAGE_LENGTH} characters long"

    return errors


def build_mailto_link(recipient: str, form: ContactMessage) -> str:
    body = f"Name: {form.name}\nEmail: {form.email}\n\n{form.message}"
    query = urllib.parse.urlencode(
        {"subject": form.subject, "body": body},
        quote_via=urllib.parse.quote,
    )
    return f"mailto:{recipient}?{query}"


class ContactService:
    def __init__(
        self,
        sender: NotificationSender,
        recipient: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.sender = sender
        self.recipient = recipient
        self.timeout = timeout

    async def submit(self, form: ContactMessage) -> ContactSubmissionResult:
        """
        Validates the form and makes a single delivery attempt.
        Validation failures never reach the sender; delivery failures and
        timeouts come back with a prefilled mailto fallback and the original
        input.
        """
        errors = validate_contact_form(form)
        if errors:
            return ContactSubmissionResult(
                success=False,
                message=INVALID_MESSAGE,
                errors=errors,
                submission=form,
            )

        cleaned = form.stripped()
        result = None
        with anyio.move_on_after(self.timeout):
            try:
                result = await self.sender.send(cleaned)
            except Exception:
                logger.exception("Notification sender raised")
                return self._failure(form, FAILURE_MESSAGE)

        if result is None:
            logger.warning("Notification sender timed out after %ss", self.timeout)
            return self._failure(form, TIMEOUT_MESSAGE, timed_out=True)

        if not result.success:
            logger.warning("Notification sender failed: %s", result.message)
            return self._failure(form, FAILURE_MESSAGE)

        return ContactSubmissionResult(success=True, message=SUCCESS_MESSAGE, submission=cleaned)

    def _failure(self, form: ContactMessage, message: str, timed_out: bool = False) -> ContactSubmissionResult:
        return ContactSubmissionResult(
            success=False,
            message=message,
            fallbackMailto=build_mailto_link(self.recipient, form.stripped()),
            submission=form,
            timedOut=timed_out,
        )
