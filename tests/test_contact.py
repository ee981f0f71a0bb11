"""
Contact form validation, submission outcomes and the notification senders.
"""
import json
import urllib.parse

import httpx
import pytest

from factories import RaisingSender, RecordingSender, make_message
from schemas.contact import ContactMessage, NotificationResult
from services.contact_service import (
    FAILURE_MESSAGE,
    TIMEOUT_MESSAGE,
    ContactService,
    build_mailto_link,
    validate_contact_form,
)
from services.notification_service import (
    FormSubmitSender,
    LogNotificationSender,
    ResendSender,
    build_email_html,
    get_notification_sender,
)


class TestValidation:
    def test_valid_form_has_no_errors(self):
        assert validate_contact_form(make_message()) == {}

    def test_missing_fields_reported_per_field(self):
        errors = validate_contact_form(ContactMessage())
        assert errors == {
            "name": "Please enter your name",
            "email": "Please enter your email",
            "subject": "Please enter a subject",
            "message": "Please enter your message",
        }

    def test_null_fields_treated_as_empty(self):
        message = ContactMessage(name=None, email=None, subject="Hi", message=None)
        assert (message.name, message.email, message.message) == ("", "", "")
        assert set(validate_contact_form(message)) == {"name", "email", "message"}

    def test_whitespace_only_counts_as_missing(self):
        errors = validate_contact_form(make_message(name="   ", subject="\t"))
        assert set(errors) == {"name", "subject"}

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.d", "@example.com", "a@@b.c"])
    def test_invalid_email(self, email):
        errors = validate_contact_form(make_message(email=email))
        assert errors == {"email": "Please enter a valid email address"}

    def test_short_message(self):
        errors = validate_contact_form(make_message(message="hi there"))
        assert errors == {"message": "Message must be at least 10 characters long"}


class TestMailtoFallback:
    def test_prefilled_link(self):
        link = build_mailto_link("owner@example.com", make_message(subject="Hi & bye"))
        assert link.startswith("mailto:owner@example.com?")
        query = urllib.parse.parse_qs(link.split("?", 1)[1])
        assert query["subject"] == ["Hi & bye"]
        assert query["body"][0].startswith("Name: Ada Lovelace\nEmail: ada@example.com\n\n")
        assert "+" not in link


class TestContactService:
    @pytest.mark.anyio
    async def test_invalid_email_never_reaches_sender(self):
        sender = RecordingSender()
        service = ContactService(sender, "owner@example.com")
        result = await service.submit(make_message(email="not-an-email"))
        assert not result.success
        assert "email" in result.errors
        assert sender.sent == []
        assert result.fallbackMailto is None

    @pytest.mark.anyio
    async def test_success_sends_trimmed_message(self):
        sender = RecordingSender()
        service = ContactService(sender, "owner@example.com")
        result = await service.submit(make_message(name="  Ada  "))
        assert result.success
        assert sender.sent[0].name == "Ada"

    @pytest.mark.anyio
    async def test_sender_failure_offers_fallback(self):
        sender = RecordingSender(result=NotificationResult(success=False, message="down"))
        service = ContactService(sender, "owner@example.com")
        form = make_message()
        result = await service.submit(form)
        assert not result.success
        assert result.message == FAILURE_MESSAGE
        assert result.fallbackMailto.startswith("mailto:owner@example.com")
        assert result.submission == form
        assert not result.timedOut

    @pytest.mark.anyio
    async def test_sender_exception_offers_fallback(self):
        service = ContactService(RaisingSender(), "owner@example.com")
        result = await service.submit(make_message())
        assert not result.success
        assert result.fallbackMailto

    @pytest.mark.anyio
    async def test_timeout_offers_fallback(self):
        sender = RecordingSender(delay=1.0)
        service = ContactService(sender, "owner@example.com", timeout=0.05)
        result = await service.submit(make_message())
        assert not result.success
        assert result.timedOut
        assert result.message == TIMEOUT_MESSAGE
        assert len(sender.sent) == 1


class TestSenders:
    @pytest.mark.anyio
    async def test_formsubmit_posts_json(self):
        captured = {}

        def handler(request):
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": "true"})

        sender = FormSubmitSender("owner@example.com", transport=httpx.MockTransport(handler))
        result = await sender.send(make_message())
        assert result.success
        assert captured["url"] == "https://formsubmit.co/ajax/owner@example.com"
        assert captured["body"]["email"] == "ada@example.com"

    @pytest.mark.anyio
    async def test_formsubmit_non_2xx_fails(self):
        sender = FormSubmitSender(
            "owner@example.com",
            transport=httpx.MockTransport(lambda request: httpx.Response(503)),
        )
        result = await sender.send(make_message())
        assert not result.success

    @pytest.mark.anyio
    async def test_resend_uses_bearer_key(self):
        captured = {}

        def handler(request):
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"id": "email_1"})

        sender = ResendSender(
            "re_key",
            "noreply@example.com",
            "owner@example.com",
            transport=httpx.MockTransport(handler),
        )
        result = await sender.send(make_message())
        assert result.success
        assert captured["auth"] == "Bearer re_key"
        assert captured["body"]["to"] == ["owner@example.com"]
        assert captured["body"]["subject"] == "New Message from Ada Lovelace: Collaboration"

    @pytest.mark.anyio
    async def test_resend_transport_error_fails(self):
        def handler(request):
            raise httpx.ConnectTimeout("slow", request=request)

        sender = ResendSender("k", "f@example.com", "o@example.com", transport=httpx.MockTransport(handler))
        result = await sender.send(make_message())
        assert not result.success

    @pytest.mark.anyio
    async def test_log_sender_succeeds(self):
        result = await LogNotificationSender().send(make_message())
        assert result.success

    def test_html_is_escaped(self):
        rendered = build_email_html(make_message(message="<b>hi</b>\nthere friend"))
        assert "&lt;b&gt;hi&lt;/b&gt;<br>there friend" in rendered

    def test_backend_selection(self, monkeypatch):
        monkeypatch.delenv("NOTIFICATION_BACKEND", raising=False)
        assert isinstance(get_notification_sender(), LogNotificationSender)

        monkeypatch.setenv("NOTIFICATION_BACKEND", "formsubmit")
        monkeypatch.setenv("CONTACT_RECIPIENT", "owner@example.com")
        assert isinstance(get_notification_sender(), FormSubmitSender)

        monkeypatch.setenv("NOTIFICATION_BACKEND", "resend")
        monkeypatch.delenv("RESEND_API_KEY", raising=False)
        with pytest.raises(ValueError):
            get_notification_sender()

        monkeypatch.setenv("NOTIFICATION_BACKEND", "pigeon")
        with pytest.raises(ValueError):
            get_notification_sender()
