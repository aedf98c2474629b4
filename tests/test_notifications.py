"""
Tests for notification mails.

Verifies:
- HTML templates escape values and fill missing ones
- The MIME message handed to Gmail
- Gmail delivery logs every attempt, with httpx.MockTransport standing in for Google
- The Celery delivery task logs the outcome and closes its Redis client
"""
import base64
import json
from datetime import datetime
from email import message_from_bytes
from email.header import decode_header, make_header

import fakeredis
import httpx
import pytest
from fakeredis import aioredis as fake_aioredis

from hr_assistant import tasks
from hr_assistant.models.hr import MailLog
from hr_assistant.services import redis_client
from hr_assistant.services.email_templates import render_sick_email, render_vacation_email
from hr_assistant.services.gmail_notifier import (
    SEND_URL,
    TOKEN_URL,
    EmailDeliveryError,
    GmailNotifier,
    build_raw_message,
)
from hr_assistant.services.mail_log_store import mail_log_store
from hr_assistant.services.redis_client import set_redis
from hr_assistant.services.settings_store import settings_store

NOW = datetime(2025, 6, 29, 14, 5)


def test_sick_email_template():
    subject, body = render_sick_email("Maria Weber", "Grippe", None, "Attest folgt", now=NOW)

    assert subject == "Krankmeldung: Maria Weber"
    assert "Voraussichtliche Dauer</td><td class=\"info-value\">-</td>" in body
    assert "Attest folgt" in body
    assert "Gemeldet am: 29.06.2025, 14:05 Uhr" in body
    assert "#dc3545" in body
    assert "cid:s2-logo" in body


def test_vacation_email_template_escapes_values():
    subject, body = render_vacation_email("<b>Lars</b>", "Hochzeit & Feier", "2025-09-01", "2025-09-05", now=NOW)

    assert subject == "Urlaubsantrag: <b>Lars</b>"
    assert "&lt;b&gt;Lars&lt;/b&gt;" in body
    assert "Hochzeit &amp; Feier" in body
    assert "Zusätzliche Informationen" not in body
    assert "Eingereicht am" in body


def test_raw_message_is_base64url_mime():
    raw = build_raw_message("hr@nea.de", "NEA GmbH <bot@nea.de>", "Krankmeldung: Jörg", "<p>Hallo</p>")

    padded = raw + "=" * (-len(raw) % 4)
    parsed = message_from_bytes(base64.urlsafe_b64decode(padded))
    assert parsed["To"] == "hr@nea.de"
    assert parsed.get_content_type() == "multipart/related"
    assert str(make_header(decode_header(parsed["Subject"]))) == "Krankmeldung: Jörg"


def google(token_status=200, send_status=200):
    """Builds a mock transport and the list of requests it saw."""
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if str(request.url) == TOKEN_URL:
            return httpx.Response(token_status, json={"access_token": "tok"} if token_status == 200 else {"error": "invalid_grant"})
        if str(request.url) == SEND_URL:
            return httpx.Response(send_status, json={"id": "msg-1"})
        return httpx.Response(404)

    return httpx.MockTransport(handler), seen


@pytest.mark.asyncio
async def test_successful_delivery_is_logged():
    await settings_store.update_notification_email("hr@nea.de")
    transport, seen = google()

    await GmailNotifier(transport=transport).send("Krankmeldung: Maria Weber", "<p>Grippe</p>")

    assert [str(r.url) for r in seen] == [TOKEN_URL, SEND_URL]
    assert seen[1].headers["Authorization"] == "Bearer tok"
    assert "raw" in json.loads(seen[1].content)
    logs = await mail_log_store.recent()
    assert [(log.to, log.status) for log in logs] == [("hr@nea.de", "success")]


@pytest.mark.asyncio
async def test_rejected_token_is_logged_as_failed():
    await settings_store.update_notification_email("hr@nea.de")
    transport, seen = google(token_status=400)

    with pytest.raises(EmailDeliveryError):
        await GmailNotifier(transport=transport).send("Test", "<p>x</p>")

    assert len(seen) == 1
    assert [log.status for log in await mail_log_store.recent()] == ["failed"]


@pytest.mark.asyncio
async def test_rejected_message_is_logged_as_failed():
    await settings_store.update_notification_email("hr@nea.de")
    transport, _ = google(send_status=500)

    with pytest.raises(EmailDeliveryError):
        await GmailNotifier(transport=transport).send("Test", "<p>x</p>")

    assert [log.status for log in await mail_log_store.recent()] == ["failed"]


@pytest.mark.asyncio
async def test_missing_recipient_fails_without_calling_google():
    transport, seen = google()

    with pytest.raises(EmailDeliveryError):
        await GmailNotifier(transport=transport).send("Test", "<p>x</p>")

    assert seen == []
    logs = await mail_log_store.recent()
    assert [(log.to, log.status) for log in logs] == [("Unknown", "failed")]


def prepared_worker_redis(recipient=None):
    """A worker-side async client plus a sync view on the same in-memory server."""
    server = fakeredis.FakeServer()
    view = fakeredis.FakeRedis(server=server, decode_responses=True)
    if recipient:
        view.hset("settings:notifications", "notificationEmail", recipient)
    set_redis(fake_aioredis.FakeRedis(server=server, decode_responses=True))
    return view


def mail_logs(view):
    return [MailLog.model_validate_json(raw) for raw in view.hvals("mail_logs")]


def test_delivery_task_sends_logs_and_releases_redis(monkeypatch):
    view = prepared_worker_redis(recipient="hr@nea.de")
    transport, seen = google()
    monkeypatch.setattr(tasks.gmail_notifier, "_transport", transport)

    result = tasks.deliver_notification_email.apply(args=("Krankmeldung: Maria Weber", "<p>Grippe</p>"))

    assert result.get() is True
    assert [str(r.url) for r in seen] == [TOKEN_URL, SEND_URL]
    assert [(log.to, log.status) for log in mail_logs(view)] == [("hr@nea.de", "success")]
    assert redis_client._redis_client is None


def test_failed_delivery_task_still_releases_redis(monkeypatch):
    view = prepared_worker_redis()
    transport, seen = google()
    monkeypatch.setattr(tasks.gmail_notifier, "_transport", transport)

    result = tasks.deliver_notification_email.apply(args=("Test", "<p>x</p>"))

    assert result.failed()
    assert isinstance(result.result, EmailDeliveryError)
    assert seen == []
    assert [log.status for log in mail_logs(view)] == ["failed"]
    assert redis_client._redis_client is None
