# Delivery of HR notification mails through the Gmail API.
# Author: NEA HR Engineering
# Date: 2025-07-04
# Version: 0.1.0

import base64
from email.header import Header
from email.mime.image import MIMEImage
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path
from typing import Optional

import httpx

from hr_assistant.core.config import get_settings
from hr_assistant.services.mail_log_store import mail_log_store
from hr_assistant.services.settings_store import settings_store
from hr_assistant.utils.logger import console

TOKEN_URL = "https://oauth2.googleapis.com/token"
SEND_URL = "https://gmail.googleapis.com/gmail/v1/users/me/messages/send"
LOGO_CONTENT_ID = "s2-logo"


class EmailDeliveryError(RuntimeError):
    """Raised when the Gmail API refuses the token request or the message."""


def build_raw_message(to: str, sender: str, subject: str, html_body: str,
                      logo_path: Optional[str] = None) -> str:
    """
    Builds a multipart/related HTML message and returns it base64url-encoded,
    as expected by the 'raw' field of messages.send.
    """
    message = MIMEMultipart("related")
    message["To"] = to
    message["From"] = sender
    message["Subject"] = Header(subject, "utf-8").encode()
    message.attach(MIMEText(html_body, "html", "utf-8"))

    if logo_path and Path(logo_path).is_file():
        logo = MIMEImage(Path(logo_path).read_bytes(), _subtype="png")
        logo.add_header("Content-ID", f"<{LOGO_CONTENT_ID}>")
        message.attach(logo)

    return base64.urlsafe_b64encode(message.as_bytes()).decode("ascii").rstrip("=")


class GmailNotifier:
    """
    Sends notification mails to the configured HR recipient. Every attempt is
    written to the mail log with status 'success' or 'failed'.
    """
    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def _access_token(self, client: httpx.AsyncClient) -> str:
        settings = get_settings()
        response = await client.post(TOKEN_URL, data={
            "client_id": settings.GOOGLE_CLIENT_ID or "",
            "client_secret": settings.GOOGLE_CLIENT_SECRET or "",
            "refresh_token": settings.GOOGLE_REFRESH_TOKEN or "",
            "grant_type": "refresh_token",
        })
        if response.status_code != 200:
            raise EmailDeliveryError(f"Token request failed: {response.text}")
        token = response.json().get("access_token")
        if not token:
            raise EmailDeliveryError("No access token received")
        return token

    async def send(self, subject: str, body: str) -> None:
        """
        Sends the mail and logs the outcome.
        Raises:
            EmailDeliveryError: when Google rejects the request.
            httpx.HTTPError: when Google cannot be reached.
        """
        settings = get_settings()
        recipient = (await settings_store.get_notification_settings()).notification_email
        console.info(f"Sending notification '{subject}' to {recipient or '<unset>'}")

        try:
            if not recipient:
                raise EmailDeliveryError("No notification email configured")

            raw = build_raw_message(
                to=recipient,
                sender=f"{settings.MAIL_SENDER_NAME} <{settings.GOOGLE_EMAIL or ''}>",
                subject=subject,
                html_body=body,
                logo_path=settings.MAIL_LOGO_PATH,
            )
            async with httpx.AsyncClient(transport=self._transport, timeout=30.0) as client:
                token = await self._access_token(client)
                response = await client.post(
                    SEND_URL,
                    headers={"Authorization": f"Bearer {token}"},
                    json={"raw": raw},
                )
                if response.status_code != 200:
                    raise EmailDeliveryError(f"Failed to send email: {response.text}")
        except (EmailDeliveryError, httpx.HTTPError):
            console.exception(f"Error sending notification '{subject}'")
            await mail_log_store.log(to=recipient or "Unknown", subject=subject, body=body, status="failed")
            raise

        await mail_log_store.log(to=recipient, subject=subject, body=body, status="success")
        console.success(f"Notification '{subject}' sent to {recipient}.")

gmail_notifier = GmailNotifier()
