"""
Email Service Module

Outbound email for interview invitations. Messages are plain text with the
interview link appended, sent over SMTP.

When SMTP credentials are not configured the message is logged instead of
sent, which keeps local development usable without a mail server.

Dependencies:
- smtplib / email: For building and sending messages.
- asyncio: For running the blocking SMTP session off the event loop.
- loguru: For logging operations.
- auriter.errors.exceptions: For EmailDeliveryError.

"""
import asyncio
import os
import smtplib
from email.message import EmailMessage
from typing import Optional, Protocol
from loguru import logger
from auriter.errors.exceptions import EmailDeliveryError


class EmailSender(Protocol):
    async def send_email(self, to: str, subject: str, text: str, link: Optional[str] = None) -> None:
        ...


class SmtpEmailSender:
    def __init__(self, host: Optional[str] = None, port: Optional[int] = None,
                 user: Optional[str] = None, password: Optional[str] = None,
                 from_address: Optional[str] = None):
        self.host = host or os.getenv("SMTP_HOST", "smtp.gmail.com")
        self.port = port or int(os.getenv("SMTP_PORT", "587"))
        self.user = user if user is not None else os.getenv("SMTP_USER", "")
        self.password = password if password is not None else os.getenv("SMTP_PASSWORD", "")
        self.from_address = from_address or os.getenv("EMAIL_FROM") or self.user

    def build_message(self, to: str, subject: str, text: str, link: Optional[str] = None) -> EmailMessage:
        body = f"{text}\n\nJoin here: {link}" if link else text
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.from_address
        msg["To"] = to
        msg.set_content(body)
        return msg

    def _deliver(self, msg: EmailMessage) -> None:
        if self.port == 465:
            with smtplib.SMTP_SSL(self.host, self.port) as server:
                server.login(self.user, self.password)
                server.send_message(msg)
        else:
            with smtplib.SMTP(self.host, self.port) as server:
                server.starttls()
                server.login(self.user, self.password)
                server.send_message(msg)

    async def send_email(self, to: str, subject: str, text: str, link: Optional[str] = None) -> None:
        msg = self.build_message(to, subject, text, link)

        if not self.user or not self.password:
            logger.warning(f"[EMAIL STUB] SMTP not configured. To: {to} | Subject: {subject}")
            logger.debug(f"[EMAIL STUB] Body: {msg.get_content()[:200]}...")
            return

        try:
            await asyncio.to_thread(self._deliver, msg)
            logger.info(f"Email sent to {to}: {subject}")
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to}: {e}")
            raise EmailDeliveryError(f"Failed to send email to {to}") from e
