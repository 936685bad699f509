import asyncio
import re
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

import aiosmtplib
from pydantic import BaseModel

from medscribe.config.settings import config_settings
from medscribe.notifications.constants import logger


class OutgoingEmail(BaseModel):
    to: str
    subject: str
    html: str
    text: Optional[str] = None


class EmailDeliveryError(Exception):
    pass


class Mailer:
    async def send(self, message: OutgoingEmail) -> None:
        raise NotImplementedError


class SmtpMailer(Mailer):
    """Sends multipart (text + html) mail over SMTP on the event loop."""

    def __init__(self, host: str, port: int, *, username: Optional[str] = None, password: Optional[str] = None,
                 use_tls: bool = False, start_tls: bool = True, timeout: float = 15.0,
                 sender: str, sender_name: Optional[str] = None):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.start_tls = start_tls
        self.timeout = timeout
        self.sender = formataddr((sender_name, sender)) if sender_name else sender

    def build_message(self, message: OutgoingEmail) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.sender
        msg["To"] = message.to
        msg["Subject"] = message.subject
        msg.set_content(message.text or html_to_text(message.html))
        msg.add_alternative(message.html, subtype="html")
        return msg

    async def send(self, message: OutgoingEmail) -> None:
        msg = self.build_message(message)
        try:
            await aiosmtplib.send(
                msg,
                hostname=self.host,
                port=self.port,
                username=self.username,
                password=self.password,
                use_tls=self.use_tls,
                start_tls=self.start_tls,
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as exc:
            logger.error("email.send.timeout", extra={"email": message.to, "subject": message.subject,
                                                      "timeout": self.timeout})
            raise EmailDeliveryError(f"SMTP timed out after {self.timeout}s") from exc
        except (aiosmtplib.SMTPException, OSError) as exc:
            logger.error("email.send.failed", extra={"email": message.to, "subject": message.subject, "reason": repr(exc)})
            raise EmailDeliveryError(str(exc) or exc.__class__.__name__) from exc

        logger.info("email.send.success", extra={"email": message.to, "subject": message.subject})


def html_to_text(html: str) -> str:
    return re.sub(r"<[^>]*>", "", html)


def create_mailer() -> SmtpMailer:
    return SmtpMailer(
        config_settings.SMTP_HOST,
        config_settings.SMTP_PORT,
        username=config_settings.SMTP_USER,
        password=config_settings.SMTP_PASSWORD,
        use_tls=config_settings.SMTP_USE_TLS,
        start_tls=config_settings.SMTP_USE_STARTTLS,
        timeout=config_settings.SMTP_TIMEOUT_SECONDS,
        sender=config_settings.EMAIL_FROM,
        sender_name=config_settings.EMAIL_FROM_NAME,
    )
