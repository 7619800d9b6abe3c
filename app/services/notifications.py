import asyncio
import logging
from email.message import EmailMessage
from email.utils import formataddr

import aiosmtplib
from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.core.config import settings
from app.core.templates import TEMPLATES_DIR

logger = logging.getLogger(__name__)

# Global Jinja2 Environment for caching and security
_jinja_env = None

def get_jinja_env():
    global _jinja_env
    if _jinja_env is None:
        _jinja_env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(['html', 'xml'])
        )
    return _jinja_env

def smtp_configured() -> bool:
    return bool(settings.SMTP_SERVER and settings.SMTP_USERNAME)

async def _send_smtp_message(message: EmailMessage, to_email: str):
    """Helper to send email with robust configuration (TLS/SSL/Timeout)."""
    try:
        await aiosmtplib.send(
            message,
            hostname=settings.SMTP_SERVER,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            start_tls=settings.SMTP_USE_STARTTLS,
            timeout=settings.SMTP_TIMEOUT
        )
        logger.info(f"SUCCESS: Email sent to {to_email}")
    except asyncio.TimeoutError:
        logger.error(f"TIMEOUT: Failed to send email to {to_email} within {settings.SMTP_TIMEOUT}s")
        raise
    except aiosmtplib.SMTPException as e:
        logger.error(f"SMTP ERROR: Failed to send email to {to_email}: {e}")
        raise


class EmailSender:
    """Renders the email templates and delivers them over SMTP."""

    def __init__(self, sender_name: str = None):
        self.sender_name = sender_name or settings.APP_NAME

    def build_message(self, to_email: str, subject: str, template_name: str, context: dict) -> EmailMessage:
        template = get_jinja_env().get_template(f"email/{template_name}.html")
        html_content = template.render(app_name=settings.APP_NAME, **context)

        message = EmailMessage()
        message["From"] = formataddr((self.sender_name, settings.SMTP_FROM_EMAIL or settings.SMTP_USERNAME))
        message["To"] = to_email
        message["Subject"] = subject
        message.set_content(context.get("text") or "Please enable HTML to view this email.")
        message.add_alternative(html_content, subtype='html')
        return message

    async def send_otp(self, to_email: str, code: str, expiry_minutes: int):
        if not smtp_configured():
            logger.warning(f"SMTP not configured. Skipping OTP email to {to_email}.")
            return

        message = self.build_message(
            to_email,
            f"Your {settings.APP_NAME} login code",
            "otp",
            {
                "code": code,
                "expiry_minutes": expiry_minutes,
                "text": f"Your login code is {code}. It expires in {expiry_minutes} minutes.",
            },
        )
        await _send_smtp_message(message, to_email)

    async def send_welcome(self, to_email: str):
        if not smtp_configured():
            logger.warning(f"SMTP not configured. Skipping welcome email to {to_email}.")
            return

        message = self.build_message(
            to_email,
            f"Welcome to {settings.APP_NAME}",
            "welcome",
            {"email": to_email, "text": f"Welcome to {settings.APP_NAME}!"},
        )
        await _send_smtp_message(message, to_email)


_email_sender = EmailSender()

def get_email_sender() -> EmailSender:
    return _email_sender
