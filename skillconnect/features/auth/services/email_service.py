from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import quote

from skillconnect.platform.config import settings
from skillconnect.platform.logger import get_logger
from skillconnect.platform.services.email import EmailDeliveryError, render_template, send_email

logger = get_logger(__name__)


@dataclass
class EmailResult:
    success: bool
    message: Optional[str] = None


EmailSender = Callable[[str, str, str], EmailResult]


def send_verification_email(to_email: str, user_name: str, code: str) -> EmailResult:
    """Render and deliver the verification-code email. Never raises on delivery failure."""
    body = render_template(
        "verification_email.html",
        {
            "user_name": user_name,
            "code": code,
            "expires_minutes": settings.VERIFICATION_CODE_TTL_MINUTES,
            "app_name": settings.APP_NAME,
            "verify_url": f"{settings.FRONTEND_URL.rstrip('/')}/verify/{quote(user_name)}",
        },
    )
    subject = f"{settings.APP_NAME} | Verification Code"

    try:
        send_email(to_email, subject, body)
    except EmailDeliveryError as e:
        logger.error(f"Failed to send verification email to {to_email}: {str(e)}")
        return EmailResult(success=False, message="Failed to send verification email")

    logger.info(f"Verification email sent to {to_email}")
    return EmailResult(success=True, message="Verification email sent successfully")


def get_email_sender() -> EmailSender:
    return send_verification_email
