from skillconnect.features.auth.services.auth_service import AuthService
from skillconnect.features.auth.services.email_service import (
    EmailResult,
    get_email_sender,
    send_verification_email,
)
from skillconnect.features.auth.services.user_service import UserRepository
from skillconnect.features.auth.services.verification_service import VerificationCodeManager

__all__ = [
    "AuthService",
    "EmailResult",
    "UserRepository",
    "VerificationCodeManager",
    "get_email_sender",
    "send_verification_email",
]
