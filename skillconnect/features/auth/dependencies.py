from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from skillconnect.features.auth.services.auth_service import AuthService
from skillconnect.features.auth.services.email_service import EmailSender, get_email_sender
from skillconnect.features.auth.services.user_service import UserRepository
from skillconnect.features.auth.services.verification_service import VerificationCodeManager
from skillconnect.platform.config import settings
from skillconnect.platform.db.session import get_db


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_verification_manager(
    users: UserRepository = Depends(get_user_repository),
    email_sender: EmailSender = Depends(get_email_sender),
) -> VerificationCodeManager:
    return VerificationCodeManager(
        users,
        email_sender,
        ttl_minutes=settings.VERIFICATION_CODE_TTL_MINUTES,
        resend_cooldown_seconds=settings.VERIFICATION_RESEND_COOLDOWN_SECONDS,
    )


def get_auth_service(
    users: UserRepository = Depends(get_user_repository),
    verification: VerificationCodeManager = Depends(get_verification_manager),
) -> AuthService:
    return AuthService(users, verification)
