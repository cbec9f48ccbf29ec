import math
from datetime import datetime, timedelta
from typing import Callable, Optional

from fastapi.concurrency import run_in_threadpool

from skillconnect.features.auth.errors import VerificationError, VerificationErrorCode
from skillconnect.features.auth.models.user import User
from skillconnect.features.auth.schemas.verification import VerifyCodeRequest
from skillconnect.features.auth.services.email_service import EmailSender
from skillconnect.features.auth.services.user_service import UserRepository
from skillconnect.features.auth.utils.security import as_utc, generate_verification_code, utcnow
from skillconnect.platform.config import settings
from skillconnect.platform.logger import get_logger

logger = get_logger(__name__)

VERIFIED_MESSAGE = "Account verified successfully"
ALREADY_VERIFIED_MESSAGE = "Account is already verified"
RESENT_MESSAGE = "New verification code sent successfully"


class VerificationCodeManager:
    """
    Issues, checks and reissues the six-digit email verification code
    stored on a user account.

    A code and its expiry are always written in one save. A successful
    verify clears both. If delivery of a new code fails, the account's
    previous code and expiry are put back so an undelivered code never
    stays valid.
    """

    def __init__(
        self,
        users: UserRepository,
        email_sender: EmailSender,
        *,
        ttl_minutes: int = settings.VERIFICATION_CODE_TTL_MINUTES,
        resend_cooldown_seconds: int = settings.VERIFICATION_RESEND_COOLDOWN_SECONDS,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.users = users
        self.email_sender = email_sender
        self.ttl = timedelta(minutes=ttl_minutes)
        self.resend_cooldown = timedelta(seconds=resend_cooldown_seconds)
        self.clock = clock

    async def handle(self, request: VerifyCodeRequest) -> str:
        """Dispatch a verify-code request to verify or resend; returns the success message."""
        if request.action == "resend":
            await self.resend(request.decoded_user_name)
            return RESENT_MESSAGE
        return await self.verify(request.decoded_user_name, request.code)

    async def generate_and_send(self, user: User) -> str:
        previous_code = user.verification_code
        previous_expires = user.verification_code_expires

        code = generate_verification_code()
        user.verification_code = code
        user.verification_code_expires = self.clock() + self.ttl
        await self.users.save(user)

        try:
            result = await run_in_threadpool(self.email_sender, user.email, user.user_name, code)
        except Exception:
            await self._restore_code(user, previous_code, previous_expires)
            raise

        if not result.success:
            await self._restore_code(user, previous_code, previous_expires)
            logger.error(f"Verification code delivery failed - user: {user.id}, message: {result.message}")
            raise VerificationError(VerificationErrorCode.DELIVERY_FAILED, result.message)

        logger.info(f"Verification code issued - user: {user.id}")
        return code

    async def verify(self, user_name: str, code: Optional[str]) -> str:
        user = await self._get_user(user_name)

        if not code:
            raise VerificationError(VerificationErrorCode.MISSING_CODE)

        if user.is_verified:
            logger.info(f"Verify called for already verified user: {user.id}")
            return ALREADY_VERIFIED_MESSAGE

        expires = as_utc(user.verification_code_expires)
        code_matches = user.verification_code is not None and code == user.verification_code
        not_expired = expires is not None and self.clock() < expires

        if code_matches and not_expired:
            user.is_verified = True
            user.verification_code = None
            user.verification_code_expires = None
            await self.users.save(user)
            logger.info(f"Account verified - user: {user.id}")
            return VERIFIED_MESSAGE

        if not not_expired:
            logger.warning(f"Expired verification code - user: {user.id}")
            raise VerificationError(VerificationErrorCode.EXPIRED)

        logger.warning(f"Incorrect verification code - user: {user.id}")
        raise VerificationError(VerificationErrorCode.INCORRECT)

    async def resend(self, user_name: str) -> str:
        user = await self._get_user(user_name)
        logger.info(f"Resend verification attempt for user_name: {user_name}")

        if user.is_verified:
            logger.warning(f"Resend rejected - already verified: {user.id}")
            raise VerificationError(VerificationErrorCode.ALREADY_VERIFIED)

        self._check_resend_cooldown(user)
        return await self.generate_and_send(user)

    def _check_resend_cooldown(self, user: User) -> None:
        expires = as_utc(user.verification_code_expires)
        if not self.resend_cooldown or expires is None:
            return

        # issue time is implied by the expiry
        elapsed = self.clock() - (expires - self.ttl)
        if elapsed < self.resend_cooldown:
            remaining = math.ceil((self.resend_cooldown - elapsed).total_seconds())
            logger.warning(f"Resend rate limited - user: {user.id}, seconds_remaining: {remaining}")
            raise VerificationError(
                VerificationErrorCode.RESEND_TOO_SOON,
                f"Please wait {remaining} seconds before requesting a new code.",
            )

    async def _get_user(self, user_name: str) -> User:
        user = await self.users.get_by_user_name(user_name)
        if user is None:
            logger.warning(f"Verification request for unknown user_name: {user_name}")
            raise VerificationError(VerificationErrorCode.NOT_FOUND)
        return user

    async def _restore_code(self, user: User, code: Optional[str], expires: Optional[datetime]) -> None:
        user.verification_code = code
        user.verification_code_expires = expires
        await self.users.save(user)
