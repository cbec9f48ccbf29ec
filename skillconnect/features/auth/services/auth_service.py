from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError

from skillconnect.features.auth.models.user import User
from skillconnect.features.auth.schemas.auth import SignupRequest
from skillconnect.features.auth.services.user_service import UserRepository
from skillconnect.features.auth.services.verification_service import VerificationCodeManager
from skillconnect.features.auth.utils.security import hash_password
from skillconnect.platform.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    def __init__(self, users: UserRepository, verification: VerificationCodeManager):
        self.users = users
        self.verification = verification

    async def register_user(self, request: SignupRequest) -> User:
        """
        Create an unverified account and send its first verification code.

        Raises HTTPException(400) for a taken username or email. A failed
        first delivery surfaces as a VerificationError; the account is kept
        so the user can ask for a resend.
        """
        if await self.users.is_user_name_taken(request.user_name):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Username is already taken"
            )

        if await self.users.get_by_email(request.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Email is already registered"
            )

        new_user = User(
            user_name=request.user_name,
            email=request.email,
            password_hash=hash_password(request.password),
            role=request.role,
            is_verified=False,
        )

        try:
            new_user = await self.users.create(new_user)
        except IntegrityError:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Username or email already exists"
            )

        logger.info(f"User registered - user: {new_user.id}, user_name: {new_user.user_name}")
        await self.verification.generate_and_send(new_user)
        return new_user
