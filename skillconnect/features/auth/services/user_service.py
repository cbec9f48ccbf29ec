from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from skillconnect.features.auth.models.user import User
from skillconnect.platform.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Account store backed by the request's database session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_user_name(self, user_name: str) -> Optional[User]:
        """Exact, case-sensitive lookup"""
        result = await self.db.execute(select(User).where(User.user_name == user_name))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email.lower()))
        return result.scalar_one_or_none()

    async def is_user_name_taken(self, user_name: str) -> bool:
        return await self.get_by_user_name(user_name) is not None

    async def create(self, user: User) -> User:
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Duplicate account rejected - user_name: {user.user_name}")
            raise
        await self.db.refresh(user)
        return user

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user
