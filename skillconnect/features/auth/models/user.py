from sqlalchemy import Boolean, Column, DateTime, Enum, String

from skillconnect.platform.db.base import BaseModel

USER_ROLES = ("user", "talent", "admin")


class User(BaseModel):
    __tablename__ = "users"
    user_name = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    profile_picture = Column(String(500), nullable=True)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False, default="user")

    # A pending code and its expiry are always written together
    verification_code = Column(String(6), nullable=True)
    verification_code_expires = Column(DateTime(timezone=True), nullable=True)
    is_verified = Column(Boolean, nullable=False, default=False)

    def __repr__(self):
        return f"<User(id={self.id}, user_name={self.user_name}, email={self.email})>"
