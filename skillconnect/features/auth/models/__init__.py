from skillconnect.features.auth.models.user import USER_ROLES, User

__all__ = ["USER_ROLES", "User"]
