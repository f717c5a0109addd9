"""Mock sign-in: any credentials are accepted and a role is assigned."""

from __future__ import annotations

from itertools import count
from typing import Optional

from loguru import logger

from studio_cli.core.models import User

ROLES = {"admin", "member"}

_user_ids = count(1)


class AccessDeniedError(PermissionError):
    """Raised when an admin-only operation is attempted without the admin role."""


def login(email: str, role: str = "member") -> User:
    """Sign in without checking credentials."""
    role = role.strip().lower()
    if role not in ROLES:
        raise ValueError(f"Unknown role: {role!r}")
    user = User(
        id=f"user-{next(_user_ids)}",
        name="Admin User" if role == "admin" else "Test User",
        email=email,
        role=role,
    )
    logger.debug(f"Signed in {email} as {role}")
    return user


def require_admin(user: Optional[User]) -> User:
    if user is None or not user.is_admin:
        raise AccessDeniedError("Administrator privileges required")
    return user
