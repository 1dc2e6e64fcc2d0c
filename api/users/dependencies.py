"""
Store dependency for user-facing routes.
"""

from __future__ import annotations

from core import db

from .repository import UserRepository


def get_user_repository() -> UserRepository:
    return UserRepository(db.pool())
