"""
User lookup logic.
"""

from __future__ import annotations

import logging

from core import db
from core.errors import ApiError

from .repository import UserRepository

logger = logging.getLogger(__name__)


async def list_users(repo: UserRepository) -> dict:
    try:
        rows = await repo.list_all()
    except db.StorageError as exc:
        logger.warning("list_users_failed error=%s", exc)
        raise ApiError(400, str(exc)) from exc
    return {"message": "success", "data": rows}


async def get_user(repo: UserRepository, user_id: str) -> dict:
    # An unknown id is an empty result, not a 404.
    try:
        rows = await repo.get_by_id(user_id)
    except db.StorageError as exc:
        logger.warning("get_user_failed user_id=%s error=%s", user_id, exc)
        raise ApiError(400, str(exc)) from exc
    return {"message": "success", "data": rows}
