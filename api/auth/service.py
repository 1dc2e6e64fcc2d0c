"""
Auth business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi.concurrency import run_in_threadpool

from core import db
from core.errors import ApiError, PlainTextError
from users.repository import UserRepository

from . import schemas, security

logger = logging.getLogger(__name__)

REGISTERED = "Success"
ALREADY_REGISTERED = "Record already exists. Please login."
NO_MATCH = "No Match"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _missing_register_fields(payload: schemas.RegisterRequest) -> list[str]:
    errors: list[str] = []
    if not payload.Username:
        errors.append("Username is missing")
    if not payload.Email:
        errors.append("Email is missing")
    if not payload.UserType:
        errors.append("UserType is missing")
    return errors


async def register(payload: schemas.RegisterRequest, repo: UserRepository) -> str:
    """
    Create a user unless the email is already taken.

    Both outcomes are successes from the client's point of view; the returned
    string tells them apart.
    """
    errors = _missing_register_fields(payload)
    if errors:
        raise ApiError(400, ",".join(errors))
    if not payload.Password:
        raise ApiError(400, "Password is missing")

    email = str(payload.Email)
    try:
        existing = await repo.get_by_email(email)
    except db.StorageError as exc:
        logger.warning("register_lookup_failed email=%s error=%s", email, exc)
        raise ApiError(402, str(exc)) from exc

    if existing:
        logger.info("register_duplicate email=%s", email)
        return ALREADY_REGISTERED

    salt = await run_in_threadpool(security.generate_salt)
    try:
        password_hash = await run_in_threadpool(security.hash_password, payload.Password, salt)
    except security.AuthSecurityError as exc:
        raise ApiError(400, str(exc)) from exc

    try:
        user_id = await repo.insert(
            username=str(payload.Username),
            email=email,
            password_hash=password_hash,
            salt=salt,
            user_type=str(payload.UserType),
            date_created=_utc_now().isoformat(),
        )
    except db.DuplicateRecordError:
        # A concurrent registration won the unique constraint.
        logger.info("register_duplicate_on_insert email=%s", email)
        return ALREADY_REGISTERED
    except db.StorageError as exc:
        logger.warning("register_insert_failed email=%s error=%s", email, exc)
        raise ApiError(400, str(exc)) from exc

    logger.info("registered user_id=%s email=%s", user_id, email)
    return REGISTERED


async def login(payload: schemas.LoginRequest, repo: UserRepository) -> dict:
    if not (payload.Email and payload.Password):
        raise PlainTextError(400, "All input is required")

    try:
        rows = await repo.get_by_email(payload.Email)
    except db.StorageError as exc:
        logger.warning("login_lookup_failed email=%s error=%s", payload.Email, exc)
        raise ApiError(400, str(exc)) from exc

    # Unknown email gets the same answer as a wrong password.
    if not rows:
        logger.info("login_unknown_email email=%s", payload.Email)
        raise PlainTextError(400, NO_MATCH)

    user = dict(rows[0])
    is_valid = await run_in_threadpool(
        security.verify_password,
        payload.Password,
        str(user.get("Salt") or ""),
        str(user.get("Password") or ""),
    )
    if not is_valid:
        logger.info("login_mismatch user_id=%s", user.get("Id"))
        raise PlainTextError(400, NO_MATCH)

    user["Token"] = security.build_access_token(
        user_id=int(user["Id"]),
        username=str(user["Username"]),
        email=payload.Email,
    )
    logger.info("login user_id=%s", user["Id"])
    return {"message": "Hello world", "data": [user]}
