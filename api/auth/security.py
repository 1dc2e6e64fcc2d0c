"""
Auth security helpers.

Passwords are hashed with bcrypt against a salt that is generated once per
user and stored beside the hash; verification rehashes with that salt.
"""

from __future__ import annotations

import hmac
import os
import time
from typing import Any

import bcrypt
import jwt

# Token lifetime is fixed, not configurable per call.
ACCESS_TOKEN_TTL_S = 60 * 60

DEFAULT_BCRYPT_ROUNDS = 10


class AuthSecurityError(RuntimeError):
    pass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def token_key() -> str:
    # Local default keeps development simple.
    # In production, set TOKEN_KEY in environment.
    default = "dev-change-this-token-key-0123456789"
    return os.environ.get("TOKEN_KEY", default).strip() or default


def jwt_algorithm() -> str:
    return os.environ.get("JWT_ALG", "HS256").strip() or "HS256"


def bcrypt_rounds() -> int:
    # bcrypt accepts cost factors 4..31.
    return max(4, min(_env_int("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS), 31))


def now_epoch_s() -> int:
    return int(time.time())


def generate_salt() -> str:
    return bcrypt.gensalt(rounds=bcrypt_rounds()).decode("utf-8")


def hash_password(plain_password: str, salt: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    try:
        return bcrypt.hashpw(password, (salt or "").encode("utf-8")).decode("utf-8")
    except ValueError as exc:
        raise AuthSecurityError(str(exc)) from exc


def verify_password(plain_password: str, salt: str, password_hash: str) -> bool:
    if not plain_password or not password_hash:
        return False
    try:
        candidate = hash_password(plain_password, salt)
    except AuthSecurityError:
        return False
    return hmac.compare_digest(candidate.encode("utf-8"), password_hash.encode("utf-8"))


def build_access_token(*, user_id: int, username: str, email: str) -> str:
    issued_at = now_epoch_s()

    payload = {
        "user_id": user_id,
        "username": username,
        "Email": email,
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL_S,
    }
    return jwt.encode(payload, token_key(), algorithm=jwt_algorithm())


def decode_access_token(token: str) -> dict[str, Any]:
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        return jwt.decode(raw, token_key(), algorithms=[jwt_algorithm()])
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc
