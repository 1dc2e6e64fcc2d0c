"""
User persistence (raw SQL).

Columns are aliased to the PascalCase keys the public API returns.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import db

# users.id is a SERIAL (int4) column.
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1

_USER_COLUMNS = """
    id AS "Id",
    username AS "Username",
    email AS "Email",
    password AS "Password",
    salt AS "Salt",
    user_type AS "UserType",
    date_logged_in AS "DateLoggedIn",
    date_created AS "DateCreated"
"""


class UserRepository:
    """
    Access to the `users` table through an explicitly supplied pool.

    Email uniqueness is enforced by the table constraint; a rejected insert
    raises `db.DuplicateRecordError`.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    async def list_all(self) -> list[dict[str, Any]]:
        return await db.fetch_all(
            self._pool,
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            ORDER BY id
            """,
        )

    async def get_by_id(self, user_id: str) -> list[dict[str, Any]]:
        # Ids arrive untyped from the path: "01" matches id 1, and a
        # non-numeric or out-of-range id matches nothing.
        try:
            numeric_id = int(str(user_id).strip())
        except ValueError:
            return []
        if not _MIN_ID <= numeric_id <= _MAX_ID:
            return []
        return await db.fetch_all(
            self._pool,
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE id = $1
            """,
            numeric_id,
        )

    async def get_by_email(self, email: str) -> list[dict[str, Any]]:
        return await db.fetch_all(
            self._pool,
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE email = $1
            """,
            email,
        )

    async def insert(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        salt: str,
        user_type: str,
        date_created: str,
    ) -> int:
        row = await db.fetch_one(
            self._pool,
            """
            INSERT INTO users (username, email, password, salt, user_type, date_created)
            VALUES ($1, $2, $3, $4, $5, $6)
            RETURNING id
            """,
            username,
            email,
            password_hash,
            salt,
            user_type,
            date_created,
        )
        if row is None:
            raise db.StorageError("Failed to create user.")
        return int(row["id"])
