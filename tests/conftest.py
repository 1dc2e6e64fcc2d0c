"""
Shared fixtures: an in-memory user store and a TestClient wired to it.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from main import create_app
from users.dependencies import get_user_repository


class InMemoryUserRepository:
    """Test double with the same interface as users.repository.UserRepository."""

    def __init__(self) -> None:
        self.rows: list[dict[str, Any]] = []
        self.fail_lookup = False
        self.fail_insert = False
        self.race_on_insert = False

    def _check_lookup(self) -> None:
        if self.fail_lookup:
            raise db.StorageError("connection refused")

    async def list_all(self) -> list[dict[str, Any]]:
        self._check_lookup()
        return [dict(row) for row in self.rows]

    async def get_by_id(self, user_id: str) -> list[dict[str, Any]]:
        self._check_lookup()
        try:
            numeric_id = int(str(user_id).strip())
        except ValueError:
            return []
        return [dict(row) for row in self.rows if row["Id"] == numeric_id]

    async def get_by_email(self, email: str) -> list[dict[str, Any]]:
        self._check_lookup()
        return [dict(row) for row in self.rows if row["Email"] == email]

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
        if self.fail_insert:
            raise db.StorageError("null value in column violates not-null constraint")
        if self.race_on_insert or any(row["Email"] == email for row in self.rows):
            raise db.DuplicateRecordError('duplicate key value violates unique constraint "users_email_key"')
        user_id = len(self.rows) + 1
        self.rows.append(
            {
                "Id": user_id,
                "Username": username,
                "Email": email,
                "Password": password_hash,
                "Salt": salt,
                "UserType": user_type,
                "DateLoggedIn": None,
                "DateCreated": date_created,
            }
        )
        return user_id


@pytest.fixture(autouse=True)
def _fast_auth_env(monkeypatch):
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.setenv("TOKEN_KEY", "test-token-key-0123456789abcdef0123")


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def client(repo):
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: repo
    # Not used as a context manager: the lifespan would open a real DB pool.
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(**fields):
        body = {"Username": "a", "Email": "a@x.com", "Password": "p", "UserType": "1"}
        body.update(fields)
        return client.post("/api/register", json=body)

    return _register
