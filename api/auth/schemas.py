"""
Auth API schemas (request/response models).

Request fields are optional at the schema level; presence is checked by the
service so missing fields are reported the way clients expect.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from users.schemas import User


class RegisterRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "Username": "user1",
                "Email": "user1@example.com",
                "Password": "secret",
                "UserType": "0",
            }
        }
    )

    Username: str | None = None
    Email: str | None = None
    Password: str | None = None
    UserType: str | int | None = Field(default=None, description="User's permission type")


class LoginRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={"example": {"Email": "user1@example.com", "Password": "secret"}}
    )

    Email: str | None = None
    Password: str | None = None


class LoggedInUser(User):
    Token: str


class LoginResponse(BaseModel):
    message: str
    data: list[LoggedInUser]
