"""
User API schemas (response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "Id": 1,
                "Username": "user1",
                "Email": "user1@example.com",
                "Password": "$2b$10$swhOfLEXalEvB1xPK8pgu.DLHvoto9LsOR.vQ1XCdfzkt97/nBoeO",
                "Salt": "$2b$10$swhOfLEXalEvB1xPK8pgu.",
                "UserType": "0",
                "DateLoggedIn": None,
                "DateCreated": "2022-05-21T23:37:28.000000+00:00",
            }
        }
    )

    Id: int = Field(..., description="Auto-generated id of a user")
    Username: str = Field(..., description="Username of a user")
    Email: str = Field(..., description="Email of a user")
    Password: str = Field(..., description="Salted password hash of a user")
    Salt: str = Field(..., description="Per-user password salt")
    UserType: str = Field(..., description="User's permission type")
    DateLoggedIn: str | None = Field(default=None, description="User's last login date")
    DateCreated: str = Field(..., description="User's created date")


class UserListResponse(BaseModel):
    message: str
    data: list[User]
