"""
User lookup API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import schemas, service
from .dependencies import get_user_repository
from .repository import UserRepository

router = APIRouter()

_ERROR_RESPONSE = {
    400: {
        "description": "The store rejected the query.",
        "content": {"application/json": {"example": {"error": "message"}}},
    }
}


@router.get(
    "/users",
    summary="Returns all users",
    response_model=schemas.UserListResponse,
    responses=_ERROR_RESPONSE,
)
async def list_users(repo: UserRepository = Depends(get_user_repository)) -> dict:
    return await service.list_users(repo)


@router.get(
    "/user/{user_id}",
    summary="Returns user by id",
    response_model=schemas.UserListResponse,
    responses=_ERROR_RESPONSE,
)
async def get_user(user_id: str, repo: UserRepository = Depends(get_user_repository)) -> dict:
    return await service.get_user(repo, user_id)
