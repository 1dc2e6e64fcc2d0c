"""
Register / login API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from users.dependencies import get_user_repository
from users.repository import UserRepository

from . import schemas, service

router = APIRouter()


@router.post(
    "/register",
    summary="Create a new user",
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {
            "description": "The user was created, or the email was already registered.",
            "content": {"application/json": {"example": service.REGISTERED}},
        },
        400: {"description": "Missing fields or the insert failed."},
        402: {"description": "The duplicate-email lookup failed."},
    },
)
async def register(
    payload: schemas.RegisterRequest,
    repo: UserRepository = Depends(get_user_repository),
) -> JSONResponse:
    result = await service.register(payload, repo)
    return JSONResponse(result, status_code=status.HTTP_201_CREATED)


@router.post(
    "/login",
    summary="Log in user",
    response_model=schemas.LoginResponse,
    responses={
        400: {
            "description": "Missing input, no matching credentials, or a store error.",
            "content": {"text/plain": {"example": service.NO_MATCH}},
        },
    },
)
async def login(
    payload: schemas.LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
) -> dict:
    return await service.login(payload, repo)
