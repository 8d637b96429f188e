"""
Fitness API — User Route Handlers
===================================

What:  GET /users, POST /users, PUT /users/{id}, DELETE /users/{id}.

There is no GET /users/{id}; clients read a single user from the list or
from the PUT response.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase

from fitness_api.database import get_db
from fitness_api.schemas.common import ErrorResponse, MessageResponse
from fitness_api.schemas.user import UserCreate, UserResponse, UserSavedResponse, UserUpdate
from fitness_api.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all users",
)
async def list_users(db: AsyncDatabase = Depends(get_db)) -> List[UserResponse]:
    return await user_service.list_users(db)


@router.post(
    "/users",
    response_model=UserSavedResponse,
    responses={
        400: {"description": "Invalid field types", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a user",
    description="`isAdmin` defaults to false when omitted.",
)
async def create_user(
    payload: UserCreate,
    db: AsyncDatabase = Depends(get_db),
) -> UserSavedResponse:
    user = await user_service.create_user(db, payload)
    return UserSavedResponse(message="User added successfully", user=user)


@router.put(
    "/users/{user_id}",
    response_model=UserSavedResponse,
    responses={
        400: {"description": "Malformed id or field types", "model": ErrorResponse},
        404: {"description": "User not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Partially update a user",
    description="Only the fields present in the body are changed. A missing body is treated as `{}`.",
)
async def update_user(
    user_id: str,
    payload: Optional[UserUpdate] = None,
    db: AsyncDatabase = Depends(get_db),
) -> UserSavedResponse:
    user = await user_service.update_user(db, user_id, payload if payload is not None else UserUpdate())
    return UserSavedResponse(message="User updated successfully", user=user)


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a user",
    description="Succeeds whether or not the user existed.",
)
async def delete_user(user_id: str, db: AsyncDatabase = Depends(get_db)) -> MessageResponse:
    await user_service.delete_user(db, user_id)
    return MessageResponse(message="User deleted successfully")
