"""
Fitness API — Blog Route Handlers
===================================

What:  GET /blogs, POST /blogs, GET /blogs/{id}, DELETE /blogs/{id}.
How:   Delegates to BlogService with the database from Depends(get_db).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from pymongo.asynchronous.database import AsyncDatabase

from fitness_api.database import get_db
from fitness_api.schemas.blog import BlogCreate, BlogCreatedResponse, BlogResponse
from fitness_api.schemas.common import ErrorResponse, MessageResponse
from fitness_api.services.blog_service import blog_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Blogs"])


@router.get(
    "/blogs",
    response_model=List[BlogResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all blogs",
)
async def list_blogs(db: AsyncDatabase = Depends(get_db)) -> List[BlogResponse]:
    return await blog_service.list_blogs(db)


@router.post(
    "/blogs",
    response_model=BlogCreatedResponse,
    responses={
        400: {"description": "Missing or empty content", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a blog",
)
async def create_blog(
    payload: BlogCreate,
    db: AsyncDatabase = Depends(get_db),
) -> BlogCreatedResponse:
    blog = await blog_service.create_blog(db, payload)
    return BlogCreatedResponse(message="Blog added successfully", blog=blog)


@router.get(
    "/blogs/{blog_id}",
    response_model=BlogResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single blog by id",
)
async def get_blog(blog_id: str, db: AsyncDatabase = Depends(get_db)) -> BlogResponse:
    return await blog_service.get_blog(db, blog_id)


@router.delete(
    "/blogs/{blog_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a blog",
    description="Succeeds whether or not the blog existed.",
)
async def delete_blog(blog_id: str, db: AsyncDatabase = Depends(get_db)) -> MessageResponse:
    await blog_service.delete_blog(db, blog_id)
    return MessageResponse(message="Blog deleted successfully")
