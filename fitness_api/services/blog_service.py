"""
Fitness API — Blog Service
============================

What:  Reads and writes the `blogs` collection.
How:   Each method performs exactly one MongoDB call and converts the result
       into response models. Driver failures become DatabaseError with the
       fixed message for that operation.
Who:   Called by the /blogs route handlers.

Design Decision:
    BlogService is stateless. It receives the database handle for each call,
    so tests pass an in-memory double and the app passes the handle created
    at startup.
"""

import logging
from typing import List

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from fitness_api.exceptions import DatabaseError, NotFoundError
from fitness_api.models import blog as blog_model
from fitness_api.models.ids import parse_object_id
from fitness_api.schemas.blog import BlogCreate, BlogResponse

logger = logging.getLogger(__name__)


class BlogService:
    """
    Business logic layer for blog operations.

    Responsibilities:
        - list_blogs(): Every blog in stored order
        - create_blog(): Insert and return the new entity
        - get_blog(): Single blog retrieval with not-found handling
        - delete_blog(): Idempotent removal
    """

    async def list_blogs(self, db: AsyncDatabase) -> List[BlogResponse]:
        """Returns the whole collection in natural order. No pagination."""
        try:
            documents = await db[blog_model.COLLECTION].find().to_list()
        except PyMongoError as e:
            logger.error("Database error listing blogs: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error fetching blogs",
                context={"error_type": type(e).__name__},
            )
        return [BlogResponse.from_document(document) for document in documents]

    async def create_blog(self, db: AsyncDatabase, payload: BlogCreate) -> BlogResponse:
        """
        Insert a new blog.

        Args:
            db: Database handle
            payload: Validated body; `content` is guaranteed non-empty

        Returns:
            The stored entity including its newly assigned id

        Raises:
            DatabaseError: Insert failed
        """
        document = blog_model.to_document(payload.model_dump())
        try:
            result = await db[blog_model.COLLECTION].insert_one(document)
        except PyMongoError as e:
            logger.error("Database error adding blog: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error adding blog",
                context={"error_type": type(e).__name__},
            )
        document["_id"] = result.inserted_id
        logger.info("Blog created: %s", result.inserted_id)
        return BlogResponse.from_document(document)

    async def get_blog(self, db: AsyncDatabase, blog_id: str) -> BlogResponse:
        """
        Retrieve a single blog by id.

        Raises:
            ValidationError: `blog_id` is not an ObjectId (→ 400)
            NotFoundError: No blog has that id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        oid = parse_object_id(blog_id, "blog")
        try:
            document = await db[blog_model.COLLECTION].find_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error fetching blog %s: %s", blog_id, str(e))
            raise DatabaseError(
                message="Error fetching blog",
                context={"blog_id": blog_id, "error_type": type(e).__name__},
            )
        if document is None:
            raise NotFoundError(resource="Blog", resource_id=blog_id)
        return BlogResponse.from_document(document)

    async def delete_blog(self, db: AsyncDatabase, blog_id: str) -> None:
        """
        Remove a blog. Deleting an id that does not exist is not an error.

        Raises:
            ValidationError: `blog_id` is not an ObjectId
            DatabaseError: Delete failed
        """
        oid = parse_object_id(blog_id, "blog")
        try:
            result = await db[blog_model.COLLECTION].delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error deleting blog %s: %s", blog_id, str(e))
            raise DatabaseError(
                message="Error deleting blog",
                context={"blog_id": blog_id, "error_type": type(e).__name__},
            )
        logger.info("Blog %s delete: %d removed", blog_id, result.deleted_count)


# ── Singleton Instance ────────────────────────────────────────────────────
blog_service = BlogService()
