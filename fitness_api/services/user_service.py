"""
Fitness API — User Service
============================

What:  Reads and writes the `users` collection.
How:   One MongoDB call per method. Updates use `$set` with only the fields
       the client sent, so concurrent updates to different fields of the same
       user both land and updates to the same field are last-write-wins.
Who:   Called by the /users route handlers.
"""

import logging
from typing import List

from pymongo import ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from fitness_api.exceptions import DatabaseError, NotFoundError
from fitness_api.models import user as user_model
from fitness_api.models.ids import parse_object_id
from fitness_api.schemas.user import UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Business logic layer for user operations. Stateless."""

    async def list_users(self, db: AsyncDatabase) -> List[UserResponse]:
        try:
            documents = await db[user_model.COLLECTION].find().to_list()
        except PyMongoError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error fetching users",
                context={"error_type": type(e).__name__},
            )
        return [UserResponse.from_document(document) for document in documents]

    async def create_user(self, db: AsyncDatabase, payload: UserCreate) -> UserResponse:
        """Insert a new user; `isAdmin` is stored as false unless supplied."""
        document = payload.to_document()
        try:
            result = await db[user_model.COLLECTION].insert_one(document)
        except PyMongoError as e:
            logger.error("Database error adding user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Error adding user",
                context={"error_type": type(e).__name__},
            )
        document["_id"] = result.inserted_id
        logger.info("User created: %s", result.inserted_id)
        return UserResponse.from_document(document)

    async def update_user(
        self,
        db: AsyncDatabase,
        user_id: str,
        payload: UserUpdate,
    ) -> UserResponse:
        """
        Merge the supplied fields into an existing user.

        An empty body changes nothing and returns the current document.

        Returns:
            The user as stored after the update

        Raises:
            ValidationError: `user_id` is not an ObjectId
            NotFoundError: No user has that id
            DatabaseError: Update failed
        """
        oid = parse_object_id(user_id, "user")
        fields = payload.to_update_fields()
        collection = db[user_model.COLLECTION]
        try:
            if fields:
                document = await collection.find_one_and_update(
                    {"_id": oid},
                    {"$set": fields},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await collection.find_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error updating user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Error updating user",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )
        if document is None:
            raise NotFoundError(resource="User", resource_id=user_id)
        logger.info("User %s updated: %s", user_id, sorted(fields))
        return UserResponse.from_document(document)

    async def delete_user(self, db: AsyncDatabase, user_id: str) -> None:
        """Remove a user. Deleting an id that does not exist is not an error."""
        oid = parse_object_id(user_id, "user")
        try:
            result = await db[user_model.COLLECTION].delete_one({"_id": oid})
        except PyMongoError as e:
            logger.error("Database error deleting user %s: %s", user_id, str(e))
            raise DatabaseError(
                message="Error deleting user",
                context={"user_id": user_id, "error_type": type(e).__name__},
            )
        logger.info("User %s delete: %d removed", user_id, result.deleted_count)


# ── Singleton Instance ────────────────────────────────────────────────────
user_service = UserService()
