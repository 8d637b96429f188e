"""
Fitness API — Document Identifiers
====================================

What:  Converts path parameters into MongoDB ObjectIds.
When:  Before any database call that targets a single document.

A malformed id is a client mistake, so it surfaces as a 400 instead of
reaching the driver.
"""

from bson import ObjectId
from bson.errors import InvalidId

from fitness_api.exceptions import ValidationError


def parse_object_id(value: str, resource: str) -> ObjectId:
    """
    Parse a 24-character hex string into an ObjectId.

    Raises:
        ValidationError: `value` is not a valid ObjectId.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(
            message=f"Invalid {resource} id '{value}'",
            field="id",
            context={"resource": resource},
        )
