"""
Fitness API — Blog Document Layout
====================================

Stored shape (collection `blogs`):
    {
        "_id": ObjectId,        # assigned by the driver on insert, immutable
        "title": str | null,
        "image": str | null,
        "description": str | null,
        "content": str          # always present and non-empty
    }

Blogs are created and deleted, never updated.
"""

from typing import Any, Dict

COLLECTION = "blogs"

FIELDS = ("title", "image", "description", "content")


def to_document(values: Dict[str, Any]) -> Dict[str, Any]:
    """Builds the document to insert, keeping only known keys."""
    return {field: values.get(field) for field in FIELDS}


def from_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Flattens a stored document into API field names (`_id` → `id`)."""
    data = {field: document.get(field) for field in FIELDS}
    data["id"] = str(document["_id"])
    return data
