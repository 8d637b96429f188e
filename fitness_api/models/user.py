"""
Fitness API — User Document Layout
====================================

Stored shape (collection `users`):
    {
        "_id": ObjectId,
        "name": str | null,
        "age": number | null,
        "email": str | null,     # not unique
        "number": str | null,    # phone number, kept as text
        "plan": str | null,
        "isAdmin": bool          # false unless supplied; never enforced
    }
"""

from typing import Any, Dict

COLLECTION = "users"

FIELDS = ("name", "age", "email", "number", "plan", "isAdmin")

ADMIN_FIELD = "isAdmin"


def to_document(values: Dict[str, Any]) -> Dict[str, Any]:
    """Builds the document to insert; a missing admin flag is stored as false."""
    document = {field: values.get(field) for field in FIELDS}
    if document[ADMIN_FIELD] is None:
        document[ADMIN_FIELD] = False
    return document


def from_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Flattens a stored document into API field names (`_id` → `id`)."""
    data = {field: document.get(field) for field in FIELDS}
    # Documents written by other tools may lack the flag
    if data[ADMIN_FIELD] is None:
        data[ADMIN_FIELD] = False
    data["id"] = str(document["_id"])
    return data
