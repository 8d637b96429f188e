"""
Fitness API — User Request/Response Schemas
=============================================

What:  Pydantic models defining the user API contract.

Field naming:
    The admin flag travels as `isAdmin` on the wire and in storage. Python
    code uses `is_admin`; `populate_by_name` accepts either spelling.

Update semantics:
    UserUpdate carries only the fields the client sent. `to_update_fields()`
    returns exactly those, ready for a `$set`, so unsent fields keep their
    stored values.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field, field_validator

from fitness_api.models import user as user_model

Number = Union[int, float]


class UserCreate(BaseModel):
    """Body of POST /users. No field is required."""
    name: Optional[str] = None
    age: Optional[Number] = None
    email: Optional[str] = None
    number: Optional[str] = Field(default=None, description="Phone number")
    plan: Optional[str] = Field(default=None, description="Subscription plan name")
    is_admin: bool = Field(default=False, alias="isAdmin")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    @field_validator("is_admin", mode="before")
    @classmethod
    def default_admin_flag(cls, v: Any) -> Any:
        """An explicit null means the same as leaving the flag out."""
        return False if v is None else v

    def to_document(self) -> Dict[str, Any]:
        return user_model.to_document(self.model_dump(by_alias=True))


class UserUpdate(BaseModel):
    """Body of PUT /users/{id}. Any subset of the user fields."""
    name: Optional[str] = None
    age: Optional[Number] = None
    email: Optional[str] = None
    number: Optional[str] = None
    plan: Optional[str] = None
    is_admin: Optional[bool] = Field(default=None, alias="isAdmin")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    @field_validator("is_admin")
    @classmethod
    def reject_null_admin_flag(cls, v: Optional[bool]) -> bool:
        if v is None:
            raise ValueError("isAdmin must be true or false")
        return v

    def to_update_fields(self) -> Dict[str, Any]:
        """Fields present in the request body, keyed by their stored names."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class UserResponse(BaseModel):
    """
    A stored user entity.

    `age` is echoed as stored: a text age from another writer is returned as
    text instead of failing the whole listing.
    """
    id: str = Field(description="Unique user identifier (ObjectId hex)")
    name: Optional[str] = None
    age: Optional[Union[Number, str]] = None
    email: Optional[str] = None
    number: Optional[str] = None
    plan: Optional[str] = None
    is_admin: bool = Field(default=False, alias="isAdmin")

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "UserResponse":
        return cls.model_validate(user_model.from_document(document))


class UserSavedResponse(BaseModel):
    """Returned by POST /users and PUT /users/{id}."""
    message: str
    user: UserResponse
