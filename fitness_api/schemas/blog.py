"""
Fitness API — Blog Request/Response Schemas
=============================================

What:  Pydantic models defining the blog API contract.
How:   FastAPI validates request bodies against BlogCreate before the route
       runs; a body without `content` never reaches MongoDB.

Unknown keys in request bodies are ignored.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from fitness_api.models import blog as blog_model


class BlogCreate(BaseModel):
    """Body of POST /blogs. Only `content` is required."""
    title: Optional[str] = Field(default=None, description="Headline")
    image: Optional[str] = Field(default=None, description="Image URL")
    description: Optional[str] = Field(default=None, description="Short summary")
    content: str = Field(min_length=1, description="Article body (required, non-empty)")

    model_config = {"coerce_numbers_to_str": True}


class BlogResponse(BaseModel):
    """
    A stored blog entity.

    Only BlogCreate requires `content`; documents written by other tools may
    lack it and must still be readable.
    """
    id: str = Field(description="Unique blog identifier (ObjectId hex)")
    title: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "BlogResponse":
        return cls(**blog_model.from_document(document))


class BlogCreatedResponse(BaseModel):
    """Returned by POST /blogs."""
    message: str = Field(default="Blog added successfully")
    blog: BlogResponse
