from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorPayload(BaseModel):
    """Author name as sent by clients"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")


class PostCreateRequest(BaseModel):
    """DTO for post creation request"""
    title: str = Field(min_length=1)
    content: str
    author: Optional[AuthorPayload] = None


class PostUpdateRequest(BaseModel):
    """
    DTO for post update request.

    Every field is optional; which of title/content/author were actually
    sent is read from `model_fields_set`, so omitted fields stay untouched.
    """
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorPayload] = None


class PostResponse(BaseModel):
    """DTO for post response"""
    id: str
    author: str
    content: Optional[str] = None
    title: str
    created: Optional[str] = None
