from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """DTO for user response (never includes the password hash)"""
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(alias="userName")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
