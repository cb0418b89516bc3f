from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    user_name: str
    hashed_password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.user_name or not self.user_name.strip():
            raise ValueError("Username is required")
        if not self.hashed_password:
            raise ValueError("Password hash is required")
