# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Author:
    """Author name embedded in a post"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


@dataclass
class Post:
    """
    Pure domain model for a blog post - no external dependencies.

    `id` and `created` are assigned by the store on creation and never change
    afterwards.
    """
    id: Optional[str]
    title: str
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.title or not self.title.strip():
            raise ValueError("Post title is required")

    @property
    def author_name(self) -> str:
        """Trimmed "first last", empty when the post has no author"""
        if self.author is None:
            return ""
        return self.author.full_name
