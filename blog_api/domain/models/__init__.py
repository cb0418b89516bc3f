from .user import User
from .post import Author, Post

__all__ = ["User", "Author", "Post"]
