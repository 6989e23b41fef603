from catalog.models.base import Base
from catalog.models.book import Book
from catalog.models.comment import Comment
from catalog.models.user import User

__all__ = ["Base", "Book", "Comment", "User"]
