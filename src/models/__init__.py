"""SQLAlchemy models."""
from models.base import Base, UUIDv7Mixin
from models.category import Category
from models.status import Status
from models.suggestion import Suggestion
from models.user import User

__all__ = ["Base", "Category", "Status", "Suggestion", "UUIDv7Mixin", "User"]
