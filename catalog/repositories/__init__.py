"""Repository layer for data access."""

from catalog.repositories.file_repository import FileRepository
from catalog.repositories.tag_repository import TagRepository

__all__ = [
    "FileRepository",
    "TagRepository",
]
