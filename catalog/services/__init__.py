"""Service layer for business logic."""

from catalog.services.file_service import FileService

__all__ = [
    "FileService",
]
