"""Process-wide service instances, set at startup and cleared at shutdown."""

from typing import Optional

from catalog.services.file_service import FileService

_file_service: Optional[FileService] = None


def set_file_service(service: Optional[FileService]):
    """Set global file service instance"""
    global _file_service
    _file_service = service


def get_file_service() -> Optional[FileService]:
    """Get global file service instance"""
    return _file_service
