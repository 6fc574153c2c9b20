"""Pydantic schemas for API requests and responses."""

from catalog.schemas.common import StatusResponse
from catalog.schemas.files import (
    UploadFileRequest,
    UploadFileResponse,
    FileResponse,
    FilePageResponse
)

__all__ = [
    "StatusResponse",
    "UploadFileRequest",
    "UploadFileResponse",
    "FileResponse",
    "FilePageResponse"
]
