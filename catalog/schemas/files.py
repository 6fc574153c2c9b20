"""Pydantic schemas for file catalog endpoints."""

from typing import List, Optional

from pydantic import BaseModel

from catalog.domain import FileRecord, PageResult


class UploadFileRequest(BaseModel):
    """Request model for file upload. Presence of name and size is checked by the validator."""
    name: Optional[str] = None
    size: Optional[int] = None
    tags: Optional[List[str]] = None

    def to_record(self) -> FileRecord:
        return FileRecord(name=self.name, size=self.size, tags=list(self.tags or []))


class UploadFileResponse(BaseModel):
    """Response model for file upload."""
    ID: str


class FileResponse(BaseModel):
    """Response model for a single file record."""
    id: str
    name: str
    size: int
    tags: List[str]

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileResponse":
        return cls(
            id=record.file_id,
            name=record.name,
            size=record.size,
            tags=list(record.tags or []),
        )


class FilePageResponse(BaseModel):
    """Response model for a page of search results."""
    total: int
    page: List[FileResponse]

    @classmethod
    def from_page(cls, page: PageResult) -> "FilePageResponse":
        return cls(
            total=page.total,
            page=[FileResponse.from_record(record) for record in page.page],
        )
