"""Catalog data type definitions."""

from dataclasses import dataclass, field
from typing import List, Optional


# Largest value a sqlite INTEGER column can hold.
MAX_INTEGER = 2 ** 63 - 1


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata entry describing an uploaded file.

    file_id is None until the record is first saved.
    """
    name: Optional[str]
    size: Optional[int]
    tags: List[str] = field(default_factory=list)
    file_id: Optional[str] = None


@dataclass(frozen=True)
class ValidityReport:
    valid: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page index and positive page size.
    """
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class SearchResult:
    """
    Raw backend output: total match count plus the records of one slice.
    """
    total: int
    records: List[FileRecord]


@dataclass(frozen=True)
class PageResult:
    total: int
    page: List[FileRecord]
