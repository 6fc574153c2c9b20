"""File service for business logic."""

from dataclasses import replace
from typing import List, Optional

from catalog.domain import FileRecord, PageRequest, PageResult
from catalog.exceptions import NotFoundError, ValidationError
from catalog.logging_config import get_logger
from catalog.pagination import assemble_page
from catalog.query_builder import build_file_query
from catalog.repositories.file_repository import FileRepository
from catalog.tag_editor import remove_tags, replace_tags
from catalog.utils import clean_tags
from catalog.validation import check_file_validity

logger = get_logger(__name__)


class FileService:
    """
    Orchestrates validation, tag editing and searching against the repository.

    Tag mutations are read-modify-write without locking; concurrent writers
    to the same file resolve as last write wins.
    """

    def __init__(self, file_repo: Optional[FileRepository] = None):
        self.file_repo = file_repo or FileRepository()

    def upload_file(self, record: FileRecord) -> FileRecord:
        report = check_file_validity(record)
        if not report.valid:
            logger.warning(f"Upload rejected: {report.reason} [name={record.name!r}]")
            raise ValidationError(report.reason)

        stored = self.file_repo.save(replace(record, file_id=None, tags=clean_tags(record.tags)))
        logger.info(f"File uploaded [file_id={stored.file_id}] [name={stored.name}]")
        return stored

    def get_file(self, file_id: str) -> FileRecord:
        record = self.file_repo.find_by_id(file_id)
        if record is None:
            raise NotFoundError("file not found")
        return record

    def delete_file(self, file_id: str) -> None:
        if not self.file_repo.exists(file_id):
            logger.warning(f"Delete failed: file not found [file_id={file_id}]")
            raise NotFoundError("file not found")

        self.file_repo.delete(file_id)
        logger.info(f"File deleted [file_id={file_id}]")

    def update_tags(self, file_id: str, tags: List[str]) -> FileRecord:
        """
        Set a file's tags to exactly the given list.

        Args:
            file_id: Target file
            tags: New tag list, replacing the current one

        Returns:
            The stored record

        Raises:
            NotFoundError: If the file does not exist
        """
        record = self.file_repo.find_by_id(file_id)
        if record is None:
            logger.warning(f"Tag update failed: file not found [file_id={file_id}]")
            raise NotFoundError("file not found")

        stored = self.file_repo.save(replace_tags(record, tags))
        logger.info(f"Tags set to {stored.tags} [file_id={file_id}]")
        return stored

    def delete_tags(self, file_id: str, tags: List[str]) -> FileRecord:
        """
        Remove tags from a file. Nothing is removed unless all tags are present.

        Args:
            file_id: Target file
            tags: Tags to remove

        Returns:
            The stored record

        Raises:
            NotFoundError: If the file does not exist
            TagMismatchError: If any tag is not on the file
        """
        record = self.file_repo.find_by_id(file_id)
        if record is None:
            logger.warning(f"Tag removal failed: file not found [file_id={file_id}]")
            raise NotFoundError("file not found")

        edited = remove_tags(record, tags)
        stored = self.file_repo.save(edited)
        logger.info(f"Removed tags {tags} [file_id={file_id}]")
        return stored

    def find_page(
        self,
        tags: Optional[List[str]],
        page_request: PageRequest,
        name: Optional[str] = None,
    ) -> PageResult:
        logger.info(
            f"Searching files [tags={tags}] [name={name!r}] "
            f"[page={page_request.page}] [size={page_request.size}]"
        )
        query = build_file_query(tags, page_request, name)
        result = self.file_repo.search(query)
        page = assemble_page(result)
        logger.info(f"Found {page.total} files, returning {len(page.page)}")
        return page
