"""File repository for database operations."""

from typing import List, Optional, Tuple

from catalog.database import get_db_connection
from catalog.domain import FileRecord, SearchResult
from catalog.logging_config import get_logger
from catalog.query_builder import AllOf, FileQuery, Filter, NameContains, TagTerm
from catalog.repositories.tag_repository import TagRepository
from catalog.utils import generate_uuid, get_current_timestamp

logger = get_logger(__name__)


def compile_filter(query_filter: Optional[Filter]) -> Tuple[str, List[str]]:
    """
    Compile a filter tree into a WHERE clause over ``files f``.

    Args:
        query_filter: Filter built by the query builder, or None to match all

    Returns:
        Tuple of (SQL condition, positional parameters)
    """
    if query_filter is None:
        return "1 = 1", []

    if isinstance(query_filter, TagTerm):
        return (
            "EXISTS (SELECT 1 FROM tags t WHERE t.file_id = f.file_id AND t.tag = ?)",
            [query_filter.tag],
        )

    if isinstance(query_filter, NameContains):
        return "instr(f.name, ?) > 0", [query_filter.fragment]

    if isinstance(query_filter, AllOf):
        if not query_filter.filters:
            return "1 = 1", []
        clauses = []
        params: List[str] = []
        for sub_filter in query_filter.filters:
            clause, sub_params = compile_filter(sub_filter)
            clauses.append(f"({clause})")
            params.extend(sub_params)
        return " AND ".join(clauses), params

    raise TypeError(f"Unsupported filter: {query_filter!r}")


class FileRepository:
    @staticmethod
    def save(record: FileRecord) -> FileRecord:
        """
        Insert or update a file record together with its tags.

        A record without file_id gets a new UUID. Updating keeps the
        record's position in search ordering.

        Args:
            record: File record to persist

        Returns:
            The stored record, carrying its file_id
        """
        file_id = record.file_id or generate_uuid()
        tags = list(record.tags or [])

        with get_db_connection() as conn:
            try:
                cursor = conn.cursor()
                cursor.execute(
                    """
                    INSERT INTO files (file_id, name, size, created_at)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(file_id) DO UPDATE SET
                        name = excluded.name,
                        size = excluded.size
                    """,
                    (file_id, record.name, record.size, get_current_timestamp())
                )
                TagRepository.replace_tags(file_id, tags, conn=conn)
                conn.commit()
            except Exception as e:
                conn.rollback()
                logger.error(f"Failed to save file [file_id={file_id}]: {e}", exc_info=True)
                raise

        logger.debug(f"File saved [file_id={file_id}]")
        return FileRecord(name=record.name, size=record.size, tags=tags, file_id=file_id)

    @staticmethod
    def exists(file_id: str) -> bool:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1 FROM files WHERE file_id = ?", (file_id,))
            return cursor.fetchone() is not None

    @staticmethod
    def find_by_id(file_id: str) -> Optional[FileRecord]:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT file_id, name, size FROM files WHERE file_id = ?",
                (file_id,)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            tags = TagRepository.get_tags_for_files([file_id], conn)[file_id]
            return FileRecord(
                name=row["name"],
                size=row["size"],
                tags=tags,
                file_id=row["file_id"],
            )

    @staticmethod
    def delete(file_id: str) -> None:
        """
        Delete a file and its tags. Deleting a missing id is a no-op.
        """
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM files WHERE file_id = ?", (file_id,))
            conn.commit()
            logger.debug(f"Deleted {cursor.rowcount} file rows [file_id={file_id}]")

    @staticmethod
    def search(query: FileQuery) -> SearchResult:
        """
        Run a file query and return one page slice plus the total match count.

        Records are ordered by insertion so that consecutive pages never
        overlap.

        Args:
            query: Query descriptor from the query builder

        Returns:
            SearchResult with the total and the records of the requested page
        """
        where, params = compile_filter(query.filter)
        page_request = query.page_request

        with get_db_connection() as conn:
            cursor = conn.cursor()

            cursor.execute(f"SELECT COUNT(*) AS total FROM files f WHERE {where}", params)
            total = cursor.fetchone()["total"]

            cursor.execute(
                f"""
                SELECT f.file_id, f.name, f.size
                FROM files f
                WHERE {where}
                ORDER BY f.seq
                LIMIT ? OFFSET ?
                """,
                params + [page_request.size, page_request.offset]
            )
            rows = cursor.fetchall()

            tags_by_file = TagRepository.get_tags_for_files([row["file_id"] for row in rows], conn)

            records = [
                FileRecord(
                    name=row["name"],
                    size=row["size"],
                    tags=tags_by_file[row["file_id"]],
                    file_id=row["file_id"],
                )
                for row in rows
            ]

        return SearchResult(total=total, records=records)
