"""Tag repository for database operations."""

from typing import Dict, List

from catalog.logging_config import get_logger

logger = get_logger(__name__)


class TagRepository:
    @staticmethod
    def replace_tags(file_id: str, tags: List[str], conn) -> None:
        """
        Replace all tags for a file, storing them in the given order.
        The caller owns the transaction.
        """
        cursor = conn.cursor()
        cursor.execute("DELETE FROM tags WHERE file_id = ?", (file_id,))
        cursor.executemany(
            "INSERT INTO tags (file_id, position, tag) VALUES (?, ?, ?)",
            [(file_id, position, tag) for position, tag in enumerate(tags)]
        )
        logger.debug(f"Stored {len(tags)} tags [file_id={file_id}]")

    @staticmethod
    def get_tags_for_files(file_ids: List[str], conn) -> Dict[str, List[str]]:
        """
        Fetch the tags of several files in one query.

        Args:
            file_ids: Files to look up
            conn: Open database connection

        Returns:
            Mapping of file_id to its ordered tags; every requested id is present
        """
        tags_by_file: Dict[str, List[str]] = {file_id: [] for file_id in file_ids}
        if not file_ids:
            return tags_by_file

        placeholders = ','.join('?' for _ in file_ids)
        cursor = conn.cursor()
        cursor.execute(
            f"SELECT file_id, tag FROM tags WHERE file_id IN ({placeholders}) ORDER BY file_id, position",
            file_ids
        )
        for row in cursor.fetchall():
            tags_by_file[row["file_id"]].append(row["tag"])

        return tags_by_file
