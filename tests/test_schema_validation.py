"""Schema validation tests to prevent SQL query mismatches."""

import sqlite3
from pathlib import Path

import pytest


def get_table_columns(db_path: Path, table_name: str) -> set:
    """
    Get all column names for a table from the database schema.
    """
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    cursor.execute(f"PRAGMA table_info({table_name})")
    columns = {row[1] for row in cursor.fetchall()}
    conn.close()
    return columns


class TestSchema:
    @pytest.mark.parametrize("table, expected", [
        ("files", {"seq", "file_id", "name", "size", "created_at"}),
        ("tags", {"file_id", "position", "tag"}),
    ])
    def test_table_columns(self, test_db, table, expected):
        assert expected.issubset(get_table_columns(test_db, table))

    def test_tag_index_exists(self, test_db):
        conn = sqlite3.connect(test_db)
        cursor = conn.cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type='index' AND name='idx_tags_tag'")
        result = cursor.fetchone()
        conn.close()
        assert result is not None

    def test_negative_size_rejected_by_schema(self, test_db):
        conn = sqlite3.connect(test_db)
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO files (file_id, name, size, created_at) VALUES ('id0', 'a', -1, '')"
            )
        conn.close()

    def test_init_is_idempotent(self, test_db):
        from catalog.database import init_database

        init_database()
        assert get_table_columns(test_db, "files")
