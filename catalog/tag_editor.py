"""Set operations on a file record's tags."""

from dataclasses import replace
from typing import List

from catalog.domain import FileRecord
from catalog.exceptions import TagMismatchError
from catalog.utils import clean_tags


def replace_tags(record: FileRecord, tags: List[str]) -> FileRecord:
    return replace(record, tags=clean_tags(tags))


def remove_tags(record: FileRecord, tags: List[str]) -> FileRecord:
    """
    Remove tags from a record, keeping the order of the remaining ones.

    Args:
        record: File record to edit
        tags: Tags to remove, trimmed like stored tags; every one must be present on the record

    Returns:
        New record with the tags removed

    Raises:
        TagMismatchError: If any requested tag is missing from the record
    """
    current = record.tags or []
    to_remove = set(clean_tags(tags))

    if not to_remove.issubset(current):
        raise TagMismatchError("tag not found on file")

    return replace(record, tags=[tag for tag in current if tag not in to_remove])
