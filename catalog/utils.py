"""Utility helper functions for the catalog."""

import uuid
from datetime import datetime, timezone
from typing import Iterable, List, Optional


def generate_uuid() -> str:
    """
    Generate a new UUID4 string.

    Returns:
        UUID4 string
    """
    return str(uuid.uuid4())


def get_current_timestamp() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        Current timestamp as ISO format string
    """
    return datetime.now(timezone.utc).isoformat()


def clean_tags(tags: Optional[Iterable[str]]) -> List[str]:
    """
    Trim tags and drop blank ones, keeping order.

    Args:
        tags: Raw tags, or None

    Returns:
        List of trimmed, non-empty tag strings
    """
    if not tags:
        return []
    return [tag.strip() for tag in tags if tag.strip()]


def parse_tags(tags_str: Optional[str]) -> List[str]:
    """
    Parse comma-separated tags string into list.

    Args:
        tags_str: Comma-separated tags (e.g., "tag1,tag2,tag3"), or None

    Returns:
        List of trimmed tag strings
    """
    if not tags_str:
        return []
    return clean_tags(tags_str.split(','))
