"""Translate tag and name criteria into a backend query descriptor.

A filter is a small tree of frozen dataclasses. The repository compiles it
into SQL; nothing here knows about the storage engine.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from catalog.domain import PageRequest


@dataclass(frozen=True)
class TagTerm:
    """Matches records having a tag exactly equal to ``tag``."""
    tag: str


@dataclass(frozen=True)
class NameContains:
    """Matches records whose name contains ``fragment``."""
    fragment: str


@dataclass(frozen=True)
class AllOf:
    """Conjunction of independent filters."""
    filters: Tuple["Filter", ...]


Filter = Union[TagTerm, NameContains, AllOf]


@dataclass(frozen=True)
class FileQuery:
    filter: Optional[Filter]
    page_request: PageRequest


def build_tags_filter(tags: Optional[Iterable[str]]) -> Optional[AllOf]:
    """
    Build a filter requiring every given tag to be present on a record.

    Args:
        tags: Required tags; order and repetition are irrelevant

    Returns:
        AllOf of one TagTerm per distinct tag, or None when no tags are given
    """
    if not tags:
        return None

    distinct = dict.fromkeys(tags)
    if not distinct:
        return None

    return AllOf(tuple(TagTerm(tag) for tag in distinct))


def build_name_filter(name: Optional[str]) -> Optional[NameContains]:
    if name is None or not name.strip():
        return None
    return NameContains(name)


def build_file_query(
    tags: Optional[Iterable[str]],
    page_request: PageRequest,
    name: Optional[str] = None,
) -> FileQuery:
    """
    Combine the tag filter and the name filter with AND semantics.

    Args:
        tags: Required tags, possibly empty or None
        page_request: Passed through unchanged
        name: Optional name fragment

    Returns:
        FileQuery whose filter is None when no criteria are given
    """
    tags_filter = build_tags_filter(tags)
    name_filter = build_name_filter(name)

    if tags_filter is not None and name_filter is not None:
        query_filter = AllOf((tags_filter, name_filter))
    else:
        query_filter = tags_filter or name_filter

    return FileQuery(filter=query_filter, page_request=page_request)
