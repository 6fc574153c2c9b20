"""Page request normalization and page assembly."""

from typing import Optional

from catalog import config
from catalog.domain import MAX_INTEGER, PageRequest, PageResult, SearchResult


def normalize_page_request(page: Optional[int] = None, size: Optional[int] = None) -> PageRequest:
    """
    Clamp raw paging parameters into a valid PageRequest.

    Args:
        page: Zero-based page index; None or negative becomes 0, and it is
            capped so that the row offset fits a sqlite INTEGER
        size: Page size; None or below 1 becomes the default, capped at the maximum

    Returns:
        Normalized PageRequest
    """
    if size is None or size < 1:
        size = config.DEFAULT_PAGE_SIZE
    size = min(size, config.MAX_PAGE_SIZE)
    if page is None or page < 0:
        page = 0
    page = min(page, MAX_INTEGER // size)
    return PageRequest(page=page, size=size)


def assemble_page(result: SearchResult) -> PageResult:
    return PageResult(total=result.total, page=list(result.records))
