"""Tests for page request normalization and page assembly."""

import pytest

from catalog.domain import MAX_INTEGER, FileRecord, PageRequest, SearchResult
from catalog.pagination import assemble_page, normalize_page_request


class TestNormalizePageRequest:
    def test_defaults(self, monkeypatch):
        monkeypatch.setattr("catalog.config.DEFAULT_PAGE_SIZE", 20)
        assert normalize_page_request() == PageRequest(page=0, size=20)

    def test_values_within_bounds_kept(self):
        assert normalize_page_request(2, 5) == PageRequest(page=2, size=5)

    def test_negative_page_becomes_first(self):
        assert normalize_page_request(-3, 5).page == 0

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size_becomes_default(self, monkeypatch, size):
        monkeypatch.setattr("catalog.config.DEFAULT_PAGE_SIZE", 20)
        assert normalize_page_request(0, size).size == 20

    def test_size_capped(self, monkeypatch):
        monkeypatch.setattr("catalog.config.MAX_PAGE_SIZE", 100)
        assert normalize_page_request(0, 5000).size == 100

    def test_offset(self):
        assert PageRequest(page=3, size=10).offset == 30

    def test_huge_page_capped_to_integer_offset(self):
        page_request = normalize_page_request(10 ** 18, 20)

        assert page_request.size == 20
        assert page_request.offset <= MAX_INTEGER
        assert page_request.page == MAX_INTEGER // 20

    def test_largest_page_at_max_size(self, monkeypatch):
        monkeypatch.setattr("catalog.config.MAX_PAGE_SIZE", 2000)
        page_request = normalize_page_request(2 ** 70, 5000)

        assert page_request.size == 2000
        assert page_request.offset <= MAX_INTEGER


class TestAssemblePage:
    def test_reshapes_without_reordering(self):
        records = [
            FileRecord(name="b", size=1, tags=[], file_id="id1"),
            FileRecord(name="a", size=0, tags=[], file_id="id0"),
        ]
        page = assemble_page(SearchResult(total=5, records=records))

        assert page.total == 5
        assert page.page == records

    def test_empty_result(self):
        page = assemble_page(SearchResult(total=0, records=[]))
        assert page.total == 0
        assert page.page == []
