"""Tests for tag editing operations."""

import pytest

from catalog.domain import FileRecord
from catalog.exceptions import TagMismatchError
from catalog.tag_editor import remove_tags, replace_tags
from catalog.utils import clean_tags, parse_tags


@pytest.fixture
def record():
    return FileRecord(name="name", size=0, tags=["tag1", "tag2", "tag3"], file_id="id0")


class TestReplaceTags:
    def test_replaces_wholesale(self):
        record = FileRecord(name="name", size=0, tags=["x"], file_id="id0")
        assert replace_tags(record, ["a", "b"]).tags == ["a", "b"]

    def test_does_not_mutate_original(self, record):
        replace_tags(record, [])
        assert record.tags == ["tag1", "tag2", "tag3"]

    def test_keeps_other_fields(self, record):
        edited = replace_tags(record, ["a"])
        assert (edited.file_id, edited.name, edited.size) == ("id0", "name", 0)


class TestRemoveTags:
    def test_removes_subset_preserving_order(self, record):
        assert remove_tags(record, ["tag2"]).tags == ["tag1", "tag3"]

    def test_removal_order_is_irrelevant(self, record):
        assert remove_tags(record, ["tag3", "tag1"]).tags == ["tag2"]

    def test_removing_all_tags(self, record):
        assert remove_tags(record, ["tag1", "tag2", "tag3"]).tags == []

    def test_empty_removal_keeps_tags(self, record):
        assert remove_tags(record, []).tags == ["tag1", "tag2", "tag3"]

    def test_removes_duplicates_of_requested_tag(self):
        record = FileRecord(name="name", size=0, tags=["a", "b", "a"], file_id="id0")
        assert remove_tags(record, ["a"]).tags == ["b"]

    def test_missing_tag_aborts_whole_removal(self, record):
        with pytest.raises(TagMismatchError, match="tag not found on file"):
            remove_tags(record, ["tag1", "tag4"])
        assert record.tags == ["tag1", "tag2", "tag3"]

    def test_record_without_tags(self):
        record = FileRecord(name="name", size=0, tags=[], file_id="id0")
        with pytest.raises(TagMismatchError):
            remove_tags(record, ["tag1"])


class TestTagCleanup:
    def test_replace_trims_and_drops_blank(self, record):
        assert replace_tags(record, [" a ", "", "  ", "b"]).tags == ["a", "b"]

    def test_remove_trims_requested(self, record):
        assert remove_tags(record, [" tag1", "tag3 "]).tags == ["tag2"]

    def test_parse_tags_matches_stored_form(self):
        assert parse_tags(" x ,, y") == clean_tags([" x ", "", " y"]) == ["x", "y"]
