"""Tests for file record validation."""

import pytest

from catalog.domain import FileRecord
from catalog.validation import check_file_validity


class TestCheckFileValidity:
    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_blank_name_is_missing(self, name):
        report = check_file_validity(FileRecord(name=name, size=10))
        assert not report.valid
        assert report.reason == "file name is missing"

    def test_name_checked_before_size(self):
        report = check_file_validity(FileRecord(name="", size=None))
        assert report.reason == "file name is missing"

        report = check_file_validity(FileRecord(name=None, size=-1))
        assert report.reason == "file name is missing"

    def test_missing_size(self):
        report = check_file_validity(FileRecord(name="file.txt", size=None))
        assert not report.valid
        assert report.reason == "file size is missing"

    def test_negative_size(self):
        report = check_file_validity(FileRecord(name="file.txt", size=-1))
        assert not report.valid
        assert report.reason == "file size is negative"

    @pytest.mark.parametrize("size", [0, 1, 10 ** 12])
    def test_valid_record(self, size):
        report = check_file_validity(FileRecord(name="file.txt", size=size, tags=["text"]))
        assert report.valid
        assert report.reason is None

    def test_size_beyond_integer_range(self):
        report = check_file_validity(FileRecord(name="file.txt", size=2 ** 63))
        assert not report.valid
        assert report.reason == "file size is too large"

    def test_largest_integer_size_is_valid(self):
        assert check_file_validity(FileRecord(name="file.txt", size=2 ** 63 - 1)).valid
