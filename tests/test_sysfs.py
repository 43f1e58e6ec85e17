#!/usr/bin/env python3
"""
Tests for attribute file reading
"""
import os

import pytest

from md_stats.exceptions import AttributeParseError, AttributeReadError
from md_stats.sysfs import (
    INTEGER, MD_ATTRIBUTES, RAID_ATTRIBUTES, STRING,
    parse_int64, read_attributes, read_value,
)

from conftest import write_attributes


class TestReadValue:
    """Test cases for single attribute files"""

    def test_string_is_stripped(self, tmp_path):
        path = tmp_path / "level"
        path.write_text("  raid1\n")
        assert read_value(str(path), STRING) == "raid1"

    def test_integer(self, tmp_path):
        path = tmp_path / "size"
        path.write_text("1048576\n")
        assert read_value(str(path), INTEGER) == 1048576

    def test_negative_integer(self, tmp_path):
        path = tmp_path / "degraded"
        path.write_text("-1\n")
        assert read_value(str(path), INTEGER) == -1

    def test_non_numeric_integer(self, tmp_path):
        path = tmp_path / "size"
        path.write_text("abc\n")
        with pytest.raises(AttributeParseError) as excinfo:
            read_value(str(path), INTEGER)
        assert excinfo.value.value == "abc"
        assert excinfo.value.path == str(path)

    def test_empty_integer(self, tmp_path):
        path = tmp_path / "size"
        path.write_text("\n")
        with pytest.raises(AttributeParseError):
            read_value(str(path), INTEGER)

    def test_missing_file(self, tmp_path):
        with pytest.raises(AttributeReadError):
            read_value(str(tmp_path / "nope"), STRING)

    def test_invalid_utf8_is_replaced(self, tmp_path):
        path = tmp_path / "array_state"
        path.write_bytes(b"clean\xff\n")
        assert read_value(str(path), STRING) == "clean�"

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(AttributeReadError):
            read_value(str(tmp_path), STRING)


class TestParseInt64:
    """Test cases for the integer parser"""

    @pytest.mark.parametrize("raw,expected", [
        ("0", 0),
        ("+7", 7),
        ("-42", -42),
        ("007", 7),
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
    ])
    def test_valid(self, raw, expected):
        assert parse_int64("f", raw) == expected

    @pytest.mark.parametrize("raw", [
        "1_000", "1.5", "0x10", "12 34", "--1", "9223372036854775808", "-9223372036854775809",
    ])
    def test_invalid(self, raw):
        with pytest.raises(AttributeParseError):
            parse_int64("f", raw)


class TestReadAttributes:
    """Test cases for the directory scan"""

    def test_only_present_files_are_returned(self, tmp_path):
        write_attributes(str(tmp_path), {"size": 2048, "dev": "9:0"})
        assert read_attributes(str(tmp_path), RAID_ATTRIBUTES) == {"size": 2048, "dev": "9:0"}

    def test_unknown_files_are_ignored(self, tmp_path):
        write_attributes(str(tmp_path), {"level": "raid5", "chunk_size": "abc", "uevent": "x"})
        assert read_attributes(str(tmp_path), MD_ATTRIBUTES) == {"level": "raid5"}

    def test_subdirectories_are_ignored(self, tmp_path):
        os.makedirs(str(tmp_path / "holders"))
        os.makedirs(str(tmp_path / "md"))
        assert read_attributes(str(tmp_path), RAID_ATTRIBUTES) == {}

    def test_missing_directory(self, tmp_path):
        with pytest.raises(AttributeReadError) as excinfo:
            read_attributes(str(tmp_path / "md"), MD_ATTRIBUTES)
        assert excinfo.value.path == str(tmp_path / "md")

    def test_parse_error_aborts_scan(self, tmp_path):
        write_attributes(str(tmp_path), {"size": "abc", "ro": 0})
        with pytest.raises(AttributeParseError):
            read_attributes(str(tmp_path), RAID_ATTRIBUTES)

    def test_tables_cover_every_field(self):
        assert set(RAID_ATTRIBUTES) == {
            "capability", "dev", "discard_alignment", "ext_range",
            "range", "removable", "ro", "size",
        }
        assert set(MD_ATTRIBUTES) == {
            "level", "array_state", "degraded", "max_read_errors", "metadata_version",
            "mismatch_cnt", "preread_bypass_threshold", "raid_disks", "sync_action",
        }
