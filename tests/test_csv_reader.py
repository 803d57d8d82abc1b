"""Tests for header row parsing."""

import pytest

from seedcheck.core.errors import FileReadError
from seedcheck.processing.csv_reader import parse_header_row, read_header
from seedcheck.processing.filesystem import InMemoryFileSystem


class TestParseHeaderRow:
    """Tests for parse_header_row."""

    def test_comma_delimited(self):
        assert parse_header_row("ID,status\n1,open\n") == ["id", "status"]

    def test_semicolon_delimited(self):
        assert parse_header_row("ID;status;customer_ID\n1;open;2\n") == ["id", "status", "customer_id"]

    def test_semicolon_wins_when_present(self):
        assert parse_header_row("ID;name,full\n") == ["id", "name,full"]

    def test_quotes_and_whitespace_stripped(self):
        assert parse_header_row('"ID" , "Status"\r\n') == ["id", "status"]

    def test_byte_order_mark_removed(self):
        assert parse_header_row("\ufeffID,status\n") == ["id", "status"]

    def test_empty_content(self):
        assert parse_header_row("") == []
        assert parse_header_row("\ufeff") == []

    def test_blank_first_line(self):
        assert parse_header_row("\nID,status\n") == []

    def test_empty_cells_dropped(self):
        assert parse_header_row("ID,,status,\n") == ["id", "status"]


class TestReadHeader:
    """Tests for read_header."""

    def test_reads_through_file_system(self):
        fs = InMemoryFileSystem({"db/data/a.csv": "ID;name\n"})

        assert read_header(fs, "db/data/a.csv") == ["id", "name"]

    def test_propagates_read_errors(self):
        fs = InMemoryFileSystem({"db/data/a.csv": None})

        with pytest.raises(FileReadError):
            read_header(fs, "db/data/a.csv")
