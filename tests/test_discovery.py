"""Tests for data file discovery and file system access."""

import pytest

from seedcheck.core.errors import FileReadError
from seedcheck.processing.discovery import discover_files
from seedcheck.processing.filesystem import InMemoryFileSystem, LocalFileSystem


class TestDiscoverFiles:
    """Tests for discover_files."""

    def test_collects_files_with_folder_provenance(self):
        fs = InMemoryFileSystem({
            "db/data/sales-Order.csv": "ID\n",
            "db/csv/sales-Customer.csv": "ID\n",
        })

        files = discover_files(fs, ["db/data", "db/csv", "db/src/csv"])

        assert [(f.folder, f.original_name) for f in files] == [
            ("db/data", "sales-Order.csv"),
            ("db/csv", "sales-Customer.csv"),
        ]

    def test_normalized_name_is_lowercase(self):
        fs = InMemoryFileSystem({"db/data/Sales-Order.CSV": "ID\n"})

        files = discover_files(fs, ["db/data"])

        assert files[0].normalized_name == "sales-order.csv"

    def test_extension_filter_ignores_case(self):
        fs = InMemoryFileSystem({
            "db/data/a-B.CSV": "",
            "db/data/readme.md": "",
            "db/data/a-C.csv": "",
        })

        names = [f.original_name for f in discover_files(fs, ["db/data"])]

        assert names == ["a-B.CSV", "a-C.csv"]

    def test_names_sorted_within_folder(self):
        fs = InMemoryFileSystem({"db/data/b.csv": "", "db/data/a.csv": ""})

        names = [f.original_name for f in discover_files(fs, ["db/data"])]

        assert names == ["a.csv", "b.csv"]

    def test_missing_folders_contribute_nothing(self):
        fs = InMemoryFileSystem({})

        assert discover_files(fs, ["db/data", "db/csv"]) == []

    def test_path_joins_folder_and_name(self):
        fs = InMemoryFileSystem({"db/data/sales-Order.csv": ""})

        assert discover_files(fs, ["db/data"])[0].path == "db/data/sales-Order.csv"


class TestLocalFileSystem:
    """Tests for the disk-backed file system."""

    def test_list_and_read(self, tmp_path):
        folder = tmp_path / "db" / "data"
        folder.mkdir(parents=True)
        (folder / "sales-Order.csv").write_text("ID;status\n", encoding="utf-8")
        (folder / "nested").mkdir()
        fs = LocalFileSystem(tmp_path)

        assert fs.list_dir("db/data") == ["sales-Order.csv"]
        assert fs.read_text("db/data/sales-Order.csv") == "ID;status\n"

    def test_missing_folder_raises_not_found(self, tmp_path):
        fs = LocalFileSystem(tmp_path)

        with pytest.raises(FileReadError) as exc:
            fs.list_dir("db/data")

        assert exc.value.not_found is True

    def test_missing_file_raises_not_found(self, tmp_path):
        fs = LocalFileSystem(tmp_path)

        with pytest.raises(FileReadError) as exc:
            fs.read_text("db/data/x.csv")

        assert exc.value.not_found is True

    def test_discovery_on_disk(self, tmp_path):
        folder = tmp_path / "db" / "src" / "csv"
        folder.mkdir(parents=True)
        (folder / "sales-Order.csv").write_text("ID\n", encoding="utf-8")

        files = discover_files(LocalFileSystem(tmp_path), ["db/data", "db/src/csv"])

        assert [f.folder for f in files] == ["db/src/csv"]


class TestInMemoryFileSystem:
    """Tests for the in-memory file system."""

    def test_unreadable_file(self):
        fs = InMemoryFileSystem({"db/data/a.csv": None})

        with pytest.raises(FileReadError) as exc:
            fs.read_text("db/data/a.csv")

        assert exc.value.not_found is False

    def test_list_dir_excludes_nested_paths(self):
        fs = InMemoryFileSystem({"db/a.csv": "", "db/data/b.csv": ""})

        assert fs.list_dir("db") == ["a.csv"]
