"""Header row parsing for seed data files."""

import csv

from seedcheck.processing.filesystem import FileSystem

BOM = "\ufeff"


def parse_header_row(content: str) -> list[str]:
    """Extract normalized column names from the first line of a CSV file.

    The delimiter is ``;`` when the header line contains one and ``,``
    otherwise. Names are trimmed, unquoted and lowercased; empty cells are
    dropped.

    Args:
        content: Full text content of the file

    Returns:
        Column names in header order, empty for an empty file
    """
    lines = content.lstrip(BOM).splitlines()
    first_line = lines[0] if lines else ""
    if not first_line.strip():
        return []
    delimiter = ";" if ";" in first_line else ","
    cells = next(csv.reader([first_line], delimiter=delimiter, skipinitialspace=True), [])
    headers = []
    for cell in cells:
        name = cell.strip().strip('"').strip().lower()
        if name:
            headers.append(name)
    return headers


def read_header(fs: FileSystem, path: str) -> list[str]:
    """Read and parse the header row of a data file.

    Raises:
        FileReadError: Propagated from the file system
    """
    return parse_header_row(fs.read_text(path))
