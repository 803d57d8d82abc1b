"""Discovery of candidate seed data files."""

from typing import Iterable

from seedcheck.core.errors import FileReadError
from seedcheck.core.logging import get_logger
from seedcheck.models.findings import DiscoveredFile
from seedcheck.processing.filesystem import FileSystem

logger = get_logger(__name__)


def discover_files(
    fs: FileSystem,
    folders: Iterable[str],
    extension: str = ".csv",
) -> list[DiscoveredFile]:
    """Scan folders for data files.

    Folders are scanned in the given order and names within a folder are
    sorted, so repeated scans of the same tree yield the same list. A folder
    that cannot be listed contributes zero files.

    Args:
        fs: File system to scan
        folders: Folder paths relative to the file system root
        extension: File extension to keep, compared ignoring case

    Returns:
        Discovered files with their folder provenance
    """
    suffix = extension.lower()
    discovered: list[DiscoveredFile] = []
    for folder in folders:
        try:
            names = fs.list_dir(folder)
        except FileReadError as exc:
            if exc.not_found:
                logger.debug("folder_not_found", folder=folder)
            else:
                logger.warning("folder_unreadable", folder=folder, error=exc.message)
            continue
        matching = sorted(name for name in names if name.lower().endswith(suffix))
        discovered.extend(DiscoveredFile(original_name=name, folder=folder) for name in matching)

    logger.info("files_discovered", count=len(discovered))
    return discovered
