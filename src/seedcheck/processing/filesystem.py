"""File access capabilities used by discovery and header reading."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from seedcheck.core.errors import FileReadError


class FileSystem(ABC):
    """Directory listing and text reading, relative to a project root."""

    @abstractmethod
    def list_dir(self, folder: str) -> list[str]:
        """List entry names of a folder.

        Raises:
            FileReadError: If the folder is missing or unreadable
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a file as UTF-8 text.

        Raises:
            FileReadError: If the file is missing or unreadable
        """
        pass


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk."""

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def list_dir(self, folder: str) -> list[str]:
        target = self.root / folder
        try:
            return [entry.name for entry in target.iterdir() if entry.is_file()]
        except FileNotFoundError as exc:
            raise FileReadError("Folder not found", path=str(target), not_found=True) from exc
        except OSError as exc:
            raise FileReadError(f"Cannot list folder: {exc}", path=str(target)) from exc

    def read_text(self, path: str) -> str:
        target = self.root / path
        try:
            return target.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileReadError("File not found", path=str(target), not_found=True) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FileReadError(f"Cannot read file: {exc}", path=str(target)) from exc


class InMemoryFileSystem(FileSystem):
    """FileSystem over a ``{path: content}`` mapping.

    A content of ``None`` marks a file that exists but cannot be read.
    """

    def __init__(self, files: Optional[dict[str, Optional[str]]] = None):
        self.files: dict[str, Optional[str]] = dict(files or {})

    def list_dir(self, folder: str) -> list[str]:
        prefix = folder.rstrip("/") + "/"
        names = [
            path[len(prefix):]
            for path in self.files
            if path.startswith(prefix) and "/" not in path[len(prefix):]
        ]
        if not names:
            raise FileReadError("Folder not found", path=folder, not_found=True)
        return names

    def read_text(self, path: str) -> str:
        if path not in self.files:
            raise FileReadError("File not found", path=path, not_found=True)
        content = self.files[path]
        if content is None:
            raise FileReadError("Permission denied", path=path)
        return content
