"""Thin file-system reader used by configuration discovery."""

import os
from pathlib import Path


class FileSystem:
    """Reads directories and text files from the local disk."""

    def list_files(self, directory: str | Path) -> list[str]:
        """
        Return the names of regular files in a directory.

        Raises:
            OSError: If the directory cannot be read
        """
        with os.scandir(directory) as entries:
            return [entry.name for entry in entries if entry.is_file()]

    def read_text(self, path: str | Path) -> str:
        return Path(path).read_text(encoding="utf-8")
