"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Directory traversal collaborator for the duplicate finder.
Features:
- Recursively walks the tree with os.walk (symlinks are never descended into)
- Yields every entry lazily; eligibility is decided later by the key extractors
- Unreadable directories are logged and skipped, never fatal
"""

import os
import time
import logging
from pathlib import Path
from typing import Iterator

from fdup.core.interfaces import FileScanner

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Walks a directory tree and yields the path of every entry under it.

    Attributes:
        root_dir: Root directory to scan
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def scan(self) -> Iterator[str]:
        """
        Yields the root and every entry reachable beneath it, directories included.
        Raises RuntimeError if the root does not exist.
        """
        logger.debug(f"Root directory: {self.root_dir}")

        root_path = Path(self.root_dir)
        if not root_path.exists() and not root_path.is_symlink():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)

        yield self.root_dir
        if not root_path.is_dir():
            return

        start_time = time.time()
        processed_entries = 1

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            for name in dirs:
                yield os.path.join(root, name)
            for name in files:
                yield os.path.join(root, name)
            processed_entries += len(dirs) + len(files)

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan completed. Found {processed_entries} entries in {elapsed_time:.2f} seconds")

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """os.walk error hook: report the unreadable directory and keep walking."""
        logger.warning(f"⚠️ Cannot read directory {error.filename}: {error.strerror or error}")
