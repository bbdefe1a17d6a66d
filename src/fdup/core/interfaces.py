"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols use Python's `typing.Protocol` for structural typing, keeping
the scanner, grouper and pipeline swappable in tests.

Key Components:
---------------
- FileScanner: Interface for walking a directory tree and yielding candidate paths.
- FileGrouper: Interface for grouping candidates by size or content hash.
- Deduplicator: Interface for the two-stage pipeline.
"""

from typing import Protocol, List, Iterable, Iterator


# ===== Interfaces =====

class FileScanner(Protocol):
    """
    Interface for walking a file system and yielding candidate paths.

    Methods:
        scan: Lazily yields every entry reachable from the configured root.
    """
    def scan(self) -> Iterator[str]:
        """
        Walk the configured directory.

        Returns:
            Iterator of paths. Entries that cannot be read are skipped, never fatal.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping candidates by size or content hash.

    Each method returns only groups with 2+ members.
    """
    def group_by_size(self, paths: Iterable[str]) -> List[List[str]]:
        """Group paths by the byte length of regular files."""
        ...

    def group_by_content_hash(self, paths: Iterable[str]) -> List[List[str]]:
        """Group paths by their full content digest."""
        ...


class Deduplicator(Protocol):
    """
    Interface for the duplicate detection pipeline (size → full hash).
    """
    def find_duplicates(
        self,
        paths: Iterable[str],
        sort_groups: bool = False
    ) -> Iterator[List[str]]:
        """
        Run the pipeline over candidate paths.

        Args:
            paths: Candidate paths, usually from a FileScanner.
            sort_groups: Sort members of each group lexicographically.

        Returns:
            Lazy, single-pass iterator of groups of byte-identical files.
        """
        ...
