"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

deduplicator.py
Implements the two-stage duplicate detection pipeline:
    size → full content hash (SHA-512)

Size grouping is cheap and removes most singletons; hashing only runs
inside groups of equal-sized files.
"""
import time
import logging
from typing import List, Iterable, Iterator, Optional

from fdup.core.models import Stage
from fdup.core.grouper import FileGrouperImpl
from fdup.core.interfaces import Deduplicator
from fdup.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


# =============================
# Main Deduplicator Class
# =============================
class DeduplicatorImpl(Deduplicator):
    """
    Runs size grouping, then content-hash grouping within each size group.
    Groups are produced lazily: a size group is hashed only when the caller reaches it.
    """
    def __init__(self, grouper: Optional[FileGrouperImpl] = None):
        self.grouper = grouper or FileGrouperImpl()

    def find_duplicates(
        self,
        paths: Iterable[str],
        sort_groups: bool = False
    ) -> Iterator[List[str]]:
        """
        Main pipeline.
        Args:
            paths: Candidate paths (anything; non-regular files are skipped)
            sort_groups: Sort members of each group lexicographically
        Yields:
            Lists of paths with byte-identical content, 2+ paths each
        """
        start_time = time.time()
        size_groups = self.grouper.group_by_size(paths)
        DeduplicatorImpl._log_stage(Stage.SIZE, size_groups, time.time() - start_time)

        for size_group in size_groups:
            start_time = time.time()
            hash_groups = self.grouper.group_by_content_hash(size_group)
            DeduplicatorImpl._log_stage(Stage.FULL, hash_groups, time.time() - start_time)

            for group in hash_groups:
                yield sorted(group) if sort_groups else group

    @staticmethod
    def _log_stage(stage: Stage, groups: List[List[str]], duration: float) -> None:
        """Stage summary: GROUPS / FILES / TIME."""
        files = sum(len(g) for g in groups)
        logger.debug(f"[{stage.value}] {len(groups)} groups / {files} files / {duration:.3f}s")


def duplicate_files(
        root_dir: str,
        sort_groups: bool = False,
        max_workers: Optional[int] = None
) -> Iterator[List[str]]:
    """
    Finds groups of byte-identical files under root_dir.
    Returns a lazy, single-pass iterator; call again to re-run the search.
    """
    scanner = FileScannerImpl(root_dir)
    deduplicator = DeduplicatorImpl(FileGrouperImpl(max_workers=max_workers))
    return deduplicator.find_duplicates(scanner.scan(), sort_groups=sort_groups)
