"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Generic disjoint grouping engine and its binding to the file key extractors.

Keys are computed in parallel on a thread pool, then folded into a
key -> items mapping on the calling thread once every task has finished.
"""

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from typing import List, Dict, Any, Callable, Iterable, Optional, Tuple, TypeVar

from fdup.core.interfaces import FileGrouper
from fdup.core.models import KeyResult, KeyStatus
from fdup.core.hasher import HashConfig, file_size, content_hash

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _extract(key_func: Callable[[T], KeyResult], item: T) -> KeyResult:
    """Runs key_func inside a worker; anything it raises becomes a failure for this item.
    MemoryError is fatal and propagates."""
    try:
        return key_func(item)
    except MemoryError:
        raise
    except Exception as e:
        return KeyResult.fail(f"{type(e).__name__}: {e}")


def group_by(
        key_func: Callable[[T], KeyResult],
        threshold: int,
        items: Iterable[T],
        max_workers: Optional[int] = None
) -> List[List[T]]:
    """
    Partitions items into groups sharing an equal key.

    Args:
        key_func: Thread-safe function returning a KeyResult for an item
        threshold: Only groups with more than this many items are returned
        items: Items to partition
        max_workers: Thread pool width (None = executor default)
    Returns:
        List of disjoint groups, in no particular order
    """
    if threshold < 0:
        raise ValueError("Threshold cannot be negative")

    items = list(items)
    if not items:
        return []

    # Map phase: executor.map blocks until every key is computed
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(lambda item: _extract(key_func, item), items))

    pairs: List[Tuple[Any, T]] = []
    skipped_items = 0
    for item, result in zip(items, results):
        if result.is_ok:
            pairs.append((result.key, item))
        elif result.status is KeyStatus.FAIL:
            logger.warning(f"⚠️ Error processing {item}: {result.message}")
            skipped_items += 1

    if skipped_items > 0:
        logger.warning(f"⚠️ Skipped {skipped_items} items due to key computation errors")

    # Fold phase: single-threaded
    groups: Dict[Any, List[T]] = defaultdict(list)
    for key, item in pairs:
        groups[key].append(item)

    return [group for group in groups.values() if len(group) > threshold]


class FileGrouperImpl(FileGrouper):
    """
    Groups file paths by size and by full content hash.
    Key functions are injected for flexibility and testability.
    """

    def __init__(
            self,
            size_func: Callable[[str], KeyResult] = file_size,
            hash_func: Callable[[str], KeyResult] = content_hash,
            max_workers: Optional[int] = None
    ):
        self.size_func = size_func
        self.hash_func = hash_func
        self.max_workers = max_workers

    def group_by_size(self, paths: Iterable[str]) -> List[List[str]]:
        """Groups regular files by their size."""
        return group_by(self.size_func, HashConfig.DUPLICATE_THRESHOLD, paths, self.max_workers)

    def group_by_content_hash(self, paths: Iterable[str]) -> List[List[str]]:
        """Groups files by full content hash."""
        return group_by(self.hash_func, HashConfig.DUPLICATE_THRESHOLD, paths, self.max_workers)
