"""
Core duplicate detection engine: scanner, key extractors, grouper, and pipeline.

This package contains the whole of fdup's logic:
- FileScannerImpl: recursive directory traversal
- file_size / content_hash: key extractors returning KeyResult
- group_by + FileGrouperImpl: parallel key computation, sequential grouping
- DeduplicatorImpl: two-stage pipeline (size → full SHA-512 hash)
- Models: KeyResult, KeyStatus, Stage, DeduplicationParams

All components are pure Python with no third-party runtime dependencies.
"""

from .models import KeyResult, KeyStatus, Stage, DeduplicationParams
from .hasher import HashConfig, file_size, content_hash
from .grouper import group_by, FileGrouperImpl
from .scanner import FileScannerImpl
from .deduplicator import DeduplicatorImpl, duplicate_files

__all__ = [
    "KeyResult",
    "KeyStatus",
    "Stage",
    "DeduplicationParams",
    "HashConfig",
    "file_size",
    "content_hash",
    "group_by",
    "FileGrouperImpl",
    "FileScannerImpl",
    "DeduplicatorImpl",
    "duplicate_files",
]
