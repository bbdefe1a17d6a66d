"""
fdup: find groups of files with byte-identical content.

Core features:
- Two-stage detection: size grouping, then full SHA-512 content hash
- Keys computed in parallel on a thread pool, unreadable files reported and skipped
- Read-only: reports groups, never deletes or links files
- CLI interface: `fdup ROOT [--sort]`
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("fdup")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    from pathlib import Path

    # Source checkout: src/fdup/__init__.py -> pyproject.toml
    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API, only what users should import directly
from fdup.commands import DeduplicationCommand
from fdup.core import (
    DeduplicationParams, KeyResult, KeyStatus, group_by, file_size, content_hash, duplicate_files)

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "KeyResult",
    "KeyStatus",
    "group_by",
    "file_size",
    "content_hash",
    "duplicate_files",
    "__version__",
]
