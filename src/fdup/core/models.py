"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for key extraction and duplicate grouping.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


# =============================
# Enums
# =============================

class KeyStatus(Enum):
    """
    Outcome of computing a grouping key for a single candidate.
    """
    OK = "ok"
    SKIP = "skip"
    FAIL = "fail"


class Stage(str, Enum):
    SIZE = "Size grouping"
    FULL = "Full Hash"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class KeyResult:
    """
    Tri-state result of a key function.

    OK carries the key, SKIP means the candidate is not eligible and is dropped
    silently, FAIL carries a message that is reported before the candidate is dropped.
    """
    status: KeyStatus
    key: Any = None
    message: Optional[str] = None

    def __post_init__(self):
        if self.status is KeyStatus.OK and self.message is not None:
            raise ValueError("OK result cannot carry an error message")
        if self.status is not KeyStatus.OK and self.key is not None:
            raise ValueError(f"{self.status.name} result cannot carry a key")
        if self.status is KeyStatus.FAIL and not self.message:
            raise ValueError("FAIL result requires a message")
        if self.status is KeyStatus.SKIP and self.message is not None:
            raise ValueError("SKIP result cannot carry an error message")

    @classmethod
    def ok(cls, key: Any) -> "KeyResult":
        return cls(KeyStatus.OK, key=key)

    @classmethod
    def skip(cls) -> "KeyResult":
        return cls(KeyStatus.SKIP)

    @classmethod
    def fail(cls, message: str) -> "KeyResult":
        return cls(KeyStatus.FAIL, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status is KeyStatus.OK

    def __repr__(self):
        if self.status is KeyStatus.OK:
            return f"<KeyResult ok key={self.key!r}>"
        if self.status is KeyStatus.FAIL:
            return f"<KeyResult fail message={self.message!r}>"
        return "<KeyResult skip>"


"""
DTO for deduplication parameters with built-in validation.
Interface-agnostic: used by the CLI and by library callers.
"""

@dataclass
class DeduplicationParams:
    """Parameters for a duplicate search with validation."""
    root_dir: str
    sort_groups: bool = False
    max_workers: Optional[int] = None

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("Worker count must be at least 1")
