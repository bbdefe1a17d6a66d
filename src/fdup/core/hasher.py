"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Key extractors for duplicate grouping: file size and full content digest.

Both functions map a path to a KeyResult and never raise on I/O errors,
so they can run side by side on a thread pool.
"""

import hashlib
import os
import stat

from fdup.core.models import KeyResult


class HashConfig:
    CHUNK_SIZE = 128 * 1024  # bytes read per call while hashing
    ALGORITHM = "sha512"
    DUPLICATE_THRESHOLD = 1  # keep groups with more than one member


def file_size(path: str) -> KeyResult:
    """
    Returns the size in bytes if path is a regular file.
    Symlinks are not followed: a link is skipped, not measured.
    """
    try:
        st = os.lstat(path)
    except OSError as e:
        return KeyResult.fail(str(e))

    if not stat.S_ISREG(st.st_mode):
        return KeyResult.skip()
    return KeyResult.ok(st.st_size)


def content_hash(path: str) -> KeyResult:
    """
    Computes the SHA-512 digest of the whole file, reading it in fixed-size chunks.
    """
    hasher = hashlib.new(HashConfig.ALGORITHM)
    try:
        f = open(path, 'rb')
    except OSError as e:
        return KeyResult.fail(str(e))

    with f:
        try:
            for chunk in iter(lambda: f.read(HashConfig.CHUNK_SIZE), b''):
                hasher.update(chunk)
        except OSError as e:
            return KeyResult.fail(f"failed reading to buffer: {e}")

    return KeyResult.ok(hasher.digest())
