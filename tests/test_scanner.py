"""
Unit tests for FileScannerImpl.
Verifies recursive traversal, root handling and walk error reporting.
"""
import logging
import os
from types import SimpleNamespace

import pytest

from fdup.core import scanner as scanner_module
from fdup.core.scanner import FileScannerImpl


class TestFileScannerImpl:
    """Test directory traversal."""

    def test_yields_every_entry_recursively(self, nested_tree, temp_dir):
        entries = set(FileScannerImpl(str(temp_dir)).scan())

        for path in nested_tree.values():
            assert str(path) in entries
        assert str(temp_dir) in entries
        assert str(temp_dir / "d1" / "d2" / "d3" / "d4") in entries
        # 1 root + 4 directories + 5 files
        assert len(entries) == 10

    def test_scan_is_lazy(self, temp_dir):
        """Nothing is checked until iteration starts."""
        scanner = FileScannerImpl(str(temp_dir / "missing"))
        entries = scanner.scan()
        with pytest.raises(RuntimeError, match="does not exist"):
            next(entries)

    def test_file_root_yields_only_itself(self, temp_dir):
        path = temp_dir / "single.txt"
        path.write_bytes(b"data")

        assert list(FileScannerImpl(str(path)).scan()) == [str(path)]

    def test_does_not_descend_into_symlinked_dirs(self, temp_dir):
        real = temp_dir / "real"
        real.mkdir()
        (real / "inner.txt").write_bytes(b"x")
        (temp_dir / "link").symlink_to(real, target_is_directory=True)

        entries = set(FileScannerImpl(str(temp_dir)).scan())

        assert str(temp_dir / "link") in entries
        assert str(temp_dir / "link" / "inner.txt") not in entries
        assert str(real / "inner.txt") in entries

    def test_walk_errors_are_logged_not_raised(self, caplog):
        error = PermissionError(13, "Permission denied", "/locked")

        with caplog.at_level(logging.WARNING, logger="fdup.core.scanner"):
            FileScannerImpl._on_walk_error(error)

        assert "Cannot read directory /locked" in caplog.text

    def test_unreadable_directory_is_skipped(self, temp_dir, monkeypatch, caplog):
        (temp_dir / "ok.txt").write_bytes(b"ok")

        def walk_with_error(top, onerror=None):
            onerror(PermissionError(13, "Permission denied", str(temp_dir / "locked")))
            yield from os.walk(top, onerror=onerror)

        monkeypatch.setattr(scanner_module, "os", SimpleNamespace(walk=walk_with_error, path=os.path))

        with caplog.at_level(logging.WARNING, logger="fdup.core.scanner"):
            entries = list(FileScannerImpl(str(temp_dir)).scan())

        assert str(temp_dir / "ok.txt") in entries
        assert "locked" in caplog.text
