"""
Shared fixtures for duplicate finder tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'fdup' package is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def nested_tree(temp_dir) -> Dict[str, Path]:
    """
    Nested tree with two duplicate groups and one unique file:
    - d1/f1, d1/f2: both empty
    - d1/d2/f3, d1/d2/d3/d4/f5: "a\\nbc2"
    - d1/d2/d3/f4: "abcde" (same size as f3/f5, different content)
    """
    (temp_dir / "d1" / "d2" / "d3" / "d4").mkdir(parents=True)

    contents = {
        "d1/f1": "",
        "d1/f2": "",
        "d1/d2/f3": "a\nbc2",
        "d1/d2/d3/f4": "abcde",
        "d1/d2/d3/d4/f5": "a\nbc2",
    }
    files = {}
    for rel, content in contents.items():
        path = temp_dir / rel
        path.write_bytes(content.encode())
        files[rel] = path
    return files


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical files (1KB of 'A'), one in a subdirectory
    - 2 identical files (2KB of 'B')
    - 2 same-size files with different content
    - 1 unique file
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size (1500B), different content: must not be grouped
    files["same_size_1"] = temp_dir / "same_size_1.txt"
    files["same_size_1"].write_bytes(b"C" * 1500)
    files["same_size_2"] = temp_dir / "same_size_2.txt"
    files["same_size_2"].write_bytes(b"D" * 1500)

    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"E" * 2500)

    return files
