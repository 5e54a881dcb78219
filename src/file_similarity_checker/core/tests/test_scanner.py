"""Tests for file scanning and hashing."""

import hashlib
import os
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from ..models import ApplicationConfig
from ..scanner import FileScanner


class TestFileScanner:
    """Test cases for FileScanner."""

    def setup_method(self) -> None:
        """Set up test fixtures."""
        self.scanner = FileScanner()

    def write_file(self, path: Path, content: bytes = b"content") -> Path:
        """Helper method to create a file with content."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    def test_get_file_descriptor(self, tmp_path: Path) -> None:
        """Test building a descriptor from a real file."""
        file_path = self.write_file(tmp_path / "Report.PDF", b"12345")
        os.utime(file_path, (1_600_000_000, 1_600_000_000))

        descriptor = self.scanner.get_file_descriptor(file_path)

        assert descriptor is not None
        assert descriptor.path == str(file_path)
        assert descriptor.name == "Report.PDF"
        assert descriptor.size == 5
        assert descriptor.file_type == "PDF"
        assert descriptor.last_modified == 1_600_000_000
        assert descriptor.hash is None

    def test_get_file_descriptor_without_extension(self, tmp_path: Path) -> None:
        """Test that files without an extension get an empty type."""
        descriptor = self.scanner.get_file_descriptor(self.write_file(tmp_path / "Makefile"))

        assert descriptor.file_type == ""

    def test_get_file_descriptor_missing_file(self, tmp_path: Path) -> None:
        """Test that missing files yield None."""
        assert self.scanner.get_file_descriptor(tmp_path / "missing.txt") is None

    def test_get_file_descriptor_directory(self, tmp_path: Path) -> None:
        """Test that directories yield None."""
        assert self.scanner.get_file_descriptor(tmp_path) is None

    def test_calculate_hash(self, tmp_path: Path) -> None:
        """Test that the digest is SHA-256 of the contents."""
        content = b"x" * 200_000
        file_path = self.write_file(tmp_path / "big.bin", content)

        assert self.scanner.calculate_hash(file_path) == hashlib.sha256(content).hexdigest()

    def test_calculate_hash_small_chunks(self, tmp_path: Path) -> None:
        """Test that chunked reading produces the same digest."""
        scanner = FileScanner(ApplicationConfig(hash_chunk_size=3))
        file_path = self.write_file(tmp_path / "f.txt", b"hello world")

        assert scanner.calculate_hash(file_path) == hashlib.sha256(b"hello world").hexdigest()

    def test_calculate_hash_missing_file(self, tmp_path: Path) -> None:
        """Test that hashing a missing file raises OSError."""
        with pytest.raises(OSError):
            self.scanner.calculate_hash(tmp_path / "missing.bin")

    def test_discover_files_recursive(self, tmp_path: Path) -> None:
        """Test recursive discovery."""
        self.write_file(tmp_path / "a.txt")
        self.write_file(tmp_path / "sub" / "b.txt")

        found = list(self.scanner.discover_files(tmp_path, recursive=True))

        assert sorted(p.name for p in found) == ["a.txt", "b.txt"]

    def test_discover_files_non_recursive(self, tmp_path: Path) -> None:
        """Test that subdirectories are skipped when not recursive."""
        self.write_file(tmp_path / "a.txt")
        self.write_file(tmp_path / "sub" / "b.txt")

        found = list(self.scanner.discover_files(tmp_path, recursive=False))

        assert [p.name for p in found] == ["a.txt"]

    def test_discover_files_missing_directory(self, tmp_path: Path) -> None:
        """Test that a missing directory raises OSError."""
        with pytest.raises(OSError, match="does not exist"):
            list(self.scanner.discover_files(tmp_path / "nope"))

    def test_discover_files_not_a_directory(self, tmp_path: Path) -> None:
        """Test that a file path raises OSError."""
        file_path = self.write_file(tmp_path / "a.txt")

        with pytest.raises(OSError, match="not a directory"):
            list(self.scanner.discover_files(file_path))

    def test_scan_directory_with_hashes(self, tmp_path: Path) -> None:
        """Test that scanning hashes contents by default."""
        self.write_file(tmp_path / "one.txt", b"same")
        self.write_file(tmp_path / "two.txt", b"same")
        self.write_file(tmp_path / "three.txt", b"other")

        descriptors = self.scanner.scan_directory(tmp_path)

        assert len(descriptors) == 3
        hashes = {d.name: d.hash for d in descriptors}
        assert hashes["one.txt"] == hashes["two.txt"] == hashlib.sha256(b"same").hexdigest()
        assert hashes["three.txt"] != hashes["one.txt"]

    def test_scan_directory_without_hashes(self, tmp_path: Path) -> None:
        """Test that hashing can be switched off."""
        self.write_file(tmp_path / "one.txt")

        descriptors = self.scanner.scan_directory(tmp_path, compute_hashes=False)

        assert descriptors[0].hash is None

    def test_scan_directory_uses_config(self, tmp_path: Path) -> None:
        """Test that recursion and hashing default to the configuration."""
        self.write_file(tmp_path / "a.txt")
        self.write_file(tmp_path / "sub" / "b.txt")
        scanner = FileScanner(ApplicationConfig(recursive=False, compute_hashes=False))

        descriptors = scanner.scan_directory(tmp_path)

        assert [d.name for d in descriptors] == ["a.txt"]
        assert descriptors[0].hash is None

    def test_scan_directory_is_ordered(self, tmp_path: Path) -> None:
        """Test that discovery order is deterministic."""
        for name in ["c.txt", "a.txt", "b.txt"]:
            self.write_file(tmp_path / name)

        descriptors = self.scanner.scan_directory(tmp_path)

        assert [d.name for d in descriptors] == ["a.txt", "b.txt", "c.txt"]

    def test_hash_failure_keeps_descriptor(self, tmp_path: Path) -> None:
        """Test that a file that cannot be hashed is kept without a hash."""
        file_path = self.write_file(tmp_path / "locked.txt")

        with patch.object(self.scanner, "calculate_hash", side_effect=PermissionError("denied")):
            descriptors = self.scanner.scan_files([file_path])

        assert len(descriptors) == 1
        assert descriptors[0].hash is None

    def test_scan_files_skips_missing(self, tmp_path: Path) -> None:
        """Test that inaccessible files are left out."""
        present = self.write_file(tmp_path / "present.txt")

        descriptors = self.scanner.scan_files([present, tmp_path / "gone.txt"])

        assert [d.name for d in descriptors] == ["present.txt"]

    def test_progress_callback(self, tmp_path: Path) -> None:
        """Test that progress is reported per file."""
        files = [self.write_file(tmp_path / f"f{i}.txt") for i in range(3)]
        callback = Mock()

        self.scanner.scan_files(files, progress_callback=callback)

        assert callback.call_count == 3
        callback.assert_called_with(3, 3, "Processing f2.txt...")
