"""File scanning module for discovering files and hashing their contents."""

import hashlib
import logging
import time
from collections.abc import Generator
from pathlib import Path
from typing import Protocol

from .models import ApplicationConfig, FileDescriptor

logger = logging.getLogger(__name__)


class ProgressCallback(Protocol):
    """Protocol for progress callback functions."""

    def __call__(self, current: int, total: int | None = None, message: str = "") -> None:
        """Called to report progress during scanning."""
        ...


class FileScanner:
    """Scans directories for files and builds descriptors for them."""

    def __init__(self, config: ApplicationConfig | None = None):
        """
        Initialize the scanner with configuration.

        Args:
            config: Application configuration, defaults to ApplicationConfig()
        """
        self.config = config or ApplicationConfig()

    def get_file_descriptor(self, file_path: Path) -> FileDescriptor | None:
        """
        Build a descriptor for a single file, without hashing it.

        Args:
            file_path: Path to the file

        Returns:
            FileDescriptor if successful, None if the file cannot be accessed
        """
        try:
            if not file_path.is_file():
                logger.warning(f"Path is not a file: {file_path}")
                return None

            stat = file_path.stat()

            return FileDescriptor(
                path=str(file_path),
                name=file_path.name,
                size=stat.st_size,
                file_type=file_path.suffix.lstrip("."),
                last_modified=int(stat.st_mtime),
            )

        except OSError as e:
            logger.error(f"Error accessing file {file_path}: {e}")
            return None

    def calculate_hash(self, file_path: Path) -> str:
        """
        Calculate the SHA-256 digest of a file's contents.

        Args:
            file_path: Path to the file

        Returns:
            Lower-case hex digest

        Raises:
            OSError: If the file cannot be read
        """
        digest = hashlib.sha256()
        with open(file_path, "rb") as f:
            while chunk := f.read(self.config.hash_chunk_size):
                digest.update(chunk)
        return digest.hexdigest()

    def discover_files(self, directory: Path, recursive: bool = True) -> Generator[Path, None, None]:
        """
        Discover all files in a directory, optionally recursively.

        Args:
            directory: Directory to scan
            recursive: Whether to scan subdirectories recursively

        Yields:
            Path objects for discovered files

        Raises:
            OSError: If directory cannot be accessed
        """
        if not directory.exists():
            raise OSError(f"Directory does not exist: {directory}")

        if not directory.is_dir():
            raise OSError(f"Path is not a directory: {directory}")

        logger.info(f"Starting file discovery in: {directory}")
        files_found = 0

        file_iterator = directory.rglob("*") if recursive else directory.glob("*")
        for file_path in sorted(file_iterator):
            if file_path.is_file():
                files_found += 1
                yield file_path

        logger.info(f"File discovery complete. Found {files_found} total files.")

    def scan_files(
        self,
        file_paths: list[Path],
        compute_hashes: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> list[FileDescriptor]:
        """
        Build descriptors for a specific list of files.

        Args:
            file_paths: Files to describe
            compute_hashes: Hash contents; defaults to the configured setting
            progress_callback: Optional callback for progress updates

        Returns:
            Descriptors for every accessible file, in input order
        """
        if compute_hashes is None:
            compute_hashes = self.config.compute_hashes

        descriptors = []
        total_files = len(file_paths)

        for i, file_path in enumerate(file_paths):
            if progress_callback:
                progress_callback(i + 1, total_files, f"Processing {file_path.name}...")

            descriptor = self.get_file_descriptor(file_path)
            if descriptor is None:
                continue

            if compute_hashes:
                try:
                    descriptor = descriptor.model_copy(
                        update={"hash": self.calculate_hash(file_path)}
                    )
                except OSError as e:
                    # Still comparable by size and name
                    logger.warning(f"Could not hash {file_path}: {e}")

            descriptors.append(descriptor)

        return descriptors

    def scan_directory(
        self,
        directory: Path,
        recursive: bool | None = None,
        compute_hashes: bool | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> list[FileDescriptor]:
        """
        Scan a directory and return descriptors for every file found.

        Args:
            directory: Directory to scan
            recursive: Whether to scan subdirectories; defaults to the configured setting
            compute_hashes: Hash contents; defaults to the configured setting
            progress_callback: Optional callback for progress updates

        Returns:
            List of FileDescriptor objects in discovery order

        Raises:
            OSError: If directory cannot be accessed
        """
        if recursive is None:
            recursive = self.config.recursive

        start_time = time.time()
        logger.info(f"Starting file scan: {directory}")

        all_files = list(self.discover_files(directory, recursive))
        descriptors = self.scan_files(all_files, compute_hashes, progress_callback)

        scan_duration = time.time() - start_time
        logger.info(
            f"Scan complete: {len(descriptors)} files described "
            f"out of {len(all_files)} discovered in {scan_duration:.2f} seconds"
        )

        return descriptors
