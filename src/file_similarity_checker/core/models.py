"""Pydantic models for file similarity checker."""

import logging
from collections.abc import Iterable
from enum import Enum
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SimilarityType(str, Enum):
    """Tier a similarity group was formed at, strongest first."""

    IDENTICAL = "identical"
    CONTENT = "content"
    NAME = "name"


class FileDescriptor(BaseModel):
    """Represents a single file entering an analysis run."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Full path to the file, unique within a run")
    name: str = Field(default="", description="Display name, derived from the path")
    size: int = Field(..., ge=0, description="File size in bytes")
    file_type: str = Field(default="", description="Extension without the dot, may be empty")
    last_modified: int = Field(default=0, description="Modification time in seconds since epoch")
    hash: str | None = Field(None, description="Content digest, when hashing was performed")

    @model_validator(mode="before")
    @classmethod
    def derive_name(cls, data: Any) -> Any:
        """Fill in the display name from the last path component."""
        if isinstance(data, dict) and not data.get("name") and data.get("path"):
            data = {**data, "name": PurePath(str(data["path"])).name}
        return data

    @property
    def size_mb(self) -> float:
        """File size in megabytes."""
        return self.size / (1024 * 1024)

    def __str__(self) -> str:
        return f"{self.name} ({self.size_mb:.1f} MB)"


class SimilarityGroup(BaseModel):
    """A cluster of files considered likely duplicates of one another."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier unique within one result")
    files: tuple[FileDescriptor, ...] = Field(
        default_factory=tuple, description="Members in discovery order"
    )
    similarity_type: SimilarityType = Field(..., description="Tier of the first qualifying match")
    similarity_score: float = Field(
        default=1.0, gt=0.0, le=1.0, description="Weakest pairwise score among qualifying matches"
    )

    @property
    def file_count(self) -> int:
        """Number of files in this group."""
        return len(self.files)

    @property
    def total_size(self) -> int:
        """Total size of all members in bytes."""
        return sum(file.size for file in self.files)

    @property
    def paths(self) -> list[str]:
        return [file.path for file in self.files]

    def get_largest_file(self) -> FileDescriptor | None:
        """Get the largest file in the group (first one on ties)."""
        if not self.files:
            return None
        return max(self.files, key=lambda f: f.size)

    def __str__(self) -> str:
        return (
            f"Similarity group '{self.id}' ({self.similarity_type.value}, "
            f"{self.file_count} files, score {self.similarity_score:.2f})"
        )


class SimilarityResult(BaseModel):
    """Output of one grouping run."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[SimilarityGroup, ...] = Field(
        default_factory=tuple, description="Groups sorted by similarity score, highest first"
    )
    ungrouped_files: tuple[FileDescriptor, ...] = Field(
        default_factory=tuple, description="Files that matched no other file"
    )

    @property
    def grouped_file_count(self) -> int:
        """Number of files that belong to some group."""
        return sum(group.file_count for group in self.groups)

    @property
    def total_file_count(self) -> int:
        return self.grouped_file_count + len(self.ungrouped_files)

    @property
    def potential_space_savings(self) -> int:
        """Bytes held by every grouped file that is not the largest of its group."""
        savings = 0
        for group in self.groups:
            largest = group.get_largest_file()
            if largest:
                savings += group.total_size - largest.size
        return savings

    def without_paths(self, paths: Iterable[str]) -> "SimilarityResult":
        """
        Build a new result with the given paths removed.

        Args:
            paths: Paths of files that no longer exist (e.g. deleted by the caller)

        Returns:
            A fresh SimilarityResult; this instance is left untouched

        Groups that fall to a single member are dropped and their survivor is
        moved to ungrouped_files. Scores and tiers of surviving groups are kept.
        """
        removed = set(paths)
        groups: list[SimilarityGroup] = []
        ungrouped = [file for file in self.ungrouped_files if file.path not in removed]

        for group in self.groups:
            remaining = [file for file in group.files if file.path not in removed]
            if len(remaining) > 1:
                groups.append(group.model_copy(update={"files": tuple(remaining)}))
            else:
                ungrouped.extend(remaining)

        return SimilarityResult(groups=groups, ungrouped_files=ungrouped)

    def __str__(self) -> str:
        return (
            f"{self.total_file_count} files: {len(self.groups)} similarity groups, "
            f"{len(self.ungrouped_files)} ungrouped"
        )


class ApplicationConfig(BaseModel):
    """Configuration settings for the application."""

    content_threshold: float = Field(
        default=0.8, ge=0.0, le=1.0, description="Name similarity required for same-size files"
    )
    name_threshold: float = Field(
        default=0.9, ge=0.0, le=1.0, description="Name similarity required regardless of size"
    )
    compute_hashes: bool = Field(default=True, description="Hash file contents while scanning")
    hash_chunk_size: int = Field(default=64 * 1024, gt=0, description="Read size used for hashing")
    recursive: bool = Field(default=True, description="Scan subdirectories")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
