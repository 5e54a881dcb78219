"""Keep/remove recommendations for similarity groups."""

import logging
from dataclasses import dataclass

from .models import FileDescriptor, SimilarityGroup, SimilarityResult, SimilarityType

logger = logging.getLogger(__name__)


def recommend(group: SimilarityGroup) -> FileDescriptor | None:
    """
    Pick the file to keep from a group.

    Args:
        group: Similarity group to analyze

    Returns:
        The recommended file, or None for an empty group

    Among byte-identical files the most descriptively named (longest name)
    copy wins. For every other tier the largest file wins. Ties go to the
    earliest member.
    """
    if not group.files:
        return None

    if group.similarity_type == SimilarityType.IDENTICAL:
        return max(group.files, key=lambda f: len(f.name))

    return max(group.files, key=lambda f: f.size)


def _removable(ranked: list[FileDescriptor]) -> set[str]:
    return {file.path for file in ranked[1:]}


def select_all_but_largest(result: SimilarityResult) -> set[str]:
    """
    Mark every grouped file except the largest of its group as removable.

    Args:
        result: Grouping result to select from

    Returns:
        Paths considered safe to remove
    """
    selected: set[str] = set()
    for group in result.groups:
        ranked = sorted(group.files, key=lambda f: -f.size)
        selected |= _removable(ranked)
    return selected


def smart_select(result: SimilarityResult) -> set[str]:
    """
    Mark every grouped file except the most descriptive one as removable.

    Args:
        result: Grouping result to select from

    Returns:
        Paths considered safe to remove

    Within a group the longest name is kept; equal lengths fall back to the
    most recently modified file.
    """
    selected: set[str] = set()
    for group in result.groups:
        ranked = sorted(group.files, key=lambda f: (-len(f.name), -f.last_modified))
        selected |= _removable(ranked)
    return selected


@dataclass
class AutoSelectionResult:
    """Keep/delete split for a single group."""

    group: SimilarityGroup
    file_to_keep: FileDescriptor
    files_to_delete: set[str]
    reasoning: str


class AutoSelector:
    """Applies a named selection strategy to grouping results."""

    STRATEGIES = {
        "largest": select_all_but_largest,
        "smart": smart_select,
    }

    def __init__(self, strategy: str = "smart"):
        """
        Initialize the auto selector.

        Args:
            strategy: One of "largest" or "smart"

        Raises:
            ValueError: If the strategy is unknown
        """
        if strategy not in self.STRATEGIES:
            raise ValueError(
                f"Unknown selection strategy: {strategy} "
                f"(expected one of {', '.join(sorted(self.STRATEGIES))})"
            )
        self.strategy = strategy

    def select(self, result: SimilarityResult) -> set[str]:
        """Paths the configured strategy marks as removable."""
        selected = self.STRATEGIES[self.strategy](result)
        logger.info(
            f"Selection '{self.strategy}' marked {len(selected)} of "
            f"{result.grouped_file_count} grouped files for removal"
        )
        return selected

    def analyze_group(self, group: SimilarityGroup) -> AutoSelectionResult | None:
        """
        Split a group into the recommended file and the rest.

        Args:
            group: Similarity group to analyze

        Returns:
            AutoSelectionResult, or None if the group is empty
        """
        keep = recommend(group)
        if keep is None:
            logger.debug(f"Skipping empty group {group.id}")
            return None

        if group.similarity_type == SimilarityType.IDENTICAL:
            reason = "identical content, most descriptive name"
        else:
            reason = f"{group.similarity_type.value} match, largest file"

        return AutoSelectionResult(
            group=group,
            file_to_keep=keep,
            files_to_delete={file.path for file in group.files if file.path != keep.path},
            reasoning=f"Keep '{keep.name}': {reason}",
        )

    def process_groups(self, result: SimilarityResult) -> list[AutoSelectionResult]:
        """Run analyze_group over every group of a result."""
        analyses = []
        for group in result.groups:
            analysis = self.analyze_group(group)
            if analysis is not None:
                analyses.append(analysis)
        return analyses
