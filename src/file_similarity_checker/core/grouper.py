"""Similarity grouping module for organizing likely duplicates."""

import logging
from collections.abc import Sequence

from .classifier import TieredClassifier
from .models import (
    ApplicationConfig,
    FileDescriptor,
    SimilarityGroup,
    SimilarityResult,
    SimilarityType,
)

logger = logging.getLogger(__name__)


class SimilarityGrouper:
    """Partitions files into similarity groups using a seed-scan pass."""

    def __init__(self, config: ApplicationConfig | None = None):
        """Initialize the grouper with a tiered classifier and optional config."""
        self.config = config or ApplicationConfig()
        self.classifier = TieredClassifier(self.config)

    def group(self, files: Sequence[FileDescriptor]) -> SimilarityResult:
        """
        Group files into clusters of likely duplicates.

        Args:
            files: File descriptors in discovery order, paths unique

        Returns:
            SimilarityResult with groups sorted by score (highest first) and the
            files that matched nothing

        The first unprocessed file seeds a group and every remaining file is
        compared against that seed only. Matches are never re-checked against
        each other, so membership is not transitive: with A~B, B~C and A!~C,
        C does not join A's group. A group's tier is that of its first match
        and its score is the weakest score among its matches.

        Comparisons are pairwise, O(k^2) for k files, each costing an edit
        distance over the two names. Workable up to roughly ten thousand files.
        """
        pending = list(files)
        groups: list[SimilarityGroup] = []
        ungrouped: list[FileDescriptor] = []

        while pending:
            seed, candidates = pending[0], pending[1:]
            members = [seed]
            matched: set[int] = set()
            similarity_type: SimilarityType | None = None
            similarity_score = 1.0

            for index, candidate in enumerate(candidates):
                classification = self.classifier.classify(seed, candidate)
                if classification is None:
                    continue

                members.append(candidate)
                matched.add(index)
                if similarity_type is None:
                    similarity_type = classification.similarity_type
                similarity_score = min(similarity_score, classification.score)

            pending = [file for index, file in enumerate(candidates) if index not in matched]

            if similarity_type is None:
                ungrouped.append(seed)
                continue

            group = SimilarityGroup(
                id=f"group-{len(groups)}",
                files=members,
                similarity_type=similarity_type,
                similarity_score=similarity_score,
            )
            groups.append(group)
            logger.debug(
                f"Created similarity group {group.id}: {seed.name} "
                f"({group.file_count} files, {similarity_type.value}, "
                f"score: {similarity_score:.3f})"
            )

        # sort() is stable, so equal scores keep creation order
        groups.sort(key=lambda g: -g.similarity_score)

        logger.info(
            f"Grouped {len(files)} files into {len(groups)} similarity groups "
            f"({len(ungrouped)} ungrouped)"
        )
        return SimilarityResult(groups=groups, ungrouped_files=ungrouped)


def group_files(
    files: Sequence[FileDescriptor], config: ApplicationConfig | None = None
) -> SimilarityResult:
    """Group files with a one-off SimilarityGrouper."""
    return SimilarityGrouper(config).group(files)
