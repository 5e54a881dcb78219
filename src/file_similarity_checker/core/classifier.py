"""Tiered pairwise classification of file descriptors."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property

from .models import ApplicationConfig, FileDescriptor, SimilarityType
from .similarity import name_similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Classification:
    """Outcome of a successful pairwise classification."""

    similarity_type: SimilarityType
    score: float


class _PairContext:
    """Per-pair view that computes the name similarity at most once."""

    def __init__(self, first: FileDescriptor, second: FileDescriptor):
        self.first = first
        self.second = second

    @cached_property
    def name_score(self) -> float:
        return name_similarity(self.first.name, self.second.name)


# A rule returns the pair's score when its tier matches, otherwise None.
TierRule = Callable[[_PairContext], float | None]


class TieredClassifier:
    """Decides whether two files belong together, and at which tier."""

    def __init__(self, config: ApplicationConfig | None = None):
        """
        Initialize the classifier with thresholds from config.

        Args:
            config: Application configuration, defaults to ApplicationConfig()
        """
        self.config = config or ApplicationConfig()
        self.content_threshold = self.config.content_threshold
        self.name_threshold = self.config.name_threshold

        # Evaluated strictly in this order, first match wins
        self.rules: list[tuple[SimilarityType, TierRule]] = [
            (SimilarityType.IDENTICAL, self._match_identical),
            (SimilarityType.CONTENT, self._match_content),
            (SimilarityType.NAME, self._match_name),
        ]

    def classify(self, first: FileDescriptor, second: FileDescriptor) -> Classification | None:
        """
        Classify a pair of files.

        Args:
            first: File the comparison is anchored on
            second: Candidate file

        Returns:
            Classification with tier and score, or None if the files are unrelated

        Example:
            >>> classifier = TieredClassifier()
            >>> a = FileDescriptor(path="/x/report_v1", size=1024)
            >>> b = FileDescriptor(path="/y/report_v2", size=1024)
            >>> classifier.classify(a, b)
            Classification(similarity_type=<SimilarityType.CONTENT: 'content'>, score=0.875)
        """
        pair = _PairContext(first, second)
        for similarity_type, rule in self.rules:
            score = rule(pair)
            if score is not None:
                return Classification(similarity_type, score)
        return None

    def _match_identical(self, pair: _PairContext) -> float | None:
        """Both content hashes present and equal, regardless of name or size."""
        if pair.first.hash is not None and pair.first.hash == pair.second.hash:
            return 1.0
        return None

    def _match_content(self, pair: _PairContext) -> float | None:
        """Same byte size and similar names."""
        if pair.first.size != pair.second.size:
            return None
        if pair.name_score > self.content_threshold:
            return pair.name_score
        return None

    def _match_name(self, pair: _PairContext) -> float | None:
        """Very similar names, any size."""
        if pair.name_score > self.name_threshold:
            return pair.name_score
        return None
