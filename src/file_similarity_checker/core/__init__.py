"""Core functionality for file similarity checker."""

from .auto_selector import (
    AutoSelectionResult,
    AutoSelector,
    recommend,
    select_all_but_largest,
    smart_select,
)
from .classifier import Classification, TieredClassifier
from .exporter import format_result
from .grouper import SimilarityGrouper, group_files
from .models import (
    ApplicationConfig,
    FileDescriptor,
    SimilarityGroup,
    SimilarityResult,
    SimilarityType,
)
from .normalizer import normalize_name
from .scanner import FileScanner
from .similarity import edit_distance, name_similarity

__all__ = [
    "ApplicationConfig",
    "AutoSelectionResult",
    "AutoSelector",
    "Classification",
    "FileDescriptor",
    "FileScanner",
    "SimilarityGroup",
    "SimilarityGrouper",
    "SimilarityResult",
    "SimilarityType",
    "TieredClassifier",
    "edit_distance",
    "format_result",
    "group_files",
    "name_similarity",
    "normalize_name",
    "recommend",
    "select_all_but_largest",
    "smart_select",
]
