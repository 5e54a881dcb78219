"""Edit-distance based similarity between filenames."""

from rapidfuzz.distance import Levenshtein

from .normalizer import normalize_name


def edit_distance(first: str, second: str) -> int:
    """
    Levenshtein distance with unit cost for insertion, deletion and substitution.

    Args:
        first: First string, compared as-is
        second: Second string, compared as-is

    Returns:
        Minimum number of single-character edits turning one string into the other
    """
    return Levenshtein.distance(first, second, weights=(1, 1, 1))


def name_similarity(name1: str, name2: str) -> float:
    """
    Calculate similarity between two filenames.

    Args:
        name1: First filename
        name2: Second filename

    Returns:
        Similarity score between 0.0 (completely different) and 1.0 (identical
        after normalization)

    Example:
        >>> name_similarity("report_v1", "report_v2")
        0.875
        >>> name_similarity("Report-Final", "report_final")
        1.0
    """
    normalized1 = normalize_name(name1)
    normalized2 = normalize_name(name2)

    max_length = max(len(normalized1), len(normalized2))
    if max_length == 0:
        # Two names with no alphanumeric characters at all are declared identical
        return 1.0

    distance = edit_distance(normalized1, normalized2)
    return 1.0 - distance / max_length
