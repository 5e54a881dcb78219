"""Filename normalization used before names are compared."""

import re

# Anything that is not an ASCII letter or digit once lower-cased.
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")


def normalize_name(name: str) -> str:
    """
    Canonicalize a filename for comparison.

    Args:
        name: The filename to normalize

    Returns:
        The lower-cased name with every non-alphanumeric character removed

    Example:
        >>> normalize_name("Report_V1.pdf")
        'reportv1pdf'
        >>> normalize_name("report-v1") == normalize_name("report_v1")
        True

    Delimiters such as ``_``, ``-``, ``.`` and spaces are stripped rather than
    replaced, so names differing only in punctuation normalize identically.
    """
    return _NON_ALPHANUMERIC.sub("", name.lower())
