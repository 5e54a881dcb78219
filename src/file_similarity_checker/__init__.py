"""File similarity checker - group likely duplicate files by content hash and name."""

__version__ = "0.1.0"
