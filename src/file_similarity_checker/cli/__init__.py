"""Command-line interface for file similarity checker."""
