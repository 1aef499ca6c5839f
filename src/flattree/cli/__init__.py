"""Command-line interface for flattree."""
