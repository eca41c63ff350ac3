"""Command-line interface for dirins."""
