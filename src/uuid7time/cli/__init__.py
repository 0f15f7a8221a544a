"""Command-line interface for uuid7time."""
