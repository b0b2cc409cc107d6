"""Command-line interface for timekeep."""
