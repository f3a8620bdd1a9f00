"""Command-line interface for metaclean."""
