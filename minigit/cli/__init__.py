"""Command-line interface for mini-git."""
