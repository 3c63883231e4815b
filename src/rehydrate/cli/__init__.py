"""Command-line interface for Rehydrate."""
