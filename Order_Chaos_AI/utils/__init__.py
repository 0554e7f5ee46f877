"""CLI options and logging helpers."""
