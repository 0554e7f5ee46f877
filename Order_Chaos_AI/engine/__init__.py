"""Rule engine: win detection, move validation, error types."""
