"""Computer opponent: one-ply move policy and candidate ranking."""
