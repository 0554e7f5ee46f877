"""Presentation helpers for terminal play."""
