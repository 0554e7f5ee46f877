"""Timestamped event logging for matches."""

import datetime


def timestamp():
    return datetime.datetime.now().strftime("%H:%M:%S")


def log_event(message, tag=None):
    """Print `[HH:MM:SS] message`, optionally prefixed with a tag such as 'selfplay'."""
    prefix = f"[{timestamp()}]" if tag is None else f"[{timestamp()}] {tag}:"
    print(f"{prefix} {message}")
