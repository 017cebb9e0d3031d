"""Formatting helpers for terminal output."""

from datetime import datetime


def truncate_text(text: str, max_length: int = 60) -> str:
    """Shorten text to fit a table cell.

    Args:
        text: Text to truncate
        max_length: Maximum length including the trailing ellipsis

    Returns:
        Original text if it fits, otherwise a shortened copy ending in "..."
    """
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def format_updated(value: datetime) -> str:
    """Render a last-updated timestamp as e.g. "March 5, 2024"."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"
