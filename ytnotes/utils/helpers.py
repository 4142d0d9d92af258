"""
Helper utility functions for the YouTube notes application.
"""

import os
import re
from datetime import datetime, timezone
from typing import Optional


INVALID_FILENAME_CHARS = r'[\\/*?:"<>|]'
MAX_NAME_BYTES = 200


def sanitize_filename(filename: str) -> str:
    """
    Sanitize a string to be used as a filename.

    Args:
        filename: The filename to sanitize

    Returns:
        Sanitized filename, at most MAX_NAME_BYTES bytes in UTF-8
    """
    sanitized = re.sub(INVALID_FILENAME_CHARS, "-", filename)
    # Limit length in bytes
    encoded = sanitized.encode("utf-8")
    if len(encoded) > MAX_NAME_BYTES:
        sanitized = encoded[:MAX_NAME_BYTES].decode("utf-8", "ignore")
    return sanitized


def get_timestamp(now: Optional[datetime] = None) -> str:
    """
    Get the current UTC time as a filename-safe ISO-8601 string.

    Args:
        now: Time to format (defaults to the current UTC time)

    Returns:
        Timestamp such as 2026-10-18T10-11-12-345Z
    """
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    iso = iso.replace("+00:00", "Z")
    return re.sub(r"[:.]", "-", iso)


def make_file_name(name: str, now: Optional[datetime] = None) -> str:
    """Build the Markdown file name for a title or video ID."""
    return f"{sanitize_filename(name)}-{get_timestamp(now)}.md"


def ensure_dir(directory: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path to ensure exists
    """
    os.makedirs(directory, exist_ok=True)
