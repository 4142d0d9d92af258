"""
Tests for filename and timestamp helpers.
"""

import re
import pytest
from datetime import datetime, timezone

from ytnotes.utils.helpers import sanitize_filename, get_timestamp, make_file_name, MAX_NAME_BYTES


def test_sanitize_replaces_invalid_characters():
    assert sanitize_filename('a/b\\c:d*e?f"g<h>i|j') == "a-b-c-d-e-f-g-h-i-j"


def test_sanitize_keeps_other_characters():
    assert sanitize_filename("My Talk - Part 1 (2024)") == "My Talk - Part 1 (2024)"


def test_timestamp_format():
    now = datetime(2026, 10, 18, 10, 11, 12, 345000, tzinfo=timezone.utc)
    assert get_timestamp(now) == "2026-10-18T10-11-12-345Z"


def test_timestamp_current_time_has_no_separators():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}-\d{2}-\d{2}-\d{3}Z", get_timestamp())


def test_make_file_name():
    now = datetime(2026, 10, 18, 10, 11, 12, 345000, tzinfo=timezone.utc)
    name = make_file_name("Testing: A Guide?", now)

    assert name == "Testing- A Guide--2026-10-18T10-11-12-345Z.md"
    assert not re.search(r'[\\/*?:"<>|]', name)


LONG_TITLES = ["日本語のタイトル" * 12 + "日本語の", "🎥" * 70, "a" * 300]


@pytest.mark.parametrize("title", LONG_TITLES)
def test_sanitize_caps_encoded_length(title):
    sanitized = sanitize_filename(title)

    assert len(sanitized.encode("utf-8")) <= MAX_NAME_BYTES
    assert title.startswith(sanitized)


@pytest.mark.parametrize("title", LONG_TITLES)
def test_make_file_name_fits_filesystem_limit(title):
    name = make_file_name(title)

    assert len(name.encode("utf-8")) <= 255
    assert name.endswith("Z.md")
