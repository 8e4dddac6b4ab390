"""Tests for escaping and date helpers."""
from datetime import datetime, timezone

import pytest

from shoprss.core.utils import (
    escape_xml,
    format_long_date,
    format_number,
    format_rfc2822,
    parse_iso_datetime,
    strip_invalid_xml_chars,
)


@pytest.mark.parametrize("text", ["Renegade Raider", "100% legit", "Épique — 🎵", ""])
def test_escape_xml_safe_text_unchanged(text):
    """Text without reserved characters is returned as is."""
    assert escape_xml(text) == text


def test_escape_xml_reserved_characters():
    """Each reserved character is replaced by its entity."""
    assert escape_xml("&") == "&amp;"
    assert escape_xml("<") == "&lt;"
    assert escape_xml(">") == "&gt;"
    assert escape_xml('"') == "&quot;"
    assert escape_xml("'") == "&apos;"


def test_escape_xml_no_raw_reserved_characters_left():
    """Only entity forms remain after escaping mixed text."""
    result = escape_xml("""Tom & Jerry's <"Best"> Pack""")
    assert result == "Tom &amp; Jerry&apos;s &lt;&quot;Best&quot;&gt; Pack"
    for char in "<>\"'":
        assert char not in result
    assert result.replace("&amp;", "").replace("&lt;", "").replace("&gt;", "").replace(
        "&quot;", "").replace("&apos;", "").count("&") == 0


def test_escape_xml_none():
    """None escapes to empty string."""
    assert escape_xml(None) == ""


def test_parse_iso_datetime_zulu():
    """Trailing Z is read as UTC."""
    assert parse_iso_datetime("2025-01-05T00:00:00Z") == datetime(2025, 1, 5, tzinfo=timezone.utc)


def test_parse_iso_datetime_offset_converted_to_utc():
    """Offsets are normalized to UTC."""
    assert parse_iso_datetime("2025-01-05T02:30:00+02:00") == datetime(
        2025, 1, 5, 0, 30, tzinfo=timezone.utc
    )


def test_parse_iso_datetime_date_only_and_naive():
    """Date-only and naive values are read as UTC."""
    assert parse_iso_datetime("2025-01-05") == datetime(2025, 1, 5, tzinfo=timezone.utc)
    assert parse_iso_datetime("2025-01-05T12:00:00") == datetime(2025, 1, 5, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, "", "not a date", "2025-13-45", 20250105])
def test_parse_iso_datetime_invalid(value):
    """Unparseable values give None."""
    assert parse_iso_datetime(value) is None


def test_format_rfc2822():
    """HTTP-date format in GMT."""
    assert format_rfc2822(datetime(2025, 1, 5, tzinfo=timezone.utc)) == "Sun, 05 Jan 2025 00:00:00 GMT"


def test_format_long_date():
    """Month name, day without padding, year."""
    assert format_long_date(datetime(2025, 1, 5, tzinfo=timezone.utc)) == "January 5, 2025"


def test_format_number():
    """Thousands separators."""
    assert format_number(1600) == "1,600"
    assert format_number(950) == "950"
    assert format_number(1234567) == "1,234,567"


def test_strip_invalid_xml_chars():
    """Control characters and non-characters are dropped; tabs, newlines and emoji stay."""
    assert strip_invalid_xml_chars("a\u0000b\u0001c\u000bd\u001fe\ufffef\uffff") == "abcdef"
    assert strip_invalid_xml_chars("tab\tnew\nline\r 🎵 Épique") == "tab\tnew\nline\r 🎵 Épique"
    assert strip_invalid_xml_chars(None) == ""


def test_escape_xml_drops_invalid_chars():
    """Escaping also removes characters XML cannot hold."""
    assert escape_xml("Bad\u0001<Name>") == "Bad&lt;Name&gt;"
