"""
Utility functions.
"""

import re
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional


# Characters outside the XML 1.0 Char production
_INVALID_XML_CHARS = re.compile(
    "[^\u0009\u000A\u000D\u0020-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]"
)

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def strip_invalid_xml_chars(text: Optional[str]) -> str:
    """Drop characters XML 1.0 cannot represent (control chars, lone surrogates)."""
    if not text:
        return ""
    return _INVALID_XML_CHARS.sub("", text)


def escape_xml(text: Optional[str]) -> str:
    """Escape the five reserved XML characters. None/empty becomes ''."""
    text = strip_invalid_xml_chars(text)
    if not text:
        return ""
    # & first so entities produced below are not escaped again
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def parse_iso_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.
    
    Accepts a trailing 'Z', date-only values and naive timestamps (read as UTC).
    Returns None if the value is empty or unparseable.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_rfc2822(dt: datetime) -> str:
    """Format as an HTTP date, e.g. 'Sun, 05 Jan 2025 00:00:00 GMT'."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)


def format_long_date(dt: datetime) -> str:
    """Format as 'January 5, 2025' (UTC calendar day)."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return f"{dt:%B} {dt.day}, {dt.year}"


def format_number(value: int) -> str:
    """Format an integer with thousands separators (1600 -> '1,600')."""
    return f"{value:,}"
