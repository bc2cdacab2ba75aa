"""Shared text and date helpers."""
import logging
import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateparser
from dateutil import tz

from getnews.models import Timestamp

logger = logging.getLogger(__name__)

# Default number of display columns for a rendered table.
DEFAULT_DISPLAY_WIDTH = 80

DATE_NOT_AVAILABLE = "Publication date not available"

_WHITESPACE = re.compile(r"\s+")

# Named zones allowed by RFC 2822 besides UT/GMT, which dateutil already knows.
_RFC2822_ZONES = {
    "EST": tz.tzoffset("EST", -5 * 3600),
    "EDT": tz.tzoffset("EDT", -4 * 3600),
    "CST": tz.tzoffset("CST", -6 * 3600),
    "CDT": tz.tzoffset("CDT", -5 * 3600),
    "MST": tz.tzoffset("MST", -7 * 3600),
    "MDT": tz.tzoffset("MDT", -6 * 3600),
    "PST": tz.tzoffset("PST", -8 * 3600),
    "PDT": tz.tzoffset("PDT", -7 * 3600),
}

# Two defaults differing in year and month: a string that parses differently
# under each is missing its year or month. A missing day falls back to the 1st.
_FILL_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 1))


def wrap_text(text, max_line_length: Optional[int] = None) -> str:
    """Greedily wrap text into lines shorter than ``max_line_length``.

    All whitespace in the input, including line breaks and indents, is
    collapsed before respacing. A word longer than the limit is kept whole on
    a line of its own. The default width leaves room for the border and
    padding of a single-column table.
    """
    if not max_line_length:
        max_line_length = DEFAULT_DISPLAY_WIDTH - 4
    normalized = _WHITESPACE.sub(" ", str(text).strip())
    if not normalized:
        return ""

    lines = []
    current = ""
    line_length = 0
    for word in normalized.split(" "):
        # A word that lands exactly on the limit still breaks.
        if line_length + len(word) >= max_line_length:
            lines.append(current)
            current = word
            line_length = len(word)
            continue
        line_length += len(word) + (1 if current else 0)
        current = f"{current} {word}" if current else word
    lines.append(current)
    # The first word can overflow an empty line; drop that empty lead line.
    if lines[0] == "" and len(lines) > 1:
        lines = lines[1:]
    return "\n".join(lines)


def ordinal(day: int) -> str:
    """Return ``day`` with its English ordinal suffix (1st, 2nd, 11th...)."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def parse_timestamp(value: Timestamp) -> Optional[datetime]:
    """Parse a timestamp into an aware datetime, or None if it is unusable.

    Strings go through dateutil (ISO 8601, RFC 2822, ...) and must name at
    least a year and month; numbers are epoch milliseconds, and naive values
    are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        else:
            text = str(value).strip()
            if not text:
                return None
            dt, alt = (dateparser.parse(text, default=default, tzinfos=_RFC2822_ZONES)
                       for default in _FILL_DEFAULTS)
            if dt.date() != alt.date():
                logger.debug(f"[Dates] Incomplete date {value!r}")
                return None
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"[Dates] Could not parse {value!r}: {e}")
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_date(timestamp: Timestamp, timezone_name: Optional[str] = None) -> str:
    """Format a publish timestamp as ``Published on Mar 3rd, 2024 at 4:05pm EST``.

    Returns ``DATE_NOT_AVAILABLE`` when the timestamp cannot be parsed.
    """
    dt = parse_timestamp(timestamp)
    if dt is None:
        return DATE_NOT_AVAILABLE

    zone = tz.UTC
    if timezone_name:
        resolved = tz.gettz(timezone_name)
        if resolved is None:
            logger.warning(f"[Dates] Unknown timezone {timezone_name!r}, using UTC")
        else:
            zone = resolved
    try:
        local = dt.astimezone(zone)
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"[Dates] Could not convert {timestamp!r}: {e}")
        return DATE_NOT_AVAILABLE

    day = f"{local.strftime('%b')} {ordinal(local.day)}, {local.year}"
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    time = f"{hour}:{local.minute:02d}{meridiem} {local.tzname() or ''}"
    return f"Published on {day} at {time}".strip()
