"""Strict date and time parsing against ordered tables of human-readable formats.

Patterns use moment-style tokens (YYYY, MM, D, HH, h, A, ...). Each pattern is
compiled into an anchored regex; the first pattern that fully matches AND
yields a real calendar date / clock time wins.
"""

import re
from datetime import date, time
from typing import Optional

DATE_FORMATS = [
    "YYYY-MM-DD", "YYYY MM DD", "YYYY/MM/DD",
    "YY-MM-DD", "YY MM DD", "YY/MM/DD",
    "DD-MM-YYYY", "DD/MM/YYYY", "DD.MM.YYYY",
    "D-M-YYYY", "D/M/YYYY",
    "DD-MM-YY", "DD/MM/YY", "DD.MM.YY",
    "D-M-YY", "D/M/YY",
    "DD MMM YYYY", "D MMM YYYY",
    "DD MMMM YYYY", "D MMMM YYYY",
    "MMMM D, YYYY", "MMMM DD, YYYY", "DD,MM,YYYY",
]

TIME_FORMATS = [
    "HH:mm", "H:mm", "HH.mm", "H.mm",
    "HH-mm", "H-mm", "HH mm", "H mm",
    "HH:mm:ss", "H:mm:ss", "hh:mm A", "h:mm A",
    "hh:mm:ss A", "h:mm:ss A",
]

MONTH_NAMES = [
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
]
MONTH_ABBREVIATIONS = [name[:3] for name in MONTH_NAMES]

# Longest tokens first so "YYYY" is never read as two "YY".
_TOKEN_RE = re.compile(r"YYYY|YY|MMMM|MMM|MM|M|DD|D|HH|H|hh|h|mm|ss|A")

_TOKENS = {
    "YYYY": r"(?P<year4>[0-9]{4})",
    "YY": r"(?P<year2>[0-9]{2})",
    "MMMM": r"(?P<month_name>[a-z]+)",
    "MMM": r"(?P<month_abbr>[a-z]+)",
    "MM": r"(?P<month>[0-9]{2})",
    "M": r"(?P<month>[0-9]{1,2})",
    "DD": r"(?P<day>[0-9]{2})",
    "D": r"(?P<day>[0-9]{1,2})",
    "HH": r"(?P<hour>[0-9]{2})",
    "H": r"(?P<hour>[0-9]{1,2})",
    "hh": r"(?P<hour12>[0-9]{2})",
    "h": r"(?P<hour12>[0-9]{1,2})",
    "mm": r"(?P<minute>[0-9]{2})",
    "ss": r"(?P<second>[0-9]{2})",
    "A": r"(?P<meridiem>[ap]\.?m?\.?)",
}


def compile_format(pattern):
    """Turn a moment-style format string into a case-insensitive, ASCII-only regex."""
    parts = []
    pos = 0
    for match in _TOKEN_RE.finditer(pattern):
        parts.append(re.escape(pattern[pos:match.start()]))
        parts.append(_TOKENS[match.group()])
        pos = match.end()
    parts.append(re.escape(pattern[pos:]))
    return re.compile("".join(parts), re.IGNORECASE | re.ASCII)


_DATE_PATTERNS = [compile_format(fmt) for fmt in DATE_FORMATS]
_TIME_PATTERNS = [compile_format(fmt) for fmt in TIME_FORMATS]


def _expand_year(fields):
    if fields.get("year4") is not None:
        return int(fields["year4"])
    short = int(fields["year2"])
    return short + (2000 if short <= 68 else 1900)


def _month(fields):
    if fields.get("month") is not None:
        return int(fields["month"])
    if fields.get("month_name") is not None:
        name = fields["month_name"].lower()
        return MONTH_NAMES.index(name) + 1 if name in MONTH_NAMES else None
    abbr = fields["month_abbr"].lower()
    return MONTH_ABBREVIATIONS.index(abbr) + 1 if abbr in MONTH_ABBREVIATIONS else None


def _date_from_fields(fields) -> Optional[date]:
    month = _month(fields)
    if month is None:
        return None
    try:
        return date(_expand_year(fields), month, int(fields["day"]))
    except ValueError:
        return None


def _time_from_fields(fields) -> Optional[time]:
    if fields.get("hour12") is not None:
        hour = int(fields["hour12"])
        if not 1 <= hour <= 12:
            return None
        is_pm = fields["meridiem"][0].lower() == "p"
        hour = hour % 12 + (12 if is_pm else 0)
    else:
        hour = int(fields["hour"])
    minute = int(fields["minute"])
    second = int(fields.get("second") or 0)
    # 24:00 (and 24:00:00) is end-of-day midnight
    if hour == 24 and minute == 0 and second == 0:
        hour = 0
    if hour > 23 or minute > 59 or second > 59:
        return None
    return time(hour, minute)


def parse_date(text: str) -> Optional[date]:
    """Return the date of the first format that fully matches, or None."""
    for regex in _DATE_PATTERNS:
        match = regex.fullmatch(text)
        if match is None:
            continue
        parsed = _date_from_fields(match.groupdict())
        if parsed is not None:
            return parsed
    return None


def parse_time(text: str) -> Optional[time]:
    """Return the time of the first format that fully matches, or None.

    Seconds are validated but dropped, matching the HH:mm canonical form.
    """
    for regex in _TIME_PATTERNS:
        match = regex.fullmatch(text)
        if match is None:
            continue
        parsed = _time_from_fields(match.groupdict())
        if parsed is not None:
            return parsed
    return None


def normalize_date(text: str) -> Optional[str]:
    """Canonical YYYY-MM-DD for a recognized date, else None."""
    parsed = parse_date(text)
    return parsed.isoformat() if parsed else None


def normalize_time(text: str) -> Optional[str]:
    """Canonical 24-hour HH:mm for a recognized time, else None."""
    parsed = parse_time(text)
    return parsed.strftime("%H:%M") if parsed else None
