from urllib.parse import quote

from eventbot.config import GOOGLE_CALENDAR_URL

# Same character set JavaScript's encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "!~*'()"


def encode_component(value):
    return quote(value, safe=_URI_COMPONENT_SAFE)


def format_link_datetime(dt):
    """Wall-clock time without offset or Z; the zone travels in ctz."""
    return dt.strftime("%Y%m%dT%H%M%S")


def build_calendar_link(title, start, end, location, timezone_id, base_url=GOOGLE_CALENDAR_URL):
    """Prefilled 'create event' link for Google Calendar."""
    dates = f"{format_link_datetime(start)}/{format_link_datetime(end)}"
    return "".join([
        base_url,
        "?action=TEMPLATE",
        f"&text={encode_component(title)}",
        f"&dates={dates}",
        f"&location={encode_component(location)}",
        f"&ctz={encode_component(timezone_id)}",
        "&sf=true&output=xml",
    ])
