"""Turn a completed EventDraft into the calendar artifacts sent back to the user."""

import html
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from eventbot.config import EVENT_DURATION_MINUTES, EVENT_TIMEZONE, GOOGLE_CALENDAR_URL
from eventbot.core.prompts import CONFIRMATION
from eventbot.integrations.google_calendar import build_calendar_link
from eventbot.integrations.ics import IcsRecord

DEFAULT_DURATION = timedelta(minutes=EVENT_DURATION_MINUTES)


@dataclass(frozen=True)
class DerivedEvent:
    start: datetime
    end: datetime
    calendar_link_url: str
    ics_record: IcsRecord


def anchor_datetime(date_str, time_str, timezone_id=EVENT_TIMEZONE):
    """Canonical YYYY-MM-DD + HH:mm as an aware datetime in timezone_id.

    Round-tripping through UTC moves wall times that fall in a DST gap forward.
    """
    tz = ZoneInfo(timezone_id)
    naive = datetime.strptime(f"{date_str} {time_str}", "%Y-%m-%d %H:%M")
    return naive.replace(tzinfo=tz).astimezone(timezone.utc).astimezone(tz)


def add_absolute(start, delta):
    """Add elapsed time rather than wall-clock time (matters across DST changes)."""
    return (start.astimezone(timezone.utc) + delta).astimezone(start.tzinfo)


def build_event(draft, timezone_id=EVENT_TIMEZONE, duration=DEFAULT_DURATION,
                base_url=GOOGLE_CALENDAR_URL):
    start = anchor_datetime(draft.date, draft.time, timezone_id)
    end = add_absolute(start, duration)

    link = build_calendar_link(draft.title, start, end, draft.location, timezone_id, base_url)
    record = IcsRecord(
        title=draft.title,
        start=(start.year, start.month, start.day, start.hour, start.minute),
        duration=duration,
        location=draft.location,
    )
    return DerivedEvent(start=start, end=end, calendar_link_url=link, ics_record=record)


def compose_confirmation(event, title):
    """HTML confirmation with the calendar link as a clickable anchor."""
    return CONFIRMATION.format(
        link=html.escape(event.calendar_link_url, quote=True),
        title=html.escape(title),
    )
