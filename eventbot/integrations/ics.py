"""iCalendar (.ics) record for a single event, built with vobject.

DTSTART is written as floating local time (no TZID, no Z) so calendar apps
place the event at the same wall-clock time the user typed.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

import vobject

PRODID = "-//eventbot//Telegram event wizard//EN"


@dataclass(frozen=True)
class IcsRecord:
    title: str
    start: tuple        # (year, month, day, hour, minute), local time
    duration: timedelta
    location: str

    def start_datetime(self):
        return datetime(*self.start)

    def to_vcalendar(self):
        cal = vobject.iCalendar()
        cal.add("prodid").value = PRODID
        vevent = cal.add("vevent")
        vevent.add("summary").value = self.title
        vevent.add("dtstart").value = self.start_datetime()
        vevent.add("duration").value = self.duration
        vevent.add("location").value = self.location
        return cal

    def serialize(self):
        """RFC 5545 text; UID and DTSTAMP are filled in by vobject."""
        return self.to_vcalendar().serialize()

    def filename(self):
        return f"event-{self.start_datetime().strftime('%Y%m%d-%H%M')}.ics"
