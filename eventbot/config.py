"""Configuration loaded from environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()


# Telegram
TELEGRAM_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
ALLOWED_USERS = [
    int(uid.strip())
    for uid in os.getenv("TELEGRAM_ALLOWED_USER_IDS", "").split(",")
    if uid.strip()
]

# Events
EVENT_TIMEZONE = os.getenv("EVENT_TIMEZONE", "Europe/Kyiv")
EVENT_DURATION_MINUTES = int(os.getenv("EVENT_DURATION_MINUTES", "60"))

# Google Calendar
GOOGLE_CALENDAR_URL = os.getenv(
    "GOOGLE_CALENDAR_URL", "https://calendar.google.com/calendar/render"
)

# iCalendar
SEND_ICS_ATTACHMENT = os.getenv("SEND_ICS_ATTACHMENT", "true").lower() == "true"
