START_COMMANDS = ("/addevent", "/start")

TITLE_PROMPT = "📝 Enter the event title:"
DATE_PROMPT = "📅 Enter the event date (e.g. 2025-03-10, 10/03/2025, 10 March 2025):"
TIME_PROMPT = "⏰ Enter the event time (e.g. 09:30, 9.30, 9:30 PM):"
LOCATION_PROMPT = "📍 Enter the event location:"

DATE_FORMAT_ERROR = "⚠️ Invalid date format. Please try again:"
TIME_FORMAT_ERROR = "⚠️ Invalid time format. Please try again:"

CONFIRMATION = """✅ Event saved!

🔗 <b>Google Calendar</b>: <a href="{link}">Add to calendar: {title}</a>

/addevent - Create another event"""
