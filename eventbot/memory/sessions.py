"""In-memory session store: one wizard session per conversation.

Sessions live for the lifetime of the process. A conversation abandoned
mid-wizard keeps its session until the next message or a restart.
"""

from dataclasses import dataclass, field
from enum import Enum


class ConversationState(Enum):
    """Which field the wizard is currently collecting."""
    AWAITING_TITLE = "awaiting_title"
    AWAITING_DATE = "awaiting_date"
    AWAITING_TIME = "awaiting_time"
    AWAITING_LOCATION = "awaiting_location"
    DONE = "done"


@dataclass
class EventDraft:
    title: str = ""
    date: str = ""      # YYYY-MM-DD
    time: str = ""      # HH:mm
    location: str = ""


@dataclass
class Session:
    state: ConversationState = ConversationState.AWAITING_TITLE
    draft: EventDraft = field(default_factory=EventDraft)


class SessionStore:
    """Maps a conversation id to its active Session."""

    def __init__(self):
        self._sessions = {}

    def get(self, session_id):
        return self._sessions.get(session_id)

    def start(self, session_id):
        """Create a fresh session, replacing any active one."""
        session = Session()
        self._sessions[session_id] = session
        return session

    def clear(self, session_id):
        self._sessions.pop(session_id, None)

    def __contains__(self, session_id):
        return session_id in self._sessions

    def __len__(self):
        return len(self._sessions)
