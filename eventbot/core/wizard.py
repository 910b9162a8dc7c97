"""Create-event wizard: collects title, date, time and location over several turns.

One Session per conversation lives in the SessionStore. Every inbound text is
routed to the step for the session's current state; each step returns an
explicit Transition (advance, or stay on a validation failure).
"""

from dataclasses import dataclass
from typing import Optional

from eventbot.config import EVENT_TIMEZONE, SEND_ICS_ATTACHMENT
from eventbot.core import prompts
from eventbot.core.builder import DEFAULT_DURATION, build_event, compose_confirmation
from eventbot.core.formats import normalize_date, normalize_time
from eventbot.memory.sessions import ConversationState, SessionStore


@dataclass
class OutgoingMessage:
    text: str
    parse_mode: Optional[str] = None
    remove_keyboard: bool = False
    document: Optional[bytes] = None
    document_name: Optional[str] = None


@dataclass
class Transition:
    state: ConversationState
    message: OutgoingMessage


def is_start_command(text):
    """True for /addevent or /start, with or without an @botname suffix."""
    if not text:
        return False
    command = text.split()[0].split("@")[0].lower()
    return command in prompts.START_COMMANDS


class EventWizard:
    def __init__(self, store=None, send_ics=SEND_ICS_ATTACHMENT,
                 timezone_id=EVENT_TIMEZONE, duration=DEFAULT_DURATION):
        self.store = store if store is not None else SessionStore()
        self.send_ics = send_ics
        self.timezone_id = timezone_id
        self.duration = duration
        self._steps = {
            ConversationState.AWAITING_TITLE: self._collect_title,
            ConversationState.AWAITING_DATE: self._collect_date,
            ConversationState.AWAITING_TIME: self._collect_time,
            ConversationState.AWAITING_LOCATION: self._collect_location,
        }

    def handle_input(self, session_id, text) -> Optional[OutgoingMessage]:
        """Run one wizard turn. Returns None when the conversation has no active wizard."""
        text = (text or "").strip()

        if is_start_command(text):
            self.store.start(session_id)
            print(f"[{session_id}] wizard started")
            return OutgoingMessage(prompts.TITLE_PROMPT)

        session = self.store.get(session_id)
        if session is None:
            return None

        previous = session.state
        transition = self._steps[previous](session.draft, text)
        print(f"[{session_id}] {previous.name} -> {transition.state.name}")

        if transition.state is ConversationState.DONE:
            self.store.clear(session_id)
        else:
            session.state = transition.state
        return transition.message

    def _collect_title(self, draft, text):
        draft.title = text
        return Transition(ConversationState.AWAITING_DATE, OutgoingMessage(prompts.DATE_PROMPT))

    def _collect_date(self, draft, text):
        canonical = normalize_date(text)
        if canonical is None:
            return Transition(ConversationState.AWAITING_DATE, OutgoingMessage(prompts.DATE_FORMAT_ERROR))
        draft.date = canonical
        return Transition(ConversationState.AWAITING_TIME, OutgoingMessage(prompts.TIME_PROMPT))

    def _collect_time(self, draft, text):
        canonical = normalize_time(text)
        if canonical is None:
            return Transition(ConversationState.AWAITING_TIME, OutgoingMessage(prompts.TIME_FORMAT_ERROR))
        draft.time = canonical
        return Transition(ConversationState.AWAITING_LOCATION, OutgoingMessage(prompts.LOCATION_PROMPT))

    def _collect_location(self, draft, text):
        draft.location = text
        event = build_event(draft, self.timezone_id, self.duration)
        print(f"  [event] {draft.title!r} {event.start.isoformat()} -> {event.end.isoformat()}")

        message = OutgoingMessage(
            compose_confirmation(event, draft.title),
            parse_mode="HTML",
            remove_keyboard=True,
        )
        if self.send_ics:
            message.document = event.ics_record.serialize().encode("utf-8")
            message.document_name = event.ics_record.filename()
        return Transition(ConversationState.DONE, message)
