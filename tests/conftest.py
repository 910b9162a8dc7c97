"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import timedelta
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from eventbot.core.wizard import EventWizard  # noqa: E402
from eventbot.memory.sessions import EventDraft, SessionStore  # noqa: E402


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def wizard(store):
    """Wizard pinned to the default Kyiv zone and a one-hour window."""
    return EventWizard(store=store, send_ics=True, timezone_id="Europe/Kyiv", duration=timedelta(hours=1))


@pytest.fixture
def standup_draft():
    return EventDraft(title="Standup", date="2025-03-10", time="09:30", location="Room 4")


@pytest.fixture
def run_wizard(wizard):
    """Send a sequence of texts for one chat and collect the replies."""
    def _run(texts, session_id=42):
        return [wizard.handle_input(session_id, text) for text in texts]
    return _run
