"""
Pytest fixtures for room booking tests.
"""

import pytest
import sys
import os

# Add repository root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from room_booking.context import BookingContext
from room_booking.observers.notification_manager import NotificationManager, TransitionObserver
from room_booking.states import (
    BookingCancelledState,
    BookingConfirmedState,
    IdleState,
    PaidState,
    RoomSelectedState,
)


class RecordingObserver(TransitionObserver):
    """Observer that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def update(self, event):
        self.events.append(event)


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def notifier(recorder):
    manager = NotificationManager()
    manager.add_observer(recorder)
    return manager


@pytest.fixture
def make_context(notifier):
    """Build a context starting in the given state, wired to the recorder."""
    def _make(state=None):
        return BookingContext(state if state is not None else IdleState(), notifier)
    return _make


@pytest.fixture(params=[
    IdleState,
    RoomSelectedState,
    BookingConfirmedState,
    PaidState,
    BookingCancelledState,
])
def any_state(request):
    return request.param()
