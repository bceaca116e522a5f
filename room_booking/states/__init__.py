# State Pattern Implementation
# This package contains all state-related classes for the room booking lifecycle

from .base import Action, BookingState, Outcome, Transition
from .idle_state import IdleState
from .room_selected_state import RoomSelectedState
from .booking_confirmed_state import BookingConfirmedState
from .paid_state import PaidState
from .booking_cancelled_state import BookingCancelledState

# Every state the context may hold, in lifecycle order
STATE_TYPES = (
    IdleState,
    RoomSelectedState,
    BookingConfirmedState,
    PaidState,
    BookingCancelledState,
)

INITIAL_STATE = IdleState

__all__ = [
    'Action',
    'BookingState',
    'Outcome',
    'Transition',
    'IdleState',
    'RoomSelectedState',
    'BookingConfirmedState',
    'PaidState',
    'BookingCancelledState',
    'STATE_TYPES',
    'INITIAL_STATE'
]
