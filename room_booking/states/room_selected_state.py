# State Pattern - Room Selected State
from .base import Action, BookingState, Transition
from .booking_cancelled_state import BookingCancelledState
from .booking_confirmed_state import BookingConfirmedState


class RoomSelectedState(BookingState):
    """State for a room that is picked but not yet confirmed"""
    def name(self) -> str:
        return "RoomSelected"

    def decide(self, action: str) -> Transition:
        if action == Action.CONFIRM_BOOKING:
            return self.advance(action, BookingConfirmedState())
        if action == Action.CANCEL:
            return self.advance(action, BookingCancelledState())
        return self.reject(action)
