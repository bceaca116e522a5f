# State Pattern - Booking Confirmed State
from .base import Action, BookingState, Transition
from .booking_cancelled_state import BookingCancelledState
from .paid_state import PaidState


class BookingConfirmedState(BookingState):
    """State for a confirmed booking awaiting payment"""
    def name(self) -> str:
        return "BookingConfirmed"

    def decide(self, action: str) -> Transition:
        if action == Action.PAY:
            return self.advance(action, PaidState())
        if action == Action.CANCEL:
            return self.advance(action, BookingCancelledState())
        return self.reject(action)
