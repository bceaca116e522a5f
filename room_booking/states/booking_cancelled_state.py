# State Pattern - Booking Cancelled State
from .base import BookingState, Transition


class BookingCancelledState(BookingState):
    """Terminal state: the booking was cancelled"""
    terminal = True

    def name(self) -> str:
        return "BookingCancelled"

    def decide(self, action: str) -> Transition:
        return self.reject(action)
