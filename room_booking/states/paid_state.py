# State Pattern - Paid State
from .base import BookingState, Transition


class PaidState(BookingState):
    """Terminal state: the booking is paid and completed"""
    terminal = True

    def name(self) -> str:
        return "Paid"

    def decide(self, action: str) -> Transition:
        return self.reject(action)
