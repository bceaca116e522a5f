# State Pattern - Idle State
from .base import Action, BookingState, Transition
from .room_selected_state import RoomSelectedState


class IdleState(BookingState):
    """Initial state: nothing has been chosen yet"""
    def name(self) -> str:
        return "Idle"

    def decide(self, action: str) -> Transition:
        if action == Action.SELECT_ROOM:
            return self.advance(action, RoomSelectedState())
        return self.reject(action)
