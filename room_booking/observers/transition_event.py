# Observer Pattern - Transition Event
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..states.base import Outcome, Transition

# Message shown when a booking enters a state
ARRIVAL_MESSAGES = {
    'RoomSelected': 'Room selected.',
    'BookingConfirmed': 'Booking confirmed.',
    'Paid': 'Payment completed.',
    'BookingCancelled': 'Booking cancelled.',
}

# Message shown for any action offered to a terminal state
FINAL_MESSAGES = {
    'Paid': 'Booking is already paid and completed.',
    'BookingCancelled': 'Booking already cancelled.',
}


@dataclass
class TransitionEvent:
    """Event data for transition notifications"""
    state_name: str
    action: str
    outcome: Outcome
    next_state_name: Optional[str] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        # Set timestamp to current time if not provided
        if self.timestamp is None:
            self.timestamp = datetime.now()

    @classmethod
    def from_transition(cls, transition: Transition) -> 'TransitionEvent':
        next_state = transition.next_state
        return cls(
            state_name=transition.source.name(),
            action=str(getattr(transition.action, 'value', transition.action)),
            outcome=transition.outcome,
            next_state_name=next_state.name() if next_state is not None else None
        )

    @property
    def message(self) -> str:
        if self.outcome is Outcome.TRANSITIONED:
            arrival = ARRIVAL_MESSAGES.get(self.next_state_name, 'State changed.')
            return f'{arrival} Moving to {self.next_state_name} state.'
        if self.outcome is Outcome.ALREADY_FINAL:
            return FINAL_MESSAGES.get(self.state_name, f'Booking is already {self.state_name}.')
        return f'Invalid action in {self.state_name} state.'
