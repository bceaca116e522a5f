# State Pattern - Booking Context
import logging
from typing import Optional

from .observers.notification_manager import NotificationManager, default_notifier
from .observers.transition_event import TransitionEvent
from .states.base import BookingState, Transition


class BookingContext:
    """Holds the current state of one booking and dispatches actions to it.

    Not thread-safe: callers sharing a context between threads must serialize
    access to it themselves.
    """
    def __init__(self, initial_state: BookingState, notifier: Optional[NotificationManager] = None):
        self.logger = logging.getLogger('room_booking')
        if notifier is None:
            notifier = default_notifier()
        self.notifier = notifier
        self._state = None
        self.set_state(initial_state)

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state.is_terminal

    def set_state(self, new_state: BookingState) -> None:
        if not isinstance(new_state, BookingState):
            raise TypeError(f'Expected a BookingState, got {type(new_state).__name__}')
        self._state = new_state
        self.logger.debug(f'State set to {new_state.name()}')

    def request(self, action: str) -> Transition:
        """Offer an action to the current state; returns what happened."""
        return self._state.handle(self, action)

    def get_state_name(self) -> str:
        return self._state.name()

    def publish(self, transition: Transition) -> None:
        self.notifier.notify(TransitionEvent.from_transition(transition))
