# State Pattern - Base State
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Action(str, Enum):
    """Known booking actions. Plain strings are accepted wherever an Action is."""
    SELECT_ROOM = "select_room"
    CONFIRM_BOOKING = "confirm_booking"
    PAY = "pay"
    CANCEL = "cancel"


class Outcome(Enum):
    TRANSITIONED = "transitioned"
    REJECTED = "rejected"
    ALREADY_FINAL = "already_final"


@dataclass(frozen=True)
class Transition:
    """Result of offering an action to a state"""
    source: "BookingState"
    action: str
    outcome: Outcome
    next_state: Optional["BookingState"] = None

    @property
    def changed(self) -> bool:
        return self.outcome is Outcome.TRANSITIONED


class BookingState(ABC):
    """Base State interface for implementing State Pattern"""
    terminal = False

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def decide(self, action: str) -> Transition:
        """Pick the next state for an action without touching any context."""
        pass

    @property
    def is_terminal(self) -> bool:
        return self.terminal

    def handle(self, context, action: str) -> Transition:
        transition = self.decide(action)
        if transition.next_state is not None:
            context.set_state(transition.next_state)
        context.publish(transition)
        return transition

    def advance(self, action: str, next_state: "BookingState") -> Transition:
        return Transition(self, action, Outcome.TRANSITIONED, next_state)

    def reject(self, action: str) -> Transition:
        outcome = Outcome.ALREADY_FINAL if self.terminal else Outcome.REJECTED
        return Transition(self, action, outcome)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f'<{self.name()}>'
