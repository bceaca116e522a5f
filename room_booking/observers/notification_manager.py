# Observer Pattern - Notification Manager
import logging
import sys
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from .transition_event import TransitionEvent

class TransitionObserver(ABC):
    """Observer interface for transition events"""
    @abstractmethod
    def update(self, event: TransitionEvent) -> None:
        pass

class StreamObserver(TransitionObserver):
    """Observer that writes every transition message to a text stream"""
    def __init__(self, stream: Optional[TextIO] = None):
        # None means whatever sys.stdout is at write time
        self.stream = stream

    def update(self, event: TransitionEvent) -> None:
        print(event.message, file=self.stream if self.stream is not None else sys.stdout)

class LoggingObserver(TransitionObserver):
    """Observer that reports every transition on the booking log"""
    def __init__(self, level: int = logging.INFO):
        self.level = level
        self.logger = logging.getLogger('room_booking')

    def update(self, event: TransitionEvent) -> None:
        self.logger.log(self.level, event.message)

class NotificationManager:
    """Subject in the Observer pattern that manages notifications"""
    def __init__(self):
        self.observers: List[TransitionObserver] = []
        self.logger = logging.getLogger('room_booking')

    def add_observer(self, observer: TransitionObserver) -> None:
        """Add an observer to the notification list"""
        self.observers.append(observer)
        self.logger.debug(f'Added observer: {observer.__class__.__name__}')

    def remove_observer(self, observer: TransitionObserver) -> None:
        """Remove an observer from the notification list"""
        self.observers.remove(observer)
        self.logger.debug(f'Removed observer: {observer.__class__.__name__}')

    def notify(self, event: TransitionEvent) -> None:
        """Notify all observers about a transition event"""
        for observer in list(self.observers):
            try:
                observer.update(event)
            except Exception as e:
                self.logger.error(f'Observer {observer.__class__.__name__} failed on {event.state_name}/{event.action}: {str(e)}')

def default_notifier(stream: Optional[TextIO] = None) -> NotificationManager:
    """Print messages to the stream and keep a DEBUG copy on the booking log"""
    manager = NotificationManager()
    manager.add_observer(StreamObserver(stream))
    manager.add_observer(LoggingObserver(logging.DEBUG))
    return manager
