import sys

from room_booking.context import BookingContext
from room_booking.logger import setup_logger
from room_booking.observers.notification_manager import default_notifier
from room_booking.states import INITIAL_STATE, Action

# Happy path from a fresh booking to payment
DEMO_ACTIONS = (Action.SELECT_ROOM, Action.CONFIRM_BOOKING, Action.PAY)

def run_demo(out=None):
    """Drive one booking through DEMO_ACTIONS, printing the state after each step"""
    if out is None:
        out = sys.stdout
    context = BookingContext(INITIAL_STATE(), default_notifier(out))
    print(f'Current state: {context.get_state_name()}', file=out)

    for action in DEMO_ACTIONS:
        context.request(action)
        print(f'Current state: {context.get_state_name()}', file=out)

    return context

def main():
    try:
        logger = setup_logger()
    except Exception as e:
        logger = None
        print(f'Logging unavailable, continuing without it: {str(e)}', file=sys.stderr)

    try:
        context = run_demo()
        if logger is not None:
            logger.info(f'Booking demo finished in state {context.get_state_name()}')
    except Exception as e:
        if logger is not None:
            logger.error(f'Failed to run booking demo: {str(e)}')
        raise

if __name__ == '__main__':
    main()
