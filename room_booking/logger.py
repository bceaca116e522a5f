import logging
import os
from logging.handlers import RotatingFileHandler
import sys

from room_booking.config import LOG_DIR, LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# Names given to the handlers installed here, so later calls replace only these
CONSOLE_HANDLER_NAME = 'room_booking.console'
FILE_HANDLER_NAME = 'room_booking.file'

def setup_logger(log_dir=LOG_DIR, log_file=LOG_FILE, level=LOG_LEVEL):
    # Create logs directory if it doesn't exist
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Configure logging
    logger = logging.getLogger('room_booking')
    logger.setLevel(level)

    # Drop handlers from an earlier call so messages are not duplicated
    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME):
            logger.removeHandler(handler)
            handler.close()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(CONSOLE_HANDLER_NAME)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # File handler
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, log_file),
        maxBytes=1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.set_name(FILE_HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    # Add handlers to logger
    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger
