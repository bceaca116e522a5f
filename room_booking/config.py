import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Logging Configuration
LOG_LEVEL = os.getenv('BOOKING_LOG_LEVEL', 'INFO').upper()
if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    LOG_LEVEL = 'INFO'
LOG_DIR = os.getenv('BOOKING_LOG_DIR', 'logs')
LOG_FILE = os.getenv('BOOKING_LOG_FILE', 'booking.log')
