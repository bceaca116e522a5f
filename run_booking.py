#!/usr/bin/env python

"""
Runner script for the room booking demo
This script ensures the demo is run with the correct Python module path
"""

import os
import sys

# Add the current directory to Python path to make room_booking importable
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

# Import and run the main function from the demo module
from room_booking.demo import main

if __name__ == '__main__':
    main()
