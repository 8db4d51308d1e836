#!/usr/bin/env python3
"""
Main script to launch Twin Pong with the PyGame graphical interface
"""

import sys

from twin_pong.gui.game_app import main

if __name__ == "__main__":
    sys.exit(main())
