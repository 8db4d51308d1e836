"""
Twin Pong: two paddles, one ball, fixed-tick simulation
"""

__version__ = "0.1.0"
