"""
Pygame front end of Twin Pong
"""
