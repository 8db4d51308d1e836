"""
Protocols for the collaborators the game loop drives
"""

from twin_pong.core.interfaces.clock import ClockProtocol
from twin_pong.core.interfaces.input import InputSourceProtocol
from twin_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["ClockProtocol", "InputSourceProtocol", "RendererProtocol"]
