"""
Keyboard input for Twin Pong: key events become paddle movement flags
"""

from collections.abc import Callable
from collections.abc import Iterable

import pygame

from twin_pong.core.entities import Paddle
from twin_pong.utils.config import KeyboardLayout

PAUSE_KEYS = (pygame.K_p, pygame.K_SPACE)


class KeyboardInput:
    """Maps two named keys per paddle to its up/down movement flags"""

    def __init__(
        self,
        left_paddle: Paddle,
        right_paddle: Paddle,
        layout: KeyboardLayout,
        event_source: Callable[[], Iterable[pygame.event.Event]] | None = None,
    ):
        """
        Args:
            left_paddle: Paddle driven by the layout's left keys
            right_paddle: Paddle driven by the layout's right keys (arrows)
            layout: Key bindings
            event_source: Returns pending events, pygame.event.get by default
        """
        self.bindings: dict[int, tuple[Paddle, str]] = {}
        for paddle, keys in ((left_paddle, layout.left_keys), (right_paddle, layout.right_keys)):
            self.bindings[keys["up"]] = (paddle, "moving_up")
            self.bindings[keys["down"]] = (paddle, "moving_down")

        self._event_source = event_source if event_source is not None else pygame.event.get
        self._pause_pending = False
        self.closed = False

    def handle_event(self, event: pygame.event.Event) -> None:
        """Applies a single pygame event"""
        if event.type == pygame.QUIT:
            self.closed = True
            return

        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return

        pressed = event.type == pygame.KEYDOWN
        binding = self.bindings.get(event.key)
        if binding is not None:
            paddle, flag = binding
            # Last write wins, the paddle reads the flag on its next move()
            setattr(paddle, flag, pressed)
        elif pressed and event.key == pygame.K_ESCAPE:
            self.closed = True
        elif pressed and event.key in PAUSE_KEYS:
            self._pause_pending = True

    def poll(self) -> bool:
        for event in self._event_source():
            self.handle_event(event)
        return not self.closed

    def pause_requested(self) -> bool:
        requested = self._pause_pending
        self._pause_pending = False
        return requested
