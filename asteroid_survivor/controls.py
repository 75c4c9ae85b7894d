from dataclasses import dataclass

import pygame


@dataclass
class InputState:
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False

    def release_all(self) -> None:
        self.left = self.right = self.up = self.down = False


KEY_BINDINGS = {
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
}


def handle_key_event(state: InputState, event: pygame.event.Event) -> bool:
    """Update the held-direction flags from a key press or release.

    Returns True if the event was a bound direction key.
    """
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return False
    direction = KEY_BINDINGS.get(event.key)
    if direction is None:
        return False
    setattr(state, direction, event.type == pygame.KEYDOWN)
    return True
