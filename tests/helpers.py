"""Test doubles and builders shared across the suites."""

from __future__ import annotations

import pygame

from asteroid_survivor.entities import Asteroid
from asteroid_survivor.settings import Color


class RecordingRenderer:
    """Renderer stand-in that remembers every draw call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, width, height) -> None:
        self.calls.append(("clear", width, height))

    def draw_filled_rect(self, x, y, width, height, color, glow=False) -> None:
        self.calls.append(("rect", x, y, width, height, color, glow))

    def draw_filled_circle(self, x, y, radius, color) -> None:
        self.calls.append(("circle", x, y, radius, color))

    def draw_text(self, text, x, y, font, color) -> None:
        self.calls.append(("text", text, x, y, font, color))

    def stroke_rect(self, x, y, width, height, color, line_width=1) -> None:
        self.calls.append(("stroke", x, y, width, height, color, line_width))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]

    def texts(self) -> list[str]:
        return [call[1] for call in self.calls if call[0] == "text"]


def make_asteroid(x: float, y: float, size: float = 50, speed: float = 0.0, heading: float = 0.0) -> Asteroid:
    return Asteroid(pygame.Vector2(x, y), size, Color(150, 150, 150), speed, heading)
