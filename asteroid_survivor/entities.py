import math
import random
from typing import Protocol

import pygame

from .controls import InputState
from .geometry import out_of_bounds
from .rendering import Renderer
from .settings import Color, Viewport


class SpaceObject(Protocol):
    """What the loop needs from anything that moves and gets drawn."""

    position: pygame.Vector2
    width: float
    height: float
    color: Color

    def update(self, renderer: Renderer) -> None: ...

    def draw(self, renderer: Renderer) -> None: ...


def heading_vector(heading_rad: float) -> pygame.Vector2:
    return pygame.Vector2(math.cos(heading_rad), math.sin(heading_rad))


def draw_box(renderer: Renderer, obj: SpaceObject) -> None:
    # Drawn centred so the picture matches the collision box
    renderer.draw_filled_rect(
        obj.position.x - obj.width / 2,
        obj.position.y - obj.height / 2,
        obj.width,
        obj.height,
        obj.color,
        glow=True,
    )


class Star:
    def __init__(
        self,
        position: pygame.Vector2,
        size: float,
        color: Color,
        speed: float,
        rng: random.Random | None = None,
    ) -> None:
        self.position = pygame.Vector2(position)
        self.width = size
        self.height = size
        self.color = color
        self.speed = speed
        self.heading_rad = (rng or random).random() * math.pi * 2

    def update(self, renderer: Renderer) -> None:
        self.position += heading_vector(self.heading_rad) * self.speed
        self.draw(renderer)

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_filled_circle(self.position.x, self.position.y, self.width, self.color)


class Asteroid:
    def __init__(
        self,
        position: pygame.Vector2,
        size: float,
        color: Color,
        speed: float,
        heading_rad: float,
    ) -> None:
        self.position = pygame.Vector2(position)
        self.width = size
        self.height = size
        self.color = color
        self.speed = speed
        self.heading_rad = heading_rad

    def update(self, renderer: Renderer) -> None:
        self.position += heading_vector(self.heading_rad) * self.speed
        self.draw(renderer)

    def draw(self, renderer: Renderer) -> None:
        draw_box(renderer, self)


class Ship:
    def __init__(
        self,
        position: pygame.Vector2,
        size: float,
        color: Color,
        speed: float,
        controls: InputState,
        viewport: Viewport,
    ) -> None:
        self.position = pygame.Vector2(position)
        self.width = size
        self.height = size
        self.color = color
        self.speed = speed
        self.controls = controls
        self.viewport = viewport
        self.velocity = pygame.Vector2(0.0, 0.0)

    def steer(self) -> None:
        # Not inertial: velocity comes straight from the keys held this frame
        self.velocity.update(0.0, 0.0)
        if self.controls.left:
            self.velocity.x = -self.speed
        if self.controls.right:
            self.velocity.x = self.speed
        if self.controls.up:
            self.velocity.y = -self.speed
        if self.controls.down:
            self.velocity.y = self.speed

    def wrap(self) -> None:
        bounds = out_of_bounds(self, self.viewport.width, self.viewport.height)
        if bounds.right:
            self.position.x = -self.width
        if bounds.left:
            self.position.x = self.viewport.width
        if bounds.bottom:
            self.position.y = -self.height
        if bounds.top:
            self.position.y = self.viewport.height

    def update(self, renderer: Renderer) -> None:
        self.steer()
        self.position += self.velocity
        self.wrap()
        self.draw(renderer)

    def draw(self, renderer: Renderer) -> None:
        draw_box(renderer, self)
