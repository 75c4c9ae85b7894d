import enum
import math
import random

import pygame

from .entities import Asteroid
from .geometry import rand_angle_between
from .log import get_logger
from .rendering import Renderer
from .settings import (
    ASTEROID_SIZE,
    ASTEROID_SPEED,
    SPAWN_ZONE_COLOR,
    SPAWN_ZONE_DEPTH,
    SPAWN_ZONE_OVERLAP,
    SPAWN_ZONE_STROKE,
    Color,
    Viewport,
)


log = get_logger(__name__)


class ZoneSide(enum.Enum):
    BOTTOM = 0
    TOP = 1
    LEFT = 2
    RIGHT = 3


def heading_for_side(side: ZoneSide, rng: random.Random) -> float:
    """Inward-biased heading for an asteroid leaving ``side``.

    Left and right add two independent draws, so their headings are not
    uniform over the combined arc.
    """
    if side is ZoneSide.BOTTOM:
        return rand_angle_between(200, 340, rng)
    if side is ZoneSide.TOP:
        return rand_angle_between(20, 160, rng)
    if side is ZoneSide.LEFT:
        return rand_angle_between(275, 360, rng) + rand_angle_between(5, 80, rng)
    return rand_angle_between(95, 175, rng) + rand_angle_between(5, 85, rng)


class SpawnZone:
    """Rectangle just outside one viewport edge; x, y is its top-left corner."""

    def __init__(self, x: float, y: float, width: float, height: float, side: ZoneSide) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.side = side

    def spawn_asteroid(self, rng: random.Random | None = None) -> Asteroid:
        rng = rng or random
        position = pygame.Vector2(
            rng.random() * self.width + self.x,
            rng.random() * self.height + self.y,
        )
        speed = rng.random() * ASTEROID_SPEED + 1
        gray = math.floor(rng.random() * 100) + 100
        heading = heading_for_side(self.side, rng)
        log.debug("spawned asteroid side=%s pos=(%.1f, %.1f) speed=%.2f", self.side.name, position.x, position.y, speed)
        return Asteroid(position, ASTEROID_SIZE, Color(gray, gray, gray), speed, heading)

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_filled_rect(self.x, self.y, self.width, self.height, SPAWN_ZONE_COLOR, glow=True)
        renderer.stroke_rect(self.x, self.y, self.width, self.height, SPAWN_ZONE_STROKE, 1)


def build_spawn_zones(viewport: Viewport) -> dict[ZoneSide, SpawnZone]:
    depth = SPAWN_ZONE_DEPTH
    edge = SPAWN_ZONE_OVERLAP
    return {
        ZoneSide.LEFT: SpawnZone(-depth, 0, depth + edge, viewport.height, ZoneSide.LEFT),
        ZoneSide.RIGHT: SpawnZone(viewport.width - edge, 0, depth, viewport.height, ZoneSide.RIGHT),
        ZoneSide.TOP: SpawnZone(0, -depth, viewport.width, depth + edge, ZoneSide.TOP),
        ZoneSide.BOTTOM: SpawnZone(0, viewport.height - edge, viewport.width, depth, ZoneSide.BOTTOM),
    }
