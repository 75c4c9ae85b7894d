import math
import random
from typing import NamedTuple, Protocol

import pygame


class Boxed(Protocol):
    position: pygame.Vector2
    width: float
    height: float


class Bounds(NamedTuple):
    """Which viewport edges an object has fully left. Each flag is independent."""

    right: bool
    left: bool
    bottom: bool
    top: bool


def intersects(a: Boxed, b: Boxed) -> bool:
    # Boxes are centred on position; touching edges do not count
    x1 = a.position.x - a.width / 2
    y1 = a.position.y - a.height / 2
    x2 = a.position.x + a.width / 2
    y2 = a.position.y + a.height / 2

    x3 = b.position.x - b.width / 2
    y3 = b.position.y - b.height / 2
    x4 = b.position.x + b.width / 2
    y4 = b.position.y + b.height / 2

    return x1 < x4 and x3 < x2 and y1 < y4 and y3 < y2


def out_of_bounds(obj: Boxed, world_width: float, world_height: float) -> Bounds:
    return Bounds(
        right=obj.position.x > world_width + obj.width,
        left=obj.position.x < -obj.width,
        bottom=obj.position.y > world_height + obj.height,
        top=obj.position.y < -obj.height,
    )


def deg_to_rad(deg: float) -> float:
    return deg * math.pi / 180


def rand_angle_between(deg1: float, deg2: float, rng: random.Random | None = None) -> float:
    """Uniform heading in radians from [deg1, deg2). Requires deg2 >= deg1."""
    if deg2 < deg1:
        raise ValueError(f"angle range is reversed: {deg1} > {deg2}")
    rng = rng or random
    rad1 = deg_to_rad(deg1)
    rad2 = deg_to_rad(deg2)
    return rad1 + rng.random() * (rad2 - rad1)
