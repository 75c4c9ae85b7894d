import random
from typing import TYPE_CHECKING

import pygame

from .entities import SpaceObject, Star
from .geometry import out_of_bounds
from .log import get_logger
from .settings import (
    ASTEROIDS_ON_SCREEN,
    ASTEROIDS_OVER_TIME,
    STAR_COLOR,
    STAR_COUNT,
    STAR_SIZE,
    STAR_SPEED,
    Viewport,
)
from .spawning import SpawnZone, ZoneSide

if TYPE_CHECKING:
    from .simulation import SimulationState


log = get_logger(__name__)


def asteroid_target(elapsed_ms: float) -> float:
    """Soft cap on live asteroids; grows linearly with survival time."""
    return ASTEROIDS_ON_SCREEN + (elapsed_ms / 1000) * ASTEROIDS_OVER_TIME


class PopulationManager:
    """Keeps stars and asteroids topped up and drops whatever has left the world."""

    def __init__(
        self,
        viewport: Viewport,
        zones: dict[ZoneSide, SpawnZone],
        rng: random.Random | None = None,
        star_count: int = STAR_COUNT,
    ) -> None:
        self.viewport = viewport
        self.zones = zones
        self.rng = rng or random.Random()
        self.star_count = star_count
        self._zone_order = [ZoneSide.LEFT, ZoneSide.RIGHT, ZoneSide.TOP, ZoneSide.BOTTOM]

    def make_star(self) -> Star:
        position = pygame.Vector2(
            self.rng.random() * self.viewport.width,
            self.rng.random() * self.viewport.height,
        )
        return Star(position, STAR_SIZE, STAR_COLOR, STAR_SPEED, self.rng)

    def seed_stars(self) -> list[Star]:
        return [self.make_star() for _ in range(self.star_count)]

    def replenish(self, state: "SimulationState") -> None:
        # At most one of each per frame
        if len(state.asteroids) < asteroid_target(state.elapsed_ms):
            zone = self.zones[self.rng.choice(self._zone_order)]
            state.asteroids.append(zone.spawn_asteroid(self.rng))
        if len(state.stars) < self.star_count:
            state.stars.append(self.make_star())

    def in_world(self, obj: SpaceObject) -> bool:
        return not any(out_of_bounds(obj, self.viewport.width, self.viewport.height))

    def prune(self, state: "SimulationState") -> int:
        before = len(state.asteroids) + len(state.stars)
        state.asteroids = [a for a in state.asteroids if self.in_world(a)]
        state.stars = [s for s in state.stars if self.in_world(s)]
        removed = before - len(state.asteroids) - len(state.stars)
        if removed:
            log.debug("culled %d objects outside the world", removed)
        return removed
