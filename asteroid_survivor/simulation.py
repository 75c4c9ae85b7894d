"""Frame loop for one survival run.

A run is RUNNING until the ship first overlaps an asteroid, then TERMINATED for
good. ``Simulation.step`` advances one frame and returns whether the host
should schedule another; restarting means building a new ``Simulation``.
"""
import enum
import math
import random
from dataclasses import dataclass, field

from .controls import InputState
from .entities import Asteroid, Ship, Star
from .geometry import intersects
from .log import get_logger
from .population import PopulationManager
from .rendering import Renderer
from .settings import HUD_COLOR, PLAYER_COLOR, PLAYER_SIZE, PLAYER_SPEED, Viewport
from .spawning import SpawnZone, ZoneSide, build_spawn_zones
from .storage import BestTimeStore


log = get_logger(__name__)

HUD_FONT = "arial"


class Phase(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


@dataclass
class SimulationState:
    ship: Ship
    stars: list[Star] = field(default_factory=list)
    asteroids: list[Asteroid] = field(default_factory=list)
    elapsed_ms: float = 0.0
    phase: Phase = Phase.RUNNING

    @property
    def terminated(self) -> bool:
        return self.phase is Phase.TERMINATED


def format_time(elapsed_ms: float) -> str:
    minutes = math.floor(elapsed_ms / 60000)
    seconds = math.floor((elapsed_ms - minutes * 60000) / 1000)
    millis = math.floor(elapsed_ms - minutes * 60000 - seconds * 1000)
    return f"{minutes:02d}:{seconds:02d}:{millis:03d}"


class Simulation:
    def __init__(
        self,
        state: SimulationState,
        population: PopulationManager,
        zones: dict[ZoneSide, SpawnZone],
        renderer: Renderer,
        store: BestTimeStore,
        viewport: Viewport,
    ) -> None:
        self.state = state
        self.population = population
        self.zones = zones
        self.renderer = renderer
        self.store = store
        self.viewport = viewport
        self.best_time_ms = store.get_best_time()
        self.best_time_recorded = False
        self.new_record = False
        self.last_timestamp_ms = 0.0

    @classmethod
    def new(
        cls,
        viewport: Viewport,
        controls: InputState,
        renderer: Renderer,
        store: BestTimeStore,
        rng: random.Random | None = None,
    ) -> "Simulation":
        rng = rng or random.Random()
        zones = build_spawn_zones(viewport)
        population = PopulationManager(viewport, zones, rng)
        ship = Ship(viewport.center, PLAYER_SIZE, PLAYER_COLOR, PLAYER_SPEED, controls, viewport)
        state = SimulationState(ship=ship, stars=population.seed_stars())
        log.info("new run in a %gx%g viewport", viewport.width, viewport.height)
        return cls(state, population, zones, renderer, store, viewport)

    def tick(self, timestamp_ms: float) -> bool:
        delta_ms = timestamp_ms - self.last_timestamp_ms
        self.last_timestamp_ms = timestamp_ms
        return self.step(delta_ms)

    def step(self, delta_ms: float) -> bool:
        state = self.state
        if state.terminated:
            if not self.best_time_recorded:
                self.record_best_time()
            return False

        state.elapsed_ms += delta_ms
        self.renderer.clear(self.viewport.width, self.viewport.height)
        for zone in self.zones.values():
            zone.draw(self.renderer)

        for star in state.stars:
            star.update(self.renderer)
        for asteroid in state.asteroids:
            asteroid.update(self.renderer)
        state.ship.update(self.renderer)

        self.draw_hud()

        self.population.replenish(state)
        self.population.prune(state)

        if self.collided():
            state.phase = Phase.TERMINATED
            log.info("ship destroyed after %s", format_time(state.elapsed_ms))
        return True

    def collided(self) -> bool:
        ship = self.state.ship
        return any(intersects(ship, asteroid) for asteroid in self.state.asteroids)

    def record_best_time(self) -> None:
        elapsed = self.state.elapsed_ms
        self.best_time_recorded = True
        if self.best_time_ms is None or elapsed > self.best_time_ms:
            self.store.set_best_time(elapsed)
            self.best_time_ms = elapsed
            self.new_record = True
            log.info("new best time %s", format_time(elapsed))

    def draw_hud(self) -> None:
        best = self.best_time_ms or 0
        width = self.viewport.width
        self.renderer.draw_text(f"Best time: {format_time(best)}", width - 370, 50, HUD_FONT, HUD_COLOR)
        self.renderer.draw_text(f"Time: {format_time(self.state.elapsed_ms)}", width - 250, 100, HUD_FONT, HUD_COLOR)
