"""Unit tests for the frame loop, termination and best-time recording."""

from __future__ import annotations

import random

import pygame
import pytest

from asteroid_survivor.entities import Star
from asteroid_survivor.population import PopulationManager
from asteroid_survivor.settings import STAR_COUNT, Color
from asteroid_survivor.simulation import Phase, Simulation, SimulationState, format_time
from asteroid_survivor.spawning import build_spawn_zones
from asteroid_survivor.storage import MemoryBestTimeStore
from tests.helpers import make_asteroid

pytestmark = pytest.mark.unit


def build_sim(ship, viewport, renderer, store, stars=(), asteroids=()) -> Simulation:
    zones = build_spawn_zones(viewport)
    population = PopulationManager(viewport, zones, random.Random(31))
    state = SimulationState(ship=ship, stars=list(stars), asteroids=list(asteroids))
    return Simulation(state, population, zones, renderer, store, viewport)


def snapshot(sim: Simulation) -> list[tuple[float, float]]:
    objects = [sim.state.ship, *sim.state.stars, *sim.state.asteroids]
    return [(obj.position.x, obj.position.y) for obj in objects]


class TestFormatTime:
    @pytest.mark.parametrize(
        "ms, text",
        [
            (0, "00:00:000"),
            (125_000, "02:05:000"),
            (61_234.9, "01:01:234"),
            (999, "00:00:999"),
            (6_000_000, "100:00:000"),
        ],
    )
    def test_format(self, ms: float, text: str) -> None:
        assert format_time(ms) == text


class TestNewSimulation:
    def test_starts_running_with_stars_and_centred_ship(self, viewport, controls, renderer, store) -> None:
        sim = Simulation.new(viewport, controls, renderer, store, random.Random(1))
        assert sim.state.phase is Phase.RUNNING
        assert len(sim.state.stars) == STAR_COUNT
        assert sim.state.asteroids == []
        assert sim.state.ship.position == pygame.Vector2(400, 300)
        assert sim.state.elapsed_ms == 0

    def test_reads_best_time_once(self, viewport, controls, renderer) -> None:
        store = MemoryBestTimeStore(5000)
        sim = Simulation.new(viewport, controls, renderer, store, random.Random(1))
        assert sim.best_time_ms == 5000


class TestStep:
    def test_frame_order(self, ship, viewport, renderer, store) -> None:
        star = Star(pygame.Vector2(10, 10), 1, Color(255, 255, 255), 0.1, random.Random(2))
        asteroid = make_asteroid(100, 100)
        sim = build_sim(ship, viewport, renderer, store, [star], [asteroid])
        assert sim.step(16) is True
        assert renderer.names() == (
            ["clear"]
            + ["rect", "stroke"] * 4
            + ["circle", "rect", "rect", "text", "text"]
        )
        asteroid_call, ship_call = renderer.calls[10], renderer.calls[11]
        assert asteroid_call[1:3] == (75, 75)
        assert ship_call[1:3] == (375, 275)

    def test_accumulates_time_and_shows_it(self, ship, viewport, renderer, store) -> None:
        sim = build_sim(ship, viewport, renderer, store)
        sim.step(1000)
        sim.step(500)
        assert sim.state.elapsed_ms == 1500
        assert renderer.texts()[-2:] == ["Best time: 00:00:000", "Time: 00:01:500"]

    def test_replenishes_and_prunes(self, ship, viewport, renderer, store) -> None:
        gone = make_asteroid(2000, 2000)
        sim = build_sim(ship, viewport, renderer, store, asteroids=[gone])
        sim.step(16)
        assert gone not in sim.state.asteroids
        assert len(sim.state.stars) == 1

    def test_tick_uses_timestamp_deltas(self, ship, viewport, renderer, store) -> None:
        sim = build_sim(ship, viewport, renderer, store)
        sim.last_timestamp_ms = 100
        sim.tick(116)
        sim.tick(150)
        assert sim.state.elapsed_ms == 50


class TestTermination:
    def test_overlapping_asteroid_ends_the_run(self, ship, viewport, renderer, store) -> None:
        sim = build_sim(ship, viewport, renderer, store, asteroids=[make_asteroid(400, 300)])
        assert sim.step(16) is True
        assert sim.state.phase is Phase.TERMINATED
        assert sim.state.terminated

    def test_near_miss_keeps_running(self, ship, viewport, renderer, store) -> None:
        sim = build_sim(ship, viewport, renderer, store, asteroids=[make_asteroid(450, 300)])
        sim.step(16)
        assert sim.state.phase is Phase.RUNNING

    def test_collision_checked_after_movement(self, ship, controls, viewport, renderer, store) -> None:
        controls.right = True
        sim = build_sim(ship, viewport, renderer, store, asteroids=[make_asteroid(452, 300)])
        sim.step(16)
        assert sim.state.terminated

    def test_terminated_is_absorbing(self, ship, viewport, renderer, store) -> None:
        sim = build_sim(ship, viewport, renderer, store, asteroids=[make_asteroid(400, 300, speed=3)])
        sim.step(2000)
        assert sim.state.terminated

        assert sim.step(16) is False
        before = snapshot(sim)
        calls = len(renderer.calls)
        assert sim.step(16) is False
        assert sim.step(16) is False

        assert store.writes == [2000]
        assert sim.state.phase is Phase.TERMINATED
        assert sim.state.elapsed_ms == 2000
        assert snapshot(sim) == before
        assert len(renderer.calls) == calls


class TestBestTime:
    def crash_after(self, ms, ship, viewport, renderer, store) -> Simulation:
        sim = build_sim(ship, viewport, renderer, store, asteroids=[make_asteroid(400, 300)])
        sim.step(ms)
        sim.step(16)
        return sim

    def test_first_run_is_always_saved(self, ship, viewport, renderer) -> None:
        store = MemoryBestTimeStore()
        sim = self.crash_after(3000, ship, viewport, renderer, store)
        assert store.writes == [3000]
        assert sim.new_record

    def test_longer_run_replaces_record(self, ship, viewport, renderer) -> None:
        store = MemoryBestTimeStore(2000)
        sim = self.crash_after(3000, ship, viewport, renderer, store)
        assert store.writes == [3000]
        assert sim.best_time_ms == 3000

    def test_shorter_run_keeps_record(self, ship, viewport, renderer) -> None:
        store = MemoryBestTimeStore(5000)
        sim = self.crash_after(3000, ship, viewport, renderer, store)
        assert store.writes == []
        assert store.best_time_ms == 5000
        assert not sim.new_record

    def test_equal_run_keeps_record(self, ship, viewport, renderer) -> None:
        store = MemoryBestTimeStore(3000)
        self.crash_after(3000, ship, viewport, renderer, store)
        assert store.writes == []

    def test_hud_shows_stored_best(self, ship, viewport, renderer) -> None:
        store = MemoryBestTimeStore(125_000)
        sim = build_sim(ship, viewport, renderer, store)
        sim.step(16)
        assert "Best time: 02:05:000" in renderer.texts()
