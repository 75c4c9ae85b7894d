"""Shared fixtures: headless pygame, a call-recording renderer, seeded randomness."""

from __future__ import annotations

import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from asteroid_survivor.controls import InputState  # noqa: E402
from asteroid_survivor.entities import Ship  # noqa: E402
from asteroid_survivor.settings import Color, Viewport  # noqa: E402
from asteroid_survivor.storage import MemoryBestTimeStore  # noqa: E402
from tests.helpers import RecordingRenderer  # noqa: E402


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(800, 600)


@pytest.fixture
def controls() -> InputState:
    return InputState()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def store() -> MemoryBestTimeStore:
    return MemoryBestTimeStore()


@pytest.fixture
def ship(viewport: Viewport, controls: InputState) -> Ship:
    return Ship(viewport.center, 50, Color(255, 0, 0), 5, controls, viewport)
