from dataclasses import dataclass

import pygame


WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60

# Difficulty
ASTEROIDS_ON_SCREEN = 10
ASTEROIDS_OVER_TIME = 0.3  # extra asteroids allowed per elapsed second
ASTEROID_SPEED = 3
ASTEROID_SIZE = 50

# Background
STAR_COUNT = 100
STAR_SPEED = 0.1
STAR_SIZE = 1

# Player tuning
PLAYER_SPEED = 5
PLAYER_SIZE = 50

# Spawn zones sit this far outside the viewport and overlap it by one unit
SPAWN_ZONE_DEPTH = 100
SPAWN_ZONE_OVERLAP = 1

# Glow drawn under rectangles
GLOW_COLOR = (255, 255, 255, 204)
GLOW_BLUR = 10

BEST_TIME_FILE = "best_time.json"
BEST_TIME_KEY = "bestTime"


Color = pygame.Color

BACKGROUND_COLOR = Color(0, 0, 0)
STAR_COLOR = Color(255, 255, 255)
PLAYER_COLOR = Color(255, 0, 0)
SPAWN_ZONE_COLOR = Color(255, 255, 255)
SPAWN_ZONE_STROKE = Color(0, 0, 0)
HUD_COLOR = Color(255, 255, 255)


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @property
    def center(self) -> pygame.Vector2:
        return pygame.Vector2(self.width / 2, self.height / 2)
