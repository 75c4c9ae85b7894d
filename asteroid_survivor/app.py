import argparse
import os
import random
import sys

import pygame

from .controls import InputState, handle_key_event
from .log import get_logger, setup_logging
from .rendering import PygameRenderer
from .settings import BEST_TIME_FILE, FPS, WINDOW_HEIGHT, WINDOW_WIDTH, Color, Viewport
from .simulation import Simulation, format_time
from .storage import JsonBestTimeStore


log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Dodge the asteroids for as long as you can.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="Window width in pixels.")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="Window height in pixels.")
    parser.add_argument("--fullscreen", action="store_true", help="Use the whole desktop as the viewport.")
    parser.add_argument("--best-time-file", default=BEST_TIME_FILE, help="JSON file holding the best survival time.")
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Force the SDL dummy video driver; no window will open.",
    )
    parser.add_argument("--max-frames", type=int, default=None, help="Quit after this many frames.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for spawn randomness.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING...).")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, sim: Simulation) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 160))
    screen.blit(overlay, (0, 0))
    lines = [("Game Over!", Color(255, 200, 200))]
    lines.append((f"You survived {format_time(sim.state.elapsed_ms)}", Color(255, 255, 255)))
    if sim.new_record:
        lines.append(("New best time!", Color(255, 230, 120)))
    lines.append(("Press R to restart, Esc to quit", Color(200, 220, 255)))
    y = height // 2 - 30
    for text, color in lines:
        surf = font.render(text, True, color)
        screen.blit(surf, (width // 2 - surf.get_width() // 2, y))
        y += 30


def run(
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
    *,
    fullscreen: bool = False,
    best_time_file: str = BEST_TIME_FILE,
    headless: bool = False,
    max_frames: int | None = None,
    seed: int | None = None,
) -> int:
    if headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
        log.info("headless mode active; no window will open")

    try:
        pygame.init()
        if fullscreen and not headless:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode((width, height))
    except pygame.error as exc:
        log.error("failed to open display: %s (set SDL_VIDEODRIVER=dummy for headless mode)", exc)
        pygame.quit()
        return 1
    pygame.display.set_caption("Asteroid Survivor")

    viewport = Viewport(*screen.get_size())
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("consolas", 20)
    renderer = PygameRenderer(screen)
    store = JsonBestTimeStore(best_time_file)
    rng = random.Random(seed)
    controls = InputState()

    def new_simulation() -> Simulation:
        controls.release_all()
        return Simulation.new(viewport, controls, renderer, store, rng)

    def finish(ended: Simulation) -> None:
        # A crashed run records its best time on the step after the crash
        if ended.state.terminated and not ended.best_time_recorded:
            ended.step(0)

    sim = new_simulation()
    requesting_frames = True
    running = True
    frames = 0

    while running:
        dt_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r and sim.state.terminated:
                finish(sim)
                sim = new_simulation()
                requesting_frames = True
            else:
                handle_key_event(controls, event)

        # Once the run has ended and its best time is saved, the last frame stays frozen
        if requesting_frames:
            requesting_frames = sim.step(dt_ms)
            if not requesting_frames:
                draw_game_over(screen, font, sim)

        pygame.display.flip()
        frames += 1
        if max_frames is not None and frames >= max_frames:
            running = False

    finish(sim)
    pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    return run(
        args.width,
        args.height,
        fullscreen=args.fullscreen,
        best_time_file=args.best_time_file,
        headless=args.headless,
        max_frames=args.max_frames,
        seed=args.seed,
    )


if __name__ == "__main__":
    sys.exit(main())
