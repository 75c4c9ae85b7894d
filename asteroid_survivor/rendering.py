from typing import Protocol

import pygame

from .settings import BACKGROUND_COLOR, GLOW_BLUR, GLOW_COLOR


class Renderer(Protocol):
    def clear(self, width: float, height: float) -> None: ...

    def draw_filled_rect(self, x: float, y: float, width: float, height: float, color, glow: bool = False) -> None: ...

    def draw_filled_circle(self, x: float, y: float, radius: float, color) -> None: ...

    def draw_text(self, text: str, x: float, y: float, font: str, color) -> None: ...

    def stroke_rect(self, x: float, y: float, width: float, height: float, color, line_width: int = 1) -> None: ...


def build_halo(width: int, height: int) -> pygame.Surface:
    # Stacked translucent rings fading outwards approximate a blurred shadow
    pad = GLOW_BLUR
    gfx = pygame.Surface((width + pad * 2, height + pad * 2), pygame.SRCALPHA)
    r, g, b, a = GLOW_COLOR
    for step in range(pad, 0, -2):
        alpha = int(a * (1.0 - step / (pad + 1)) * 0.35)
        inset = pad - step
        pygame.draw.rect(
            gfx,
            (r, g, b, alpha),
            pygame.Rect(inset, inset, width + step * 2, height + step * 2),
            border_radius=step,
        )
    return gfx


class PygameRenderer:
    """Draws onto a pygame surface. Fonts and glow halos are built once and cached."""

    def __init__(self, surface: pygame.Surface, font_size: int = 32) -> None:
        self.surface = surface
        self.font_size = font_size
        self._fonts: dict[str, pygame.font.Font] = {}
        self._halos: dict[tuple[int, int], pygame.Surface] = {}

    def _font(self, name: str) -> pygame.font.Font:
        font = self._fonts.get(name)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(name, self.font_size)
            self._fonts[name] = font
        return font

    def clear(self, width: float, height: float) -> None:
        self.surface.fill(BACKGROUND_COLOR, pygame.Rect(0, 0, int(width), int(height)))

    def draw_filled_rect(self, x: float, y: float, width: float, height: float, color, glow: bool = False) -> None:
        if glow:
            self._draw_glow(x, y, width, height)
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def _halo(self, width: int, height: int) -> pygame.Surface:
        key = (width, height)
        halo = self._halos.get(key)
        if halo is None:
            halo = build_halo(width, height)
            self._halos[key] = halo
        return halo

    def _draw_glow(self, x: float, y: float, width: float, height: float) -> None:
        self.surface.blit(self._halo(int(width), int(height)), (int(x) - GLOW_BLUR, int(y) - GLOW_BLUR))

    def draw_filled_circle(self, x: float, y: float, radius: float, color) -> None:
        pygame.draw.circle(self.surface, color, (int(x), int(y)), max(1, int(radius)))

    def draw_text(self, text: str, x: float, y: float, font: str, color) -> None:
        surf = self._font(font).render(text, True, color)
        # Baseline anchored, like canvas fillText
        self.surface.blit(surf, (int(x), int(y) - surf.get_height()))

    def stroke_rect(self, x: float, y: float, width: float, height: float, color, line_width: int = 1) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(width), int(height)), width=line_width)
