# gridpath/app/theme_skin.py
"""
Classic visualizer skin (visuals only; no logic)
- Backdrop: dark vertical gradient
- Grid: white cells, black obstacles, thin grey borders
- Search overlays: green = discovered, red = visited
- Path: blue cells revealed end -> start, pulsing once the reveal is complete
- Start/End: blue / yellow, always drawn on top
- Right Panel: frosted glass underlay only (viewer draws buttons/metrics on top)
"""

from __future__ import annotations
import math, time
from typing import Tuple
import pygame

from gridpath.core.types import CellState

# ---- palette ----
WHITE         = (255, 255, 255)
BLACK         = (0, 0, 0)
RED           = (255, 0, 0)
GREEN         = (0, 255, 0)
BLUE          = (0, 0, 255)
YELLOW        = (255, 255, 0)
GRID_LINE     = (200, 200, 200)
TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)

STATE_COLORS = {
    CellState.EMPTY:    WHITE,
    CellState.OBSTACLE: BLACK,
    CellState.START:    BLUE,
    CellState.END:      YELLOW,
}

# caches
_gradient_by_size: dict[Tuple[int, int], pygame.Surface] = {}

# ---------- helpers ----------
def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)

def _glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                 fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255,255,255,18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0,0))
    screen.blit(card, rect.topleft)

def _draw_backdrop(screen: pygame.Surface):
    """Gradient backdrop, cached per window size."""
    w, h = screen.get_size()
    key = (w, h)
    if key not in _gradient_by_size:
        surf = pygame.Surface((w, h))
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(surf, c, (0, y), (w, y))
        _gradient_by_size.clear()
        _gradient_by_size[key] = surf
    screen.blit(_gradient_by_size[key], (0, 0))

def _path_color(done: bool) -> Tuple[int, int, int]:
    if not done:
        return BLUE
    # finished: pulse blue <-> light blue
    k = 0.5 * (1.0 + math.sin(time.time() * 6.0))
    light = (120, 160, 255)
    return (
        int(BLUE[0] * (1 - k) + light[0] * k),
        int(BLUE[1] * (1 - k) + light[1] * k),
        int(BLUE[2] * (1 - k) + light[2] * k),
    )

def _draw_grid(v, screen: pygame.Surface):
    cs = v.cell_size
    ox, oy = v._grid_origin

    # tiles
    for cell in v.grid:
        rect = pygame.Rect(ox + cell.col*cs, oy + cell.row*cs, cs, cs)
        pygame.draw.rect(screen, STATE_COLORS[cell.state], rect)

    # overlays: discovered then visited (visited wins)
    for (row, col) in v.open_set:
        if v.grid.cell_at((row, col)).state is CellState.EMPTY:
            pygame.draw.rect(screen, GREEN, pygame.Rect(ox + col*cs, oy + row*cs, cs, cs))
    for (row, col) in v.closed_set:
        if v.grid.cell_at((row, col)).state is CellState.EMPTY:
            pygame.draw.rect(screen, RED, pygame.Rect(ox + col*cs, oy + row*cs, cs, cs))

    # path: revealed from the end backwards
    color = _path_color(v.path_fully_revealed())
    for (row, col) in v.revealed_path():
        if v.grid.cell_at((row, col)).state is CellState.EMPTY:
            pygame.draw.rect(screen, color, pygame.Rect(ox + col*cs, oy + row*cs, cs, cs))

    # borders last so they sit over the overlays
    for r in range(v.grid.rows + 1):
        pygame.draw.line(screen, GRID_LINE, (ox, oy + r*cs), (ox + v.grid.rows*cs, oy + r*cs))
    for c in range(v.grid.rows + 1):
        pygame.draw.line(screen, GRID_LINE, (ox + c*cs, oy), (ox + c*cs, oy + v.grid.rows*cs))

def draw(viewer, screen: pygame.Surface) -> None:
    """
    Draw order:
      1) backdrop
      2) grid with search overlays and path
      3) frosted right panel underlay
      (viewer draws text/buttons afterwards)
    """
    _draw_backdrop(screen)
    _draw_grid(viewer, screen)

    rb = getattr(viewer, "_right_band", None)
    if isinstance(rb, pygame.Rect):
        _glass_panel(screen, rb.inflate(-20, -20), fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW)
