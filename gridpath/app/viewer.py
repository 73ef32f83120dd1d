# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Dijkstra Path Finding Visualizer — paint a grid, run the search, watch it spread

- Mouse:
    [Left click]   -> place start, then end, then obstacles
    [Left drag]    -> paint obstacles (once start and end exist)
    [Right click]  -> erase a cell (drag to erase many)
- Keyboard:
    [SPACE]        -> run/pause the search
    [N]            -> single step
    [R]            -> clear search overlays, keep the drawing
    [C]            -> clear everything
    [+]/[-]        -> steps/sec
    [Q]/[ESC]      -> quit

Config:
- ENV: GRIDPATH_ROWS=<n>  GRIDPATH_SPEED=<steps/sec>
- CLI: --rows=<n>  --speed=<steps/sec>
"""

import sys, os, time
from typing import List, Optional, Dict
import pygame

from gridpath.app import theme_skin as THEME
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.grid import Grid, DEFAULT_ROWS
from gridpath.core.types import Coord, CellState

# ---------- Config resolution ----------
def _resolve_int(env_key: str, flag: str, default: int, lo: int, hi: int) -> int:
    raw = os.getenv(env_key, str(default))
    for arg in sys.argv:
        if arg.startswith(flag + "="):
            raw = arg.split("=", 1)[1]
    try:
        value = int(raw)
    except ValueError:
        print(f"Ignoring {flag}={raw!r} (not an integer), using {default}")
        return default
    return max(lo, min(hi, value))

def resolve_rows() -> int:
    return _resolve_int("GRIDPATH_ROWS", "--rows", DEFAULT_ROWS, 2, 200)

def resolve_speed() -> int:
    return _resolve_int("GRIDPATH_SPEED", "--speed", 50, 1, 240)

ROWS = resolve_rows()
STEPS_PER_SEC = resolve_speed()

GRID_PX = 600            # square grid area
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
PATH_REVEAL_SEC = 0.05   # one path cell per 50 ms
FONT_NAME = None  # default pygame font
HINT_TEXT = "LMB: start/end/walls   RMB: erase   C: clear"

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = THEME.TEXT_LIGHT
ACCENT_GOLD = THEME.ACCENT_GOLD

# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False   # highlight state
        self.enabled = True   # greyed out and deaf to clicks when False

    def set_active(self, value: bool):
        self.active = bool(value)

    def set_enabled(self, value: bool):
        self.enabled = bool(value)
        if not self.enabled:
            self.hover = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        # base colors
        bg_idle     = (36, 40, 48, 220)
        bg_hover    = (46, 50, 60, 230)
        bg_active   = (58, 86, 160, 235)  # bluish while the search runs
        bg_disabled = (30, 32, 38, 160)
        border_active = (120, 170, 255, 255)

        if not self.enabled:
            bg = bg_disabled
        elif self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))

        screen.blit(base, self.rect.topleft)

        # active outline
        if self.enabled and self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        fg = (235,238,242) if self.enabled else (120,124,132)
        text = font.render(self.label, True, fg)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """True when the event landed on this button, so the grid below ignores it."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.enabled and self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False

# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid):
        pygame.init()

        self.grid = grid
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        win_w = GRID_PX + GRID_MARGIN*2 + PANEL_W
        win_h = GRID_PX + GRID_MARGIN*2
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Dijkstra Path Finding Algorithm Visualizer")

        self._buttons: list[UIButton] = []
        self._layout(win_w, win_h)

        self.algo: Optional[DijkstraAlgo] = None
        self.open_set: set[Coord] = set()
        self.closed_set: set[Coord] = set()
        self.path: List[Coord] = []
        self._path_shown = 0
        self._painting: Optional[int] = None   # mouse button held over the grid

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = STEPS_PER_SEC
        self.state = "Idle"
        self._last_step_t = 0.0
        self._last_reveal_t = 0.0
        self._last_metrics: Dict = {}
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Integer cell_size that fits the window; grid on the left, panel on the right."""
        avail = max(1, min(win_w - PANEL_W, win_h) - 2 * GRID_MARGIN)
        self.cell_size = max(4, avail // self.grid.rows)

        grid_draw = self.grid.rows * self.cell_size
        top_y = max(0, (win_h - grid_draw - 2 * GRID_MARGIN) // 2)
        self.canvas_rect = pygame.Rect(0, top_y, grid_draw + 2 * GRID_MARGIN, grid_draw + 2 * GRID_MARGIN)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _cell_at_pixel(self, pos) -> Optional[Coord]:
        ox, oy = self._grid_origin
        x, y = pos
        if x < ox or y < oy:
            return None
        c = ((y - oy) // self.cell_size, (x - ox) // self.cell_size)
        return c if self.grid.in_bounds(c) else None

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            self._tick()
            self._draw()
            self.clock.tick(60)

    def _tick(self):
        now = time.time()
        if self.running and now - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = now
            self._do_step()
        if self.state == "Done" and not self.path_fully_revealed():
            if now - self._last_reveal_t >= PATH_REVEAL_SEC:
                self._last_reveal_t = now
                self._path_shown += 1

    def _start_search(self) -> bool:
        if not self.grid.is_ready():
            print("Place a start and an end cell before searching")
            self.state = "Need start + end"
            return False
        self._reset_overlays()
        self.algo = DijkstraAlgo()
        self.algo.init(self.grid)
        return True

    def _do_step(self):
        if self.algo is None and not self._start_search():
            return
        if self.state in ("Done", "No path"):
            return
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.closed_set.add(c)
            self.open_set.discard(c)
        if res.status == "done":
            self.path = res.path or []
            self._path_shown = 0
            self.state = "Done"; self.running = False
            print(f"Path found: {len(self.path) - 1} steps, {res.metrics.get('popped', 0)} cells settled")
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
            print("No path between start and end")
        elif res.status in ("running", "idle"):
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def revealed_path(self) -> List[Coord]:
        if not self._path_shown:
            return []
        return self.path[-self._path_shown:]

    def path_fully_revealed(self) -> bool:
        return self._path_shown >= len(self.path)

    # ---------- events ----------
    def _quit(self):
        self.running = False
        self.algo = None
        pygame.quit(); sys.exit(0)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key == pygame.K_r:
                    self._clear_search()
                elif e.key == pygame.K_c:
                    self._clear_all()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._bump_speed(+5)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._bump_speed(-5)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN:
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                c = self._cell_at_pixel(e.pos)
                if c is None:
                    continue
                # one edit per press; holding the button only paints via MOUSEMOTION
                if e.button in (1, 3):
                    self._painting = e.button
                    self._press_cell(c, e.button)
            elif e.type == pygame.MOUSEBUTTONUP:
                self._painting = None
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                c = self._cell_at_pixel(e.pos)
                if c is None or self._painting is None:
                    continue
                self._drag_cell(c, self._painting)

    def _press_cell(self, c: Coord, button: int):
        if button == 1:
            # clicking the start or end is a no-op, so the last search stays on screen
            if self.grid.is_marker(c):
                return
            self._edit(lambda: self.grid.place_marker(c))
        elif button == 3:
            self._edit(lambda: self.grid.reset_cell(c))

    def _drag_cell(self, c: Coord, button: int):
        if button == 1:
            if self.grid.is_ready() and self.grid.cell_at(c).state is CellState.EMPTY:
                self._edit(lambda: self.grid.place_marker(c, CellState.OBSTACLE))
        elif button == 3 and self.grid.cell_at(c).state is not CellState.EMPTY:
            self._edit(lambda: self.grid.reset_cell(c))

    def _edit(self, apply):
        """Any change to the drawing invalidates the last search."""
        if self.algo is not None:
            self._clear_search()
        apply()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        if self.algo is None and not self._start_search():
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(240, self.steps_per_sec + dv)))

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self._path_shown = 0
        self._last_metrics = {
            "algo": "Dijkstra",
            "popped": 0,
            "open_size": 0,
            "closed_count": 0,
            "path_len": 0,
            "distance": None,
        }

    def _clear_search(self):
        self.running = False
        self.state = "Idle"
        self.algo = None
        self.grid.clear_search()
        self._reset_overlays()
        self._refresh_active_states()

    def _clear_all(self):
        self.grid.clear_all()
        self._clear_search()

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw(self, self.screen)
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 24
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 48)
        h = 38
        gap = 10

        def add(label, cb, *, togglable=False, store_as: str | None = None):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step, store_as="btn_step"); y += h + gap
        add("Clear Search", self._clear_search); y += h + gap
        add("Clear All", self._clear_all); y += h + gap

        minus_rect = pygame.Rect(x, y, (w-8)//2, h)
        plus_rect  = pygame.Rect(x + (w-8)//2 + 8, y, (w-8)//2, h)
        self._buttons.append(UIButton("Speed -", minus_rect, lambda: self._bump_speed(-5)))
        self._buttons.append(UIButton("Speed +", plus_rect,  lambda: self._bump_speed(+5)))

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))
        # nothing to run until both markers are down
        for name in ("btn_run", "btn_step"):
            if hasattr(self, name):
                getattr(self, name).set_enabled(self.grid.is_ready())

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card_h = 220
        card = pygame.Surface((rb.width - 40, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 20, rb.y + 20))

        x0 = rb.x + 34
        y0 = rb.y + 28

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Settled: {m.get('popped', 0)}")
        line(f"Frontier: {m.get('open_size', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("distance") is not None and self.state == "Done":
            line(f"Distance: {m['distance']}")
        line("-" * 26)
        line(f"Status: {self.state}")
        line(f"Grid: {self.grid.rows} x {self.grid.rows}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)

        hint = self.font_small.render(HINT_TEXT, True, TEXT_LIGHT)
        self.screen.blit(hint, (rb.x + 24, rb.bottom - hint.get_height() - 28))

# ---------- main ----------
def main():
    Viewer(Grid(ROWS)).run()

if __name__ == "__main__":
    main()
