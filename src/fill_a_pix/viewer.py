"""pygame front end for a solving session.

Controls:
- x: start/stop the solver
- + / -: more or fewer solver steps per frame
- left click: cycle a cell unsolved -> shaded -> unshaded (while not solving)
- Esc or closing the window: quit
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from fill_a_pix.grid import SHADED, UNSHADED, UNSOLVED, Point
from fill_a_pix.session import SolveSession

Color = Tuple[int, int, int]
Rect = Tuple[int, int, int, int]


@dataclass
class ViewSettings:
    controls_position: Tuple[int, int] = (15, 15)
    grid_position: Tuple[int, int] = (260, 15)
    margin: Tuple[int, int] = (15, 15)
    label_size: int = 15
    label_color: Color = (0, 0, 0)
    # Used when the window is too small to size cells from it.
    cell_size: int = 50
    background_color: Color = (227, 222, 186)
    grid_border_color: Color = (102, 102, 102)
    grid_border_width: int = 3
    cell_border_width: int = 1
    unsolved_hint_color: Color = (0, 0, 0)
    unsolved_background_color: Color = (255, 255, 255)
    shaded_hint_color: Color = (255, 255, 255)
    shaded_background_color: Color = (0, 0, 0)
    unshaded_hint_color: Color = (128, 128, 128)
    unshaded_background_color: Color = (230, 230, 230)
    current_cell_color: Color = (255, 0, 0)


@dataclass(frozen=True)
class Layout:
    cell_size: int
    grid_rect: Rect

    @property
    def origin(self) -> Point:
        x, y, _, _ = self.grid_rect
        return x, y


def compute_layout(
    view_size: Tuple[int, int], grid_size: Tuple[int, int], settings: ViewSettings
) -> Layout:
    """Fits the grid right of the controls column inside the window."""
    vw, vh = view_size
    gw, gh = grid_size
    gx, gy = settings.grid_position
    mx, my = settings.margin
    border = settings.grid_border_width

    cell = settings.cell_size
    if gw > 0 and gh > 0:
        hcell = (vw - mx - gx - border) // gw
        vcell = (vh - 2 * my - border) // gh
        fitted = min(hcell, vcell)
        if fitted > 0:
            cell = fitted

    return Layout(cell_size=cell, grid_rect=(gx, gy, cell * gw + border, cell * gh + border))


def cell_at(pos: Tuple[float, float], layout: Layout, grid_size: Tuple[int, int], border: int) -> Optional[Point]:
    """Maps a window position to a grid cell, or None outside the cells."""
    ox, oy = layout.origin
    ox += border // 2
    oy += border // 2
    px, py = pos
    if px < ox or py < oy:
        return None
    x = int((px - ox) // layout.cell_size)
    y = int((py - oy) // layout.cell_size)
    gw, gh = grid_size
    if x >= gw or y >= gh:
        return None
    return x, y


class PictureGridViewer:
    def __init__(
        self,
        session: SolveSession,
        *,
        settings: Optional[ViewSettings] = None,
        window_size: Tuple[int, int] = (640, 400),
        render_fps: float = 60.0,
    ) -> None:
        self.session = session
        self.settings = settings or ViewSettings()
        self.render_fps = render_fps
        self.layout = compute_layout(window_size, self._grid_size(), self.settings)

        import pygame

        pygame.init()
        self._pygame = pygame
        self._screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption("Fill-a-Pix")
        self._label_font = pygame.font.SysFont(None, self.settings.label_size + 6)
        self._hint_fonts: Dict[int, object] = {}

    def _grid_size(self) -> Tuple[int, int]:
        return self.session.grid.width, self.session.grid.height

    # ---------- input ----------
    def _pump_events(self) -> None:
        pg = self._pygame
        for event in pg.event.get():
            if event.type == pg.QUIT:
                raise KeyboardInterrupt

            if event.type == pg.KEYDOWN:
                if event.key == pg.K_ESCAPE:
                    raise KeyboardInterrupt
                if event.key == pg.K_x:
                    self.session.toggle()
                elif event.key in (pg.K_PLUS, pg.K_EQUALS, pg.K_KP_PLUS):
                    self.session.increase_steps()
                elif event.key in (pg.K_MINUS, pg.K_KP_MINUS):
                    self.session.decrease_steps()

            if event.type == pg.MOUSEBUTTONDOWN and event.button == 1:
                cell = cell_at(event.pos, self.layout, self._grid_size(), self.settings.grid_border_width)
                if cell is not None:
                    self.session.edit_cell(*cell)

    # ---------- drawing ----------
    def _hint_font(self, size: int):
        font = self._hint_fonts.get(size)
        if font is None:
            font = self._pygame.font.SysFont(None, size)
            self._hint_fonts[size] = font
        return font

    def _draw_cell(self, x: int, y: int) -> None:
        pg = self._pygame
        s = self.settings
        cell = self.session.grid.get(x, y)
        size = self.layout.cell_size
        ox, oy = self.layout.origin
        rect = pg.Rect(ox + s.grid_border_width // 2 + x * size, oy + s.grid_border_width // 2 + y * size, size, size)

        if cell.state == UNSOLVED:
            background, hint_color = s.unsolved_background_color, s.unsolved_hint_color
        elif cell.state == SHADED:
            background, hint_color = s.shaded_background_color, s.shaded_hint_color
        elif cell.state == UNSHADED:
            background, hint_color = s.unshaded_background_color, s.unshaded_hint_color
        else:
            raise RuntimeError(f"invalid cell state: {cell.state}")

        pg.draw.rect(self._screen, background, rect)
        pg.draw.rect(self._screen, s.grid_border_color, rect, width=s.cell_border_width)

        if cell.state == UNSHADED:
            pad = int(size * 0.2)
            pg.draw.line(self._screen, hint_color, (rect.left + pad, rect.top + pad), (rect.right - pad, rect.bottom - pad), s.cell_border_width)
            pg.draw.line(self._screen, hint_color, (rect.left + pad, rect.bottom - pad), (rect.right - pad, rect.top + pad), s.cell_border_width)

        if cell.has_hint:
            txt = self._hint_font(max(8, int(size * 0.75))).render(str(cell.hint), True, hint_color)
            self._screen.blit(txt, txt.get_rect(center=rect.center))

        if self.session.solving and self.session.current == (x, y):
            pg.draw.rect(self._screen, s.current_cell_color, rect, width=max(2, size // 12))

    def _draw_frame(self) -> None:
        s = self.settings
        self._screen.fill(s.background_color)
        self.layout = compute_layout(self._screen.get_size(), self._grid_size(), s)

        self._pygame.draw.rect(self._screen, s.grid_border_color, self.layout.grid_rect, width=s.grid_border_width)
        for y in range(self.session.grid.height):
            for x in range(self.session.grid.width):
                self._draw_cell(x, y)

        lx, ly = s.controls_position
        offset = s.label_size
        for line in self.session.status_lines():
            txt = self._label_font.render(line, True, s.label_color)
            self._screen.blit(txt, (lx, ly + offset))
            offset += int(s.label_size * 1.5)

        self._pygame.display.flip()

    # ---------- loop ----------
    def run(self) -> None:
        frame_dt = 1.0 / self.render_fps if self.render_fps > 0 else 0.0
        while True:
            started = time.perf_counter()
            self._pump_events()
            self.session.tick()
            self._draw_frame()
            elapsed = time.perf_counter() - started
            if elapsed < frame_dt:
                time.sleep(frame_dt - elapsed)

    def close(self) -> None:
        self._pygame.quit()
