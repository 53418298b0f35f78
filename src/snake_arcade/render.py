# render.py
from __future__ import annotations
import logging
import os
from typing import Dict, Optional, Sequence, Tuple

import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, CELL_SIZE,
    BG, SNAKE_HEAD, SNAKE_TAIL, VIPER_HEAD, VIPER_TAIL,
    RED, YELLOW, STONE, BORDER, TEXT, BOX,
    Config, CFG,
)
from .geometry import Cell, Rect
from .session import GameState, Snapshot

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

# texture name -> file inside Config.assets_dir
TEXTURE_FILES = {
    "background": "background.bmp",
    "box": "background2.bmp",
    "apple": "apple.bmp",
    "stone": "stone.bmp",
    "banana": "banana.bmp",
}


class AssetLoadError(RuntimeError):
    """Window, font or texture could not be set up; the game cannot start."""


# ---------- Helpers ----------
def gradient(start: Color, end: Color, t: float) -> Color:
    return tuple(int(a + t * (b - a)) for a, b in zip(start, end))  # type: ignore


def segment_colors(n: int, start: Color, end: Color):
    for i in range(n):
        t = i / (n - 1) if n > 1 else 0.0
        yield gradient(start, end, t)


# ---------- Render context ----------
class RenderContext:
    """
    Owns the window, font and any textures for the lifetime of the program.
    Use as a context manager so everything is released on exit:

        with RenderContext(cfg) as ctx:
            ctx.draw(snapshot)
    """

    def __init__(self, cfg: Config = CFG):
        self.cfg = cfg
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.textures: Dict[str, pygame.Surface] = {}

    def open(self) -> "RenderContext":
        try:
            pygame.init()
            self.font = pygame.font.SysFont(None, 28)
            self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
            pygame.display.set_caption("Snake")
        except pygame.error as exc:
            raise AssetLoadError(f"pygame setup failed: {exc}") from exc
        if self.cfg.assets_dir:
            self.textures = self._load_textures(self.cfg.assets_dir)
        return self

    def close(self) -> None:
        self.textures.clear()
        self.screen = None
        self.font = None
        pygame.quit()

    def __enter__(self) -> "RenderContext":
        return self.open()

    def __exit__(self, *exc) -> None:
        self.close()

    def _load_textures(self, assets_dir: str) -> Dict[str, pygame.Surface]:
        textures = {}
        for name, filename in TEXTURE_FILES.items():
            path = os.path.join(assets_dir, filename)
            try:
                textures[name] = pygame.image.load(path).convert()
            except (pygame.error, FileNotFoundError) as exc:
                raise AssetLoadError(f"Unable to load image {path}: {exc}") from exc
            logger.debug("Loaded texture %s from %s", name, path)
        return textures

    # ---------- Draw ----------
    def draw(self, snap: Snapshot) -> None:
        """Draw one full frame for the given snapshot and flip the display."""
        assert self.screen is not None and self.font is not None, "Call open() first."
        self._background()

        if snap.state is GameState.MENU:
            self._message_box(["Press 'Enter' to Start"])
        elif snap.state is GameState.LEVEL_UP:
            self._message_box(list(snap.message))
        else:
            self._board(snap, with_hazards=snap.state is not GameState.GAME_OVER and snap.state is not GameState.PAUSED)
            if snap.state is GameState.PLAYING and snap.bonus is not None:
                self._text_top_right(f"Banana disappears in: {snap.bonus_remaining_ms // 1000}s")
            elif snap.state is GameState.COUNTDOWN:
                self._text_centered(f"Resuming in: {snap.countdown_remaining_ms // 1000}s")
            elif snap.state is GameState.PAUSED:
                self._message_box(["Paused", "Press 'P' to Resume"])
            elif snap.state is GameState.GAME_OVER:
                self._message_box([f"Game Over! Score: {snap.score}", "Press 'R' to restart"])

        pygame.display.flip()

    def _background(self) -> None:
        tex = self.textures.get("background")
        if tex is not None:
            self.screen.blit(pygame.transform.scale(tex, (WIDTH, HEIGHT)), (0, 0))
        else:
            self.screen.fill(BG)

    def _board(self, snap: Snapshot, with_hazards: bool) -> None:
        self._snake(snap.snake, SNAKE_HEAD, SNAKE_TAIL)
        if snap.food is not None:
            self._item(snap.food, "apple", RED)
        if with_hazards:
            if snap.bonus is not None:
                self._item(snap.bonus, "banana", YELLOW)
            for ob in snap.obstacles:
                self._stone(ob)
            if snap.hazard:
                self._snake(snap.hazard, VIPER_HEAD, VIPER_TAIL)
        txt = self.font.render(f"Score: {snap.score}   {snap.level}", True, TEXT)
        self.screen.blit(txt, (10, 10))

    def _snake(self, cells: Sequence[Cell], start: Color, end: Color) -> None:
        for (x, y), color in zip(cells, segment_colors(len(cells), start, end)):
            rect = pygame.Rect(x, y, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BORDER, rect, 1)
        if cells:
            hx, hy = cells[0]
            eye = pygame.Rect(hx + CELL_SIZE // 4, hy + CELL_SIZE // 4, CELL_SIZE // 5, CELL_SIZE // 5)
            pygame.draw.rect(self.screen, RED, eye)

    def _item(self, cell: Cell, texture: str, color: Color) -> None:
        rect = pygame.Rect(cell[0], cell[1], CELL_SIZE, CELL_SIZE)
        tex = self.textures.get(texture)
        if tex is not None:
            self.screen.blit(pygame.transform.scale(tex, rect.size), rect)
        else:
            pygame.draw.ellipse(self.screen, color, rect)

    def _stone(self, ob: Rect) -> None:
        rect = pygame.Rect(ob.x, ob.y, ob.w, ob.h)
        tex = self.textures.get("stone")
        if tex is not None:
            self.screen.blit(pygame.transform.scale(tex, rect.size), rect)
        else:
            pygame.draw.rect(self.screen, STONE, rect)
            pygame.draw.rect(self.screen, BORDER, rect, 2)

    def _text_centered(self, text: str) -> None:
        surf = self.font.render(text, True, TEXT)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, HEIGHT // 2)))

    def _text_top_right(self, text: str) -> None:
        surf = self.font.render(text, True, TEXT)
        self.screen.blit(surf, (WIDTH - surf.get_width() - 10, 10))

    def _message_box(self, lines: Sequence[str]) -> None:
        surfs = [self.font.render(line, True, TEXT) for line in lines]
        box_w = max(s.get_width() for s in surfs) + 80
        box_h = sum(s.get_height() for s in surfs) + 20 * (len(surfs) - 1) + 60
        box = pygame.Rect((WIDTH - box_w) // 2, (HEIGHT - box_h) // 2, box_w, box_h)

        tex = self.textures.get("box")
        if tex is not None:
            self.screen.blit(pygame.transform.scale(tex, box.size), box)
        else:
            pygame.draw.rect(self.screen, BOX, box)
            pygame.draw.rect(self.screen, BORDER, box, 2)

        y = box.y + 30
        for s in surfs:
            self.screen.blit(s, s.get_rect(midtop=(WIDTH // 2, y)))
            y += s.get_height() + 20
