from __future__ import annotations

from typing import Optional

try:
    import pygame  # type: ignore
except ImportError:  # pragma: no cover - pygame not installed in some envs
    pygame = None

from xenzia.board import segment_orientations
from xenzia.config import BACKGROUND
from xenzia.game import SnakeGame, Vec2

HEAD_COLOR = (40, 70, 200)
BODY_COLOR = (70, 110, 230)
FOOD_COLOR = (200, 50, 50)
EYE_COLOR = (255, 255, 255)

# Eye offsets (fractions of a cell) per head orientation, in screen space.
_EYES = {
    "head_up": ((0.3, 0.25), (0.7, 0.25)),
    "head_down": ((0.3, 0.75), (0.7, 0.75)),
    "head_left": ((0.25, 0.3), (0.25, 0.7)),
    "head_right": ((0.75, 0.3), (0.75, 0.7)),
}


class Renderer:
    """Draws a game into a pygame window; world y grows upwards."""

    def __init__(self, game: SnakeGame, caption: str = "Snake Xenzia") -> None:
        if pygame is None:
            raise ImportError("pygame is required for rendering")

        self.game = game
        self.cell_size = game.config.cell_size
        pygame.init()
        width_px = game.grid.width * self.cell_size
        height_px = game.grid.height * self.cell_size
        self._window = pygame.display.set_mode((width_px, height_px))
        pygame.display.set_caption(caption)
        self._font: Optional[pygame.font.Font] = None

    def _cell_rect(self, pos: Vec2) -> pygame.Rect:
        x, y = pos
        row = self.game.grid.height - 1 - y
        return pygame.Rect(x * self.cell_size, row * self.cell_size, self.cell_size, self.cell_size)

    def draw(self) -> None:
        self._window.fill(BACKGROUND)

        segments = list(self.game.snake)
        orientations = segment_orientations(segments)
        for i, pos in enumerate(segments):
            rect = self._cell_rect(pos)
            color = HEAD_COLOR if i == 0 else BODY_COLOR
            if orientations[i].startswith("tail_"):
                rect = rect.inflate(-self.cell_size // 3, -self.cell_size // 3)
            pygame.draw.rect(self._window, color, rect)

        head_rect = self._cell_rect(segments[0])
        radius = max(1, self.cell_size // 10)
        for fx, fy in _EYES[orientations[0]]:
            center = (
                head_rect.x + int(fx * self.cell_size),
                head_rect.y + int(fy * self.cell_size),
            )
            pygame.draw.circle(self._window, EYE_COLOR, center, radius)

        food = self.game.current_food_position()
        if food is not None:
            pygame.draw.ellipse(self._window, FOOD_COLOR, self._cell_rect(food))

        self._draw_score()
        pygame.display.flip()

    def _draw_score(self) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        label = f"Score: {self.game.score}  Best: {self.game.high_score}"
        if self.game.won:
            label += "  You win!"
        surface = self._font.render(label, True, (20, 20, 20))
        self._window.blit(surface, (8, 8))

    def close(self) -> None:
        if pygame:
            pygame.quit()
