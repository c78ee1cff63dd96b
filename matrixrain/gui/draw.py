# comandos de desenho gerados a cada frame e o pintor pygame
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Tuple, Union
import pygame

from .assets import font_mono

Color = Tuple[int, int, int]

@dataclass(frozen=True)
class FillRect:
    rect: Tuple[float, float, float, float]  # (x, y, w, h)
    color: Color

@dataclass(frozen=True)
class DrawGlyph:
    text: str
    x: float
    y: float
    size: int
    color: Color

DrawCommand = Union[FillRect, DrawGlyph]


@lru_cache(maxsize=512)
def glyph_surface(text: str, size: int, color: Color) -> pygame.Surface:
    # o alfabeto é pequeno, então o cache cobre quase tudo
    return font_mono(size).render(text, True, color)


def paint(screen: pygame.Surface, commands: Iterable[DrawCommand],
          clip: Optional[pygame.Rect] = None) -> None:
    old_clip = screen.get_clip()
    if clip is not None:
        screen.set_clip(clip)
    try:
        for cmd in commands:
            if isinstance(cmd, FillRect):
                x, y, w, h = cmd.rect
                screen.fill(cmd.color, pygame.Rect(round(x), round(y), round(w), round(h)))
            elif isinstance(cmd, DrawGlyph):
                screen.blit(glyph_surface(cmd.text, cmd.size, cmd.color),
                            (round(cmd.x), round(cmd.y)))
    finally:
        screen.set_clip(old_clip)
