from functools import lru_cache
import pygame

FONT_NAMES = ("Consolas", "Courier New", "DejaVu Sans Mono", "monospace")

@lru_cache(maxsize=None)
def font_mono(size: int) -> pygame.font.Font:
    pygame.font.init()
    for name in FONT_NAMES:
        path = pygame.font.match_font(name.replace(" ", "").lower())
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)  # fonte padrão do pygame


class FontMetrics:
    """Métricas da fonte monoespaçada usada pra desenhar os glifos."""

    def line_height(self, size: int) -> float:
        return float(font_mono(size).get_linesize())

    def glyph_width(self, size: int) -> float:
        return float(font_mono(size).size("0")[0])
