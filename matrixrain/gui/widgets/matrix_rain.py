import logging
import random
import time
from typing import Callable, List, Optional, Tuple

import pygame

from ...config import RainSettings, DEFAULT_SETTINGS
from ...rain.columns import ColumnModel, plan_columns
from ..assets import FontMetrics
from ..draw import DrawCommand, FillRect, paint
from ..timers import TimerGroup
from .column import ColumnRenderer, GlyphMetrics

logger = logging.getLogger(__name__)

class MatrixCanvas:
    """
    Chuva de dígitos sobre fundo preto.

    O layout (colunas) é refeito sempre que o tamanho muda; os glifos piscam
    em timers próprios, avançados por `update`, e o deslocamento de cada coluna
    sai direto do relógio em `render`.
    """

    def __init__(self, size: Tuple[int, int] = (0, 0),
                 settings: RainSettings = DEFAULT_SETTINGS,
                 metrics: Optional[GlyphMetrics] = None,
                 rng: Optional[random.Random] = None,
                 clock: Callable[[], float] = time.time):
        self.metrics = metrics if metrics is not None else FontMetrics()
        self.settings = settings
        self.rng = rng or random.Random()
        self.clock = clock
        self.timers = TimerGroup()
        self.columns: List[ColumnRenderer] = []
        self.size = (0, 0)
        self.active = True
        self.resize(size)

    @property
    def models(self) -> List[ColumnModel]:
        return [c.model for c in self.columns]

    def resize(self, size: Tuple[int, int]) -> bool:
        size = (size[0], size[1])
        if size == self.size:
            return False
        self.size = size
        self._layout()
        return True

    def _layout(self):
        w, h = self.size
        self._drop_columns()
        self.columns = [
            ColumnRenderer(m, h, self.metrics, self.settings, self.rng, self.timers)
            for m in plan_columns(w, self.settings, self.rng)
        ]
        logger.debug("Layout %dx%d -> %d columns", w, h, len(self.columns))

    def _drop_columns(self):
        for c in self.columns:
            c.dispose()
        self.columns = []

    # ciclo de vida
    def pause(self):
        self.active = False

    def resume(self):
        self.active = True

    def dispose(self):
        self._drop_columns()
        self.timers.clear()

    # frame
    def update(self, now: Optional[float] = None) -> int:
        if not self.active:
            return 0
        return self.timers.advance(self.clock() if now is None else now)

    def render(self, now: Optional[float] = None) -> List[DrawCommand]:
        t = self.clock() if now is None else now
        w, h = self.size
        cmds: List[DrawCommand] = [FillRect((0, 0, w, h), self.settings.background)]
        for col in self.columns:
            cmds.extend(col.render(t))
        return cmds

    def draw(self, screen: pygame.Surface, now: Optional[float] = None):
        paint(screen, self.render(now), pygame.Rect(0, 0, *self.size))
