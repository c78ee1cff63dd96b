import random
from typing import List, Optional, Protocol

from ...config import RainSettings, DEFAULT_SETTINGS
from ...rain.columns import ColumnModel
from ...rain.motion import column_offset
from ..draw import DrawGlyph
from ..probe import SizeProbe, Size
from ..timers import IntervalTimer, TimerGroup
from .glyph_cell import GlyphCell


class GlyphMetrics(Protocol):
    def line_height(self, size: int) -> float: ...
    def glyph_width(self, size: int) -> float: ...


class ColumnRenderer:
    """
    Desenha uma coluna: glifos empilhados de cima pra baixo, deslocados em y
    conforme o tempo. A altura da pilha chega pelo SizeProbe e só vale a partir
    do frame seguinte (até lá é 0).
    """

    def __init__(self, model: ColumnModel, full_height: float, metrics: GlyphMetrics,
                 settings: RainSettings = DEFAULT_SETTINGS,
                 rng: Optional[random.Random] = None,
                 timers: Optional[TimerGroup] = None):
        self.model = model
        self.full_height = full_height
        self.color = settings.glyph_color
        self.measured_height = 0.0
        self.probe = SizeProbe(self._on_size)

        self.line_height = metrics.line_height(model.font_size)
        self.glyph_width = metrics.glyph_width(model.font_size)
        self.spacing = settings.row_spacing

        self.cells = [GlyphCell(ch, settings, rng) for ch in model.characters]
        self._timers: List[IntervalTimer] = []
        if timers is not None:
            self._timers = [timers.register(c.timer()) for c in self.cells]

    def _on_size(self, size: Size):
        self.measured_height = size[1]

    @property
    def pitch(self) -> float:
        return self.line_height + self.spacing

    def extent(self) -> Size:
        n = len(self.cells)
        if n == 0:
            return (0.0, 0.0)
        return (self.glyph_width, n * self.line_height + (n - 1) * self.spacing)

    def offset(self, t: float) -> float:
        return column_offset(t, self.model.speed, self.full_height, self.measured_height)

    def render(self, t: float) -> List[DrawGlyph]:
        top = self.offset(t)
        cmds = []
        for i, cell in enumerate(self.cells):
            y = top + i * self.pitch
            # fora da tela (canvas recortado)
            if y + self.line_height <= 0 or y >= self.full_height:
                continue
            cmds.append(DrawGlyph(cell.text, self.model.x, y, self.model.font_size, self.color))
        # mede depois do layout, como um leitor de tamanho
        self.probe.report(self.extent())
        return cmds

    def dispose(self):
        for t in self._timers:
            t.cancel()
        self._timers.clear()
