import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID, uuid4

from ..config import RainSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)

# uma coluna de glifos; imutável, recriada a cada layout
@dataclass(frozen=True)
class ColumnModel:
    characters: Tuple[str, ...]
    font_size: int
    x: float
    speed: float
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def random(cls, x: float, settings: RainSettings = DEFAULT_SETTINGS,
               rng: Optional[random.Random] = None) -> "ColumnModel":
        rng = rng or random.Random()
        count = rng.randint(settings.min_glyphs, settings.max_glyphs)
        return cls(
            characters=tuple(rng.choice(settings.glyphs) for _ in range(count)),
            font_size=rng.randint(settings.min_font_size, settings.max_font_size),
            x=x,
            speed=rng.uniform(settings.min_speed, settings.max_speed),
        )


def column_x(index: int, column_width: float) -> float:
    return index * column_width + column_width / 4


def plan_columns(width: float, settings: RainSettings = DEFAULT_SETTINGS,
                 rng: Optional[random.Random] = None) -> List[ColumnModel]:
    """Divide a largura em colunas de `column_width` (a sobra no fim é descartada)."""
    rng = rng or random.Random()
    count = max(0, int(width // settings.column_width))
    cols = [ColumnModel.random(column_x(i, settings.column_width), settings, rng)
            for i in range(count)]
    logger.debug("Planned %d columns for width %.1f", count, width)
    return cols
