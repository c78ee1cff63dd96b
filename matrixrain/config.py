# configurações da animação (validadas na criação)
from typing import Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .rain.glyphs import (
    GLYPHS, COLUMN_WIDTH, GLYPH_COUNT, FONT_SIZE, FALL_SPEED,
    ROW_SPACING, GLYPH_INTERVAL, SUBSTITUTION_PERCENT, MATRIX_GREEN, BLACK,
)

Color = Tuple[int, int, int]  # (r, g, b)

class RainSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    glyphs: Tuple[str, ...] = Field(default=GLYPHS, min_length=1)
    column_width: float = Field(default=COLUMN_WIDTH, gt=0)
    min_glyphs: int = Field(default=GLYPH_COUNT[0], ge=1)
    max_glyphs: int = GLYPH_COUNT[1]
    min_font_size: int = Field(default=FONT_SIZE[0], ge=1)
    max_font_size: int = FONT_SIZE[1]
    min_speed: float = Field(default=FALL_SPEED[0], ge=0)
    max_speed: float = FALL_SPEED[1]
    row_spacing: float = Field(default=ROW_SPACING, ge=0)
    glyph_interval: float = Field(default=GLYPH_INTERVAL, ge=GLYPH_INTERVAL)
    substitution_percent: float = Field(default=SUBSTITUTION_PERCENT, ge=0, le=100)

    glyph_color: Color = MATRIX_GREEN
    background: Color = BLACK

    # janela
    title: str = "Matrix"
    window_size: Tuple[int, int] = (960, 540)
    fps: int = Field(default=60, ge=0)  # 0 = sem limite

    # log
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None

    @model_validator(mode="after")
    def _check_ranges(self):
        for lo, hi in (("min_glyphs", "max_glyphs"),
                       ("min_font_size", "max_font_size"),
                       ("min_speed", "max_speed")):
            if getattr(self, lo) > getattr(self, hi):
                raise ValueError(f"{lo} must not exceed {hi}")
        return self

DEFAULT_SETTINGS = RainSettings()
