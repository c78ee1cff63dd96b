import random
from typing import Optional

from ...config import RainSettings, DEFAULT_SETTINGS
from ..timers import IntervalTimer

class GlyphCell:
    # um glifo que às vezes pisca pra outro; o caractere original nunca muda
    def __init__(self, character: str, settings: RainSettings = DEFAULT_SETTINGS,
                 rng: Optional[random.Random] = None):
        self.character = character
        self.glyphs = settings.glyphs
        self.percent = settings.substitution_percent
        self.interval = settings.glyph_interval
        self.rng = rng or random.Random()
        self.text = character
        self.substituted = False
        self.tick()  # primeira avaliação ao aparecer

    def tick(self) -> str:
        # sorteio novo a cada tick, sem memória do anterior
        self.substituted = self.rng.randrange(100) < self.percent
        self.text = self.rng.choice(self.glyphs) if self.substituted else self.character
        return self.text

    def timer(self) -> IntervalTimer:
        return IntervalTimer(self.interval, self.tick)
