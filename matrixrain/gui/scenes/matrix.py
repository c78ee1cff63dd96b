import pygame

from ...config import RainSettings, DEFAULT_SETTINGS
from ..scene_manager import Scene
from ..widgets.matrix_rain import MatrixCanvas

class MatrixScene(Scene):
    def __init__(self, settings: RainSettings = DEFAULT_SETTINGS, **canvas_kw):
        self.settings = settings
        self.canvas_kw = canvas_kw  # metrics / rng / clock (testes)
        self.canvas: MatrixCanvas | None = None
        self.now = 0.0

    def enter(self, ctx):
        self.canvas = MatrixCanvas(settings=self.settings, **self.canvas_kw)
        screen = ctx.get("screen")
        if screen is not None:
            self.canvas.resize(screen.get_size())
        self.now = self.canvas.clock()

    def leave(self):
        if self.canvas is not None:
            self.canvas.dispose()
            self.canvas = None

    def handle_event(self, ev):
        # janela minimizada -> glifos param de sortear
        if ev.type == pygame.WINDOWMINIMIZED:
            self.canvas.pause()
        elif ev.type in (pygame.WINDOWRESTORED, pygame.WINDOWSHOWN):
            self.canvas.resume()

    def update(self, dt):
        self.now = self.canvas.clock()
        self.canvas.update(self.now)

    def render(self, screen):
        # o canvas acompanha o tamanho da superfície
        self.canvas.resize(screen.get_size())
        self.canvas.draw(screen, self.now)
