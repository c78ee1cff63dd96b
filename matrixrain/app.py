import logging
from typing import Optional

import pygame

from .config import RainSettings, DEFAULT_SETTINGS
from .gui.scene_manager import SceneManager
from .gui.scenes.matrix import MatrixScene
from .logging_config import setup_from_settings

logger = logging.getLogger(__name__)

FLAGS = pygame.DOUBLEBUF | pygame.RESIZABLE

def run(settings: Optional[RainSettings] = None):
    settings = settings or DEFAULT_SETTINGS
    pygame.init()
    try:
        screen = pygame.display.set_mode(settings.window_size, FLAGS)
        pygame.display.set_caption(settings.title)
        logger.info("Window opened at %dx%d", *screen.get_size())

        # contexto compartilhado
        ctx = {"screen": pygame.display.get_surface()}

        mgr = SceneManager(
            registry={"matrix": MatrixScene(settings)},
            first="matrix",
            ctx=ctx,
        )

        clock = pygame.time.Clock()
        running = True
        while running:
            dt = clock.tick(settings.fps) / 1000.0
            events = pygame.event.get()
            for e in events:
                if e.type == pygame.QUIT: running = False
                if e.type == pygame.VIDEORESIZE:
                    logger.info("Window resized to %dx%d", e.w, e.h)
                    ctx["screen"] = pygame.display.set_mode((e.w, e.h), FLAGS)
            if not running:
                break

            mgr.tick(events, dt, ctx["screen"])
            pygame.display.flip()

        mgr.close()
    finally:
        pygame.quit()
        logger.info("Stopped.")

def main(settings: Optional[RainSettings] = None):
    settings = settings or DEFAULT_SETTINGS
    setup_from_settings(settings)
    run(settings)

if __name__ == "__main__":
    main()
