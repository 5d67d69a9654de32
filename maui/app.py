from __future__ import annotations

import logging
from typing import Optional, Protocol

import pygame

from maui.settings import AppCfg

logger = logging.getLogger(__name__)


class Scene(Protocol):
    """What the app loop drives each frame."""
    request_quit: bool

    def on_resize(self, screen: pygame.Surface) -> None: ...
    def update(self, dt: float) -> None: ...
    def draw(self, surface: pygame.Surface) -> None: ...
    def handle_event(self, e: pygame.event.Event) -> bool: ...


class DemoApp:
    """
    Minimal app shell: window init, fixed-fps clock, event pump.
    Timer ticks reach widgets through scene.update(dt) once per frame.
    """

    def __init__(self, cfg: AppCfg):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        self._flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=self._flags,
        )
        self.clock = pygame.time.Clock()
        self.running = True
        self.scene: Optional[Scene] = None

    def set_scene(self, scene: Scene) -> None:
        self.scene = scene
        scene.on_resize(self.screen)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        logger.info("Starting main loop at %d fps", self.cfg.fps)
        while self.running and not (self.scene and self.scene.request_quit):
            dt = self.clock.tick(self.cfg.fps) / 1000.0

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                    break

                if e.type == pygame.VIDEORESIZE:
                    self._resize_to(e.w, e.h)
                    continue

                if self.scene and self.scene.handle_event(e):
                    continue

                if e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                    self.running = False

            self.screen.fill(self.cfg.window.bg_rgb)
            if self.scene:
                self.scene.update(dt)
                self.scene.draw(self.screen)
            pygame.display.flip()

        pygame.quit()

    def _resize_to(self, w: int, h: int) -> None:
        w = max(1, int(w))
        h = max(1, int(h))
        self.screen = pygame.display.set_mode((w, h), flags=self._flags)
        if self.scene:
            self.scene.on_resize(self.screen)
