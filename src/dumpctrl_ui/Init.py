from typing import Tuple

import pygame
from pygame import display, time

from dumpctrl_ui.Settings import Settings


class Init:
    """
    Factory to help with initialization of core components
    """

    @classmethod
    def settings(cls, path: str = "settings.toml") -> Settings:
        """
        Load settings from a file, fall back to defaults if it does not exist.
        """
        return Settings(path)

    @classmethod
    def ui(cls, size: Tuple[int, int], title: str) -> Tuple[pygame.Surface, pygame.time.Clock]:
        pygame.init()

        flags = pygame.DOUBLEBUF | pygame.SCALED
        screen = display.set_mode(size, flags)
        display.set_caption(title)
        clock = time.Clock()

        return screen, clock
