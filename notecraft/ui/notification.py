# notecraft/ui/notification.py
import time
from typing import Callable, Optional, Tuple

import pygame

from notecraft.config import (
    NOTIFICATION_BG_COLOR, NOTIFICATION_DURATION, PANEL_BORDER_COLOR, TEXT_COLOR
)


class CraftNotification:
    """A one-line message that shows after a craft attempt and hides itself."""

    def __init__(self, duration: float = NOTIFICATION_DURATION,
                 clock: Callable[[], float] = time.time):
        self.duration = duration
        self.clock = clock
        self.message = ""
        self.color: Tuple[int, int, int] = TEXT_COLOR
        self.shown_at: Optional[float] = None

    def show(self, message: str, color: Tuple[int, int, int] = TEXT_COLOR) -> None:
        self.message = message
        self.color = color
        self.shown_at = self.clock()

    def hide(self) -> None:
        self.shown_at = None

    @property
    def is_visible(self) -> bool:
        return self.shown_at is not None

    def update(self) -> bool:
        """Hides the message once its time is up. Returns whether it is still showing."""
        if self.shown_at is None:
            return False
        if self.clock() - self.shown_at >= self.duration:
            self.hide()
            return False
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, rect: pygame.Rect) -> None:
        if not self.is_visible:
            return
        pygame.draw.rect(surface, NOTIFICATION_BG_COLOR, rect)
        pygame.draw.rect(surface, PANEL_BORDER_COLOR, rect, 1)
        text_surf = font.render(self.message, True, self.color)
        text_rect = text_surf.get_rect(center=rect.center)
        surface.blit(text_surf, text_rect)
