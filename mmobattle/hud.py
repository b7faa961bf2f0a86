"""Text elements drawn over the battle scene."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pygame import Rect

from .vec3 import make_hud_string

DISPLAY_TIME = 30
SPEED = 3

WHITE = (255, 255, 255, 255)


def _as_rect(position: Sequence[int] | Rect) -> Rect:
    if isinstance(position, Rect):
        return Rect(position)
    if len(position) == 2:
        return Rect(position[0], position[1], 0, 0)
    return Rect(*position)


class HUDElement:
    """A label with an optional value, rendered with a font."""

    def __init__(
        self,
        font: Any,
        label: str,
        value: str,
        position: Sequence[int] | Rect,
        text_color: tuple[int, int, int, int] = WHITE,
    ) -> None:
        self.font = font
        self.label = label
        self.value = value
        self.position = _as_rect(position)
        self.text_color = text_color
        self.surface: Any = None
        self._render()

    @property
    def text(self) -> str:
        return make_hud_string(self.label, self.value)

    def _render(self) -> None:
        if self.font is None:
            self.surface = None
        else:
            self.surface = self.font.render(self.text, False, self.text_color)

    def set_value(self, value: str) -> None:
        """Replace the value and re-render the text."""
        self.value = value
        self._render()

    def set_position(self, pos: Sequence[int]) -> None:
        """Move the element's top-left corner to the given point."""
        self.position.x, self.position.y = pos[0], pos[1]

    def update(self, frame: int, value: str, screen: Any) -> None:
        """Take a new value if one is given and draw onto the screen."""
        if value:
            self.set_value(value)
        if screen is not None and self.surface is not None:
            screen.blit(self.surface, self.position)


class PopUpHUDElement(HUDElement):
    """A HUD element that floats upward for a short time after being shown."""

    def __init__(
        self,
        font: Any,
        label: str,
        value: str,
        position: Sequence[int] | Rect,
        text_color: tuple[int, int, int, int] = WHITE,
    ) -> None:
        super().__init__(font, label, value, position, text_color)
        self.timer = 0

    def show(self) -> None:
        """Start the pop-up's display timer."""
        self.timer = DISPLAY_TIME

    def update(self, frame: int, value: str, screen: Any) -> None:
        if self.timer:
            self.position.y -= SPEED
            super().update(frame, value, screen)
            self.timer -= 1