"""A positioned model in the battle world."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any

from .vec3 import Vec3


class Direction(Enum):
    BACKWARDS = 0
    LEFT = 1
    RIGHT = 2
    FORWARDS = 3


class Movement(Enum):
    STOPPED = 0
    WALKING = 1
    RUNNING = 2


class Model:
    """A model with a world position, an origin and a movement vector."""

    def __init__(self, x: int = 0, y: int = 0, z: int = 0, api: Any = None) -> None:
        self._position = Vec3(x, y, z)
        self._origin = Vec3()
        self.movement = Vec3()
        self.vertices: list[float] = []
        self.vertex_shader = ""
        self.fragment_shader = ""
        self.api = api

    @property
    def position(self) -> Vec3:
        return replace(self._position)

    @property
    def origin(self) -> Vec3:
        return replace(self._origin)

    @property
    def x(self) -> int:
        return self._position.x

    @x.setter
    def x(self, value: int) -> None:
        self._position.x = value

    @property
    def y(self) -> int:
        return self._position.y

    @y.setter
    def y(self, value: int) -> None:
        self._position.y = value

    @property
    def z(self) -> int:
        return self._position.z

    @z.setter
    def z(self, value: int) -> None:
        self._position.z = value

    def screen_space_pos(self) -> tuple[int, int]:
        """Return the (x, y) part of the position."""
        return self._position.x, self._position.y

    def move(self, direction: Direction) -> None:
        """Step one unit in the given direction."""
        if direction is Direction.BACKWARDS:
            self._position.z += 1
        elif direction is Direction.LEFT:
            self._position.x -= 1
        elif direction is Direction.RIGHT:
            self._position.x += 1
        elif direction is Direction.FORWARDS:
            self._position.z -= 1

    def stop(self, direction: Direction | None = None) -> None:
        """Stop all movement, or only the axis of the given direction."""
        if direction is None:
            self.movement = Vec3()
            return
        if direction in (Direction.LEFT, Direction.RIGHT):
            self.movement.x = 0
        if direction in (Direction.FORWARDS, Direction.BACKWARDS):
            self.movement.y = 0

    def update(self, frame: int, context: Any) -> None:
        """Draw the model through its graphics API, if one is attached."""
        if self.api is not None:
            self.api.draw_model(self)