"""Integer 3D vectors and small helpers shared by the battle code."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

FPS = 60


@dataclass
class Vec3:
    """A mutable integer vector in 3D space."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)


def distance_between_points(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Return the absolute per-axis distance between two 2D points."""
    ax, ay = a
    bx, by = b
    return abs(ax - bx), abs(ay - by)


def distance_between_vecs(a: Vec3, b: Vec3) -> Vec3:
    """Return the signed per-axis difference ``a - b``."""
    return a - b


def make_hud_string(label: str, value: str) -> str:
    """Join a label and a value as ``label: value``, omitting empty parts."""
    if label and value:
        return f"{label}: {value}"
    return label or value