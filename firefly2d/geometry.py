"""Plain geometric value types: vectors, colours, projections and meshes."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

__all__ = ["Vec2", "RGBAColor", "TransformState", "Projection", "Mesh"]


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def of(cls, value: Vec2 | Iterable[float]) -> Vec2:
        """Return ``value`` as a Vec2, accepting any pair of numbers."""
        if isinstance(value, Vec2):
            return value
        x, y = value
        return cls(float(x), float(y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return self.invert()

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec2:
        return Vec2(self.x / divisor, self.y / divisor)

    def dot(self, other: Vec2) -> float:
        return other.x * self.x + other.y * self.y

    def cross(self, other: Vec2) -> float:
        return self.x * other.y - self.y * other.x

    def normal(self) -> Vec2:
        """The vector turned a quarter turn counter-clockwise."""
        return Vec2(-self.y, self.x)

    def normalize(self) -> Vec2:
        magnitude = self.magnitude()
        if magnitude == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vec2(self.x / magnitude, self.y / magnitude)

    def invert(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)


@dataclass(frozen=True)
class RGBAColor:
    """An 8-bit-per-channel colour."""

    r: int
    g: int
    b: int
    a: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0..255: {channel!r}")


@dataclass(frozen=True)
class TransformState:
    """A plain copy of a transform's position, scale and rotation (degrees)."""

    position: Vec2 = Vec2()
    scale: Vec2 = Vec2()
    rotation: float = 0.0


@dataclass(frozen=True)
class Projection:
    """The interval a shape covers when projected onto an axis."""

    min: float
    max: float

    def overlap(self, other: Projection) -> float | None:
        """Return ``other.max - self.min`` if the intervals meet, else None."""
        if self.min <= other.max and self.max >= other.min:
            return other.max - self.min
        return None

    def contains(self, other: Projection) -> bool:
        return self.min <= other.min and self.max >= other.max


@dataclass
class Mesh:
    """A convex polygon given by its vertices, with a centre of mass."""

    vertices: list[Vec2] = field(default_factory=list)
    center_of_mass: Vec2 = Vec2()

    def copy(self) -> Mesh:
        return Mesh(list(self.vertices), self.center_of_mass)

    def translate(self, offset: Vec2) -> None:
        """Move every vertex and the centre of mass by ``offset``."""
        offset = Vec2.of(offset)
        self.vertices = [vertex + offset for vertex in self.vertices]
        self.center_of_mass = self.center_of_mass + offset

    def project(self, axis: Vec2) -> Projection:
        """Project the mesh on ``axis``; the axis should be normalized."""
        if not self.vertices:
            raise ValueError("cannot project an empty mesh")
        values = [axis.dot(vertex) for vertex in self.vertices]
        return Projection(min(values), max(values))

    def axes(self) -> list[Vec2]:
        """Unit normals of every edge, in vertex order."""
        following = self.vertices[1:] + self.vertices[:1]
        return [
            Vec2(-(a.y - b.y), a.x - b.x).normalize()
            for a, b in zip(self.vertices, following)
        ]