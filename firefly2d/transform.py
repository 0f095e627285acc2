"""Position, scale and rotation of a game object."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from firefly2d.geometry import TransformState, Vec2
from firefly2d.variables import DoubleVar, Vector2Var

__all__ = ["Transform"]


@dataclass(eq=False)
class Transform:
    """A transform whose parts are shareable variables; rotation is in degrees."""

    position: Vector2Var = field(default_factory=Vector2Var)
    scale: Vector2Var = field(default_factory=Vector2Var)
    rotation: DoubleVar = field(default_factory=DoubleVar)

    def __post_init__(self) -> None:
        if not isinstance(self.position, Vector2Var):
            self.position = Vector2Var(self.position)
        if not isinstance(self.scale, Vector2Var):
            self.scale = Vector2Var(self.scale)
        if not isinstance(self.rotation, DoubleVar):
            self.rotation = DoubleVar(self.rotation)

    def snapshot(self) -> TransformState:
        return TransformState(self.position.get(), self.scale.get(), self.rotation.get())

    def assign(self, state: TransformState) -> None:
        self.position.set(state.position)
        self.scale.set(state.scale)
        self.rotation.set(state.rotation)

    def apply_rotation(self, rot: float, pivot: Vec2 | Iterable[float]) -> None:
        """Turn the transform by ``rot`` degrees about ``pivot``."""
        pivot = Vec2.of(pivot)
        delta = self.position.get() - pivot
        angle = math.radians(math.degrees(math.atan2(delta.y, delta.x)) + rot)
        distance = math.sqrt(delta.x * delta.x + delta.y * delta.y)
        self.position.set(
            Vec2(pivot.x + distance * math.cos(angle), pivot.y + distance * math.sin(angle))
        )
        self.rotation += rot

    def apply_scale(
        self, scale_factor: Vec2 | Iterable[float], pivot: Vec2 | Iterable[float]
    ) -> None:
        """Scale the transform by ``scale_factor`` about ``pivot``."""
        factor = Vec2.of(scale_factor)
        pivot = Vec2.of(pivot)
        delta = self.position.get() - pivot
        new_position = Vec2(pivot.x + delta.x * factor.x, pivot.y + delta.y * factor.y)
        self.scale *= factor
        self.position.set(new_position)