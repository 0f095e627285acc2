"""Light sources and instances that share an original light's settings."""

from __future__ import annotations

import dataclasses
import math
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from firefly2d.geometry import Vec2
from firefly2d.transform import Transform

__all__ = [
    "LIGHT_CUTOFF",
    "parabola_coefficients",
    "LightType",
    "LightData",
    "LightObject",
    "LightInstance",
]

LIGHT_CUTOFF = 0.05
"""Intensity at which a point light's radius ends."""

Baker = Callable[["LightData"], None]


def parabola_coefficients(
    x1: float, y1: float, x2: float, y2: float, x3: float, y3: float
) -> tuple[float, float, float]:
    """Coefficients ``(a, b, c)`` of ``a*x**2 + b*x + c`` through three points."""
    denominator = (x1 - x2) * (x1 - x3) * (x2 - x3)
    if denominator == 0:
        raise ValueError("the three points need distinct x coordinates")
    a = (x3 * (y2 - y1) + x2 * (y1 - y3) + x1 * (y3 - y2)) / denominator
    b = (x3 * x3 * (y1 - y2) + x2 * x2 * (y3 - y1) + x1 * x1 * (y2 - y3)) / denominator
    c = (
        x2 * x3 * (x2 - x3) * y1 + x3 * x1 * (x3 - x1) * y2 + x1 * x2 * (x1 - x2) * y3
    ) / denominator
    return a, b, c


class LightType(Enum):
    POINT_LIGHT = "point"
    GLOBAL_LIGHT = "global"


@dataclass(frozen=True)
class LightData:
    """Everything the renderer needs to draw one light."""

    position: Vec2
    rotation: float
    power: float
    light_angle: float
    light_radius: float
    kind: LightType
    texture_name: int
    color_rebake: bool
    color: Any
    parab_a: float = 0.0
    parab_b: float = 0.0
    parab_c: float = 0.0


class LightObject:
    """An original light source.

    ``baker`` is called with the light's data whenever its shape changes, so
    a renderer can bake its texture again.
    """

    def __init__(
        self,
        name: int,
        position: Vec2 | Iterable[float],
        rotation: float,
        power: float,
        light_angle: float,
        color: Any,
        kind: LightType,
        baker: Baker | None = None,
        texture_name: int | None = None,
    ) -> None:
        self.name = name
        self.transform = Transform(Vec2.of(position), Vec2(1.0, 1.0), float(rotation))
        self.visible = True
        self.kind = LightType(kind)
        self._power = float(power)
        self._angle = float(light_angle)
        self._color = color
        self._color_rebake = False
        self._radius = 0.0
        self._parabola = (0.0, 0.0, 0.0)
        self._baker = baker
        self.texture_name = random.getrandbits(64) if texture_name is None else texture_name
        self._instances: list[LightInstance] = []
        self._calculate_light()

    @property
    def power(self) -> float:
        return self._power

    @property
    def light_angle(self) -> float:
        return self._angle

    @property
    def color(self) -> Any:
        return self._color

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def color_rebake(self) -> bool:
        """True if the light's colour changed and its texture needs recolouring."""
        return self._color_rebake

    @property
    def instances(self) -> tuple[LightInstance, ...]:
        return tuple(self._instances)

    def light_data(self) -> LightData:
        a, b, c = self._parabola
        return LightData(
            position=self.transform.position.get(),
            rotation=self.transform.rotation.get(),
            power=self._power,
            light_angle=self._angle,
            light_radius=self._radius,
            kind=self.kind,
            texture_name=self.texture_name,
            color_rebake=self._color_rebake,
            color=self._color,
            parab_a=a,
            parab_b=b,
            parab_c=c,
        )

    def set_power(self, power: float) -> None:
        self._power = float(power)
        self._calculate_light()

    def set_angle(self, angle: float) -> None:
        self._angle = float(angle)
        self._calculate_light()

    def set_color(self, color: Any) -> None:
        self._color = color
        self._color_rebake = True

    def reset_changed(self) -> None:
        self._color_rebake = False

    def add_instance(self, instance: LightInstance) -> None:
        if instance not in self._instances:
            self._instances.append(instance)

    def remove_instance(self, instance: LightInstance) -> None:
        """Forget ``instance``; an unknown instance is ignored."""
        for index, known in enumerate(self._instances):
            if known is instance:
                del self._instances[index]
                return

    def destroy(self) -> None:
        """Cut every instance loose from this light."""
        for instance in self._instances:
            instance._drop_original()
        self._instances.clear()

    def _calculate_light(self) -> None:
        if self.kind is LightType.POINT_LIGHT:
            spread = LIGHT_CUTOFF * (1.0 + 2.0 * math.radians(self._angle))
            radius = math.sqrt(self._power / spread)
            self._radius = radius
            self._parabola = parabola_coefficients(
                0.0, self._power, radius, 0.0, 2 * radius, self._power
            )
        if self._baker is not None:
            self._baker(self.light_data())


class LightInstance:
    """A light drawn like ``original`` but at its own position and rotation."""

    def __init__(
        self,
        name: int,
        position: Vec2 | Iterable[float],
        rotation: float,
        original: LightObject | None,
    ) -> None:
        self.name = name
        self.transform = Transform(Vec2.of(position), Vec2(1.0, 1.0), float(rotation))
        self.visible = True
        self._original = original
        if original is not None:
            original.add_instance(self)

    @property
    def original(self) -> LightObject | None:
        return self._original

    def light_data(self) -> LightData | None:
        """The original's data placed at this instance, or None if detached."""
        if self._original is None:
            return None
        return dataclasses.replace(
            self._original.light_data(),
            position=self.transform.position.get(),
            rotation=self.transform.rotation.get(),
            color_rebake=False,
        )

    def detach(self) -> None:
        """Leave the original light."""
        if self._original is not None:
            self._original.remove_instance(self)
            self._original = None

    def _drop_original(self) -> None:
        self._original = None