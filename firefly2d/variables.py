"""Thread-safe value holders that can share one value between holders.

Binding a variable to another makes both read and write the same value,
so a copy kept elsewhere (a global variable, an animation target) stays
valid and in sync.
"""

from __future__ import annotations

import operator
import threading
from collections.abc import Callable, Iterable
from typing import Any

from firefly2d.geometry import Vec2

__all__ = ["Variable", "BoolVar", "IntVar", "UIntVar", "DoubleVar", "Vector2Var"]

_UINT_MASK = (1 << 64) - 1


class _Cell:
    __slots__ = ("value", "lock")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.lock = threading.Lock()


class Variable:
    """A holder for any value, shareable between several holders."""

    _default: Any = None

    def __init__(self, value: Any = None) -> None:
        self._cell = _Cell(self._coerce(self._default if value is None else value))

    @classmethod
    def _coerce(cls, value: Any) -> Any:
        return value

    def get(self) -> Any:
        return self._cell.value

    def set(self, value: Any) -> None:
        value = self._coerce(value)
        cell = self._cell
        with cell.lock:
            cell.value = value

    def bind(self, other: Variable) -> None:
        """Share ``other``'s value from now on."""
        if not isinstance(other, type(self)):
            raise TypeError(
                f"cannot bind {type(self).__name__} to {type(other).__name__}"
            )
        self._cell = other._cell

    def _update(self, change: Callable[[Any], Any]) -> Variable:
        cell = self._cell
        with cell.lock:
            cell.value = self._coerce(change(cell.value))
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"


class BoolVar(Variable):
    _default = False

    @classmethod
    def _coerce(cls, value: Any) -> bool:
        return bool(value)

    def __bool__(self) -> bool:
        return self.get()


def _to_int(value: Any) -> int:
    if isinstance(value, float):
        return int(value)
    return operator.index(value)


class _IntegerOps(Variable):
    _default = 0

    def __int__(self) -> int:
        return self.get()

    __index__ = __int__

    def __iadd__(self, value: int) -> _IntegerOps:
        value = _to_int(value)
        return self._update(lambda current: current + value)

    def __isub__(self, value: int) -> _IntegerOps:
        value = _to_int(value)
        return self._update(lambda current: current - value)

    def __iand__(self, value: int) -> _IntegerOps:
        value = _to_int(value)
        return self._update(lambda current: current & value)

    def __ior__(self, value: int) -> _IntegerOps:
        value = _to_int(value)
        return self._update(lambda current: current | value)

    def __ixor__(self, value: int) -> _IntegerOps:
        value = _to_int(value)
        return self._update(lambda current: current ^ value)


class IntVar(_IntegerOps):
    """A signed integer."""

    @classmethod
    def _coerce(cls, value: Any) -> int:
        return _to_int(value)


class UIntVar(_IntegerOps):
    """An unsigned 64-bit integer; results wrap around modulo 2**64."""

    @classmethod
    def _coerce(cls, value: Any) -> int:
        return _to_int(value) & _UINT_MASK


class DoubleVar(Variable):
    _default = 0.0

    @classmethod
    def _coerce(cls, value: Any) -> float:
        return float(value)

    def __float__(self) -> float:
        return self.get()

    def __iadd__(self, value: float) -> DoubleVar:
        return self._update(lambda current: current + value)

    def __isub__(self, value: float) -> DoubleVar:
        return self._update(lambda current: current - value)

    def __imul__(self, value: float) -> DoubleVar:
        return self._update(lambda current: current * value)

    def __itruediv__(self, value: float) -> DoubleVar:
        return self._update(lambda current: current / value)


class Vector2Var(Variable):
    """A 2D vector; in-place arithmetic works component by component."""

    _default = Vec2()

    @classmethod
    def _coerce(cls, value: Any) -> Vec2:
        vec = Vec2.of(value)
        return Vec2(float(vec.x), float(vec.y))

    def get(self) -> Vec2:
        return self._cell.value

    def set(self, value: Vec2 | Iterable[float]) -> None:
        super().set(value)

    def bind(self, other: Vector2Var) -> None:
        super().bind(other)

    @property
    def x(self) -> float:
        return self.get().x

    @property
    def y(self) -> float:
        return self.get().y

    def __iadd__(self, value: Vec2 | Iterable[float]) -> Vector2Var:
        v = Vec2.of(value)
        return self._update(lambda c: Vec2(c.x + v.x, c.y + v.y))

    def __isub__(self, value: Vec2 | Iterable[float]) -> Vector2Var:
        v = Vec2.of(value)
        return self._update(lambda c: Vec2(c.x - v.x, c.y - v.y))

    def __imul__(self, value: Vec2 | Iterable[float]) -> Vector2Var:
        v = Vec2.of(value)
        return self._update(lambda c: Vec2(c.x * v.x, c.y * v.y))

    def __itruediv__(self, value: Vec2 | Iterable[float]) -> Vector2Var:
        v = Vec2.of(value)
        return self._update(lambda c: Vec2(c.x / v.x, c.y / v.y))