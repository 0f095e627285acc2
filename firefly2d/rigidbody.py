"""Rigid bodies: a convex mesh attached to a game object."""

from __future__ import annotations

import dataclasses
import math
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any

from firefly2d.geometry import Mesh, Vec2
from firefly2d.variables import BoolVar, DoubleVar, UIntVar, Vector2Var

__all__ = ["BoundingBoxType", "BoundingBox", "Constraint", "Collision", "Rigidbody"]

_ALL_GROUPS = 0xFFFFFFFF


class BoundingBoxType(Enum):
    SPHERE = "sphere"
    CONVEX = "convex"


@dataclass
class BoundingBox:
    kind: BoundingBoxType
    radius: float = 0.0


class Constraint(IntFlag):
    """Motions a body is not allowed to make."""

    NONE = 0
    X = 1
    Y = 2
    ROT = 4


@dataclass(frozen=True)
class Collision:
    """What a game object is told about a contact with another body."""

    collider: Rigidbody
    contact: Vec2 = Vec2()
    normal: Vec2 = Vec2()
    impulse: float = 0.0


@dataclass
class _ResultCollision:
    collider: Rigidbody
    contact_point: Vec2
    collision_normal: Vec2
    collision_velocity: Vec2
    post_collision_position: Vec2
    impulse: float
    frame_collision: bool
    first_collision: bool


def _mesh_area(vertices: list[Vec2]) -> float:
    following = vertices[1:] + vertices[:1]
    return sum(0.5 * abs(a.x * b.y - b.x * a.y) for a, b in zip(vertices, following))


def _mesh_radius(vertices: list[Vec2]) -> float:
    return max((v.magnitude() for v in vertices), default=0.0)


class Rigidbody:
    """A body driven by the physics engine, owned by ``parent``.

    ``parent`` must have a ``transform``; it may have a ``group`` bit mask and
    the callbacks ``on_collision_enter``, ``on_collision_stay``,
    ``on_collision_exit``, ``on_trigger_enter``, ``on_trigger_stay`` and
    ``on_trigger_exit``, each taking a :class:`Collision`. If ``engine`` is
    given, the body registers itself with it.
    """

    def __init__(self, parent: Any, vertices: Iterable[Any], engine: Any = None) -> None:
        mesh = [Vec2.of(v) for v in vertices]
        if not mesh:
            raise ValueError("a rigidbody needs at least one vertex")

        self.parent = parent
        self.mass = DoubleVar(1.0)
        self.static_friction = DoubleVar(0.5)
        self.dynamic_friction = DoubleVar(0.3)
        self.elasticity = DoubleVar(1.0)
        self.velocity = Vector2Var(Vec2())
        self.angular_velocity = DoubleVar(0.0)
        self.constraints = UIntVar(Constraint.NONE)
        self.use_gravity = BoolVar(True)
        self.is_trigger = BoolVar(False)
        self.detect_collisions = BoolVar(True)
        self.group_mask = UIntVar(_ALL_GROUPS)

        self._mesh = mesh
        self._world_mesh = list(mesh)
        transform = parent.transform
        self._center_of_mass = transform.position.get()
        self._mesh_scale = transform.scale.get()
        self._mesh_rot = transform.rotation.get()

        self._area = _mesh_area(mesh)
        if self._area == 0:
            raise ValueError("a rigidbody mesh must enclose some area")
        self._density = self.mass.get() / self._area
        self._bounding_box: BoundingBox | None = None
        self._static = False
        self._transform_changed = True
        self._frame_force = Vec2()
        self._moment_of_inertia = 0.0
        self._mesh_updated = False
        self._prev_collisions: list[_ResultCollision] = []

        self._mesh_lock = threading.Lock()
        self._collision_lock = threading.Lock()
        self._moi_lock = threading.Lock()

        self.engine = engine
        if engine is not None:
            engine.register(self)

    @property
    def center_of_mass(self) -> Vec2:
        return self._center_of_mass

    @property
    def force(self) -> Vec2:
        """The force gathered for the current frame."""
        return self._frame_force

    @property
    def is_static(self) -> bool:
        return self._static

    @property
    def area(self) -> float:
        return self._area

    def set_bounding_box(self, kind: BoundingBoxType) -> None:
        self._bounding_box = BoundingBox(kind, _mesh_radius(self._mesh))

    def get_bounding_box(self) -> BoundingBox | None:
        """A copy of the bounding box, or None if none was set."""
        if self._bounding_box is None:
            return None
        return dataclasses.replace(self._bounding_box)

    def get_mesh(self) -> Mesh:
        """The mesh in world coordinates for the current frame."""
        with self._mesh_lock:
            if not self._mesh_updated:
                self._world_mesh = [v + self._center_of_mass for v in self._mesh]
                self._mesh_updated = True
            return Mesh(list(self._world_mesh), self._center_of_mass)

    def moment_of_inertia(self) -> float:
        with self._moi_lock:
            self._density = self.mass.get() / self._area
            following = self._mesh[1:] + self._mesh[:1]
            total = 0.0
            for v0, v1 in zip(self._mesh, following):
                a = abs(v0.x * v1.y - v1.x * v0.y)
                t1 = v0.y * v0.y + v0.y * v1.y + v1.y * v1.y
                t2 = v0.x * v0.x + v0.x * v1.x + v1.x * v1.x
                total += a * (t1 + t2)
            self._moment_of_inertia = total * self._density / 12.0
            return self._moment_of_inertia

    def relative_point(self, point: Vec2 | Iterable[float]) -> Vec2:
        return Vec2.of(point) - self._center_of_mass

    def is_colliding(self, body: Rigidbody) -> bool:
        return any(record.collider is body for record in self._prev_collisions)

    def set_static(self, is_static: bool) -> None:
        self._static = bool(is_static)
        if self.engine is not None:
            self.engine.update_static(self)

    def is_movable(self) -> bool:
        locked = int(self.constraints) & (Constraint.X | Constraint.Y)
        return not self._static and not locked and self.mass.get() != math.inf

    def update_transform(self) -> None:
        """Follow the parent's transform, reshaping the mesh if needed."""
        transform = self.parent.transform
        scale = transform.scale.get()
        rotation = transform.rotation.get()
        self._center_of_mass = transform.position.get()

        scale_changed = scale != self._mesh_scale
        rot_changed = rotation != self._mesh_rot
        self._transform_changed = scale_changed or rot_changed
        if not self._transform_changed:
            return

        rot = math.radians(rotation - self._mesh_rot)
        cos_r, sin_r = math.cos(rot), math.sin(rot)
        old_scale = self._mesh_scale
        reshaped = []
        for vertex in self._mesh:
            x = vertex.x / old_scale.x * scale.x
            y = vertex.y / old_scale.y * scale.y
            reshaped.append(Vec2(x * cos_r - y * sin_r, x * sin_r + y * cos_r))
        self._mesh = reshaped

        if scale_changed and self._bounding_box is not None:
            self._bounding_box.radius = _mesh_radius(self._mesh)

        self._mesh_scale = scale
        self._mesh_rot = rotation
        self._density = self.mass.get() / self._area

    def start_collision_frame(self, gravity: Vec2 | Iterable[float]) -> None:
        gravity = Vec2.of(gravity)
        mass = self.mass.get()
        if self.use_gravity and mass != math.inf:
            self._frame_force = self._frame_force + gravity * mass
        with self._collision_lock:
            for record in self._prev_collisions:
                record.first_collision = False
                record.frame_collision = False
        self._mesh_updated = False

    def end_collision_frame(self) -> None:
        """Clear the frame force and tell the parent about contacts."""
        self._frame_force = Vec2()
        prefix = "on_trigger" if self.is_trigger else "on_collision"
        events: list[tuple[str, Collision]] = []
        with self._collision_lock:
            kept = []
            for record in self._prev_collisions:
                if not record.frame_collision:
                    events.append((f"{prefix}_exit", Collision(record.collider)))
                    continue
                kept.append(record)
                stage = "enter" if record.first_collision else "stay"
                events.append(
                    (
                        f"{prefix}_{stage}",
                        Collision(
                            record.collider,
                            record.contact_point,
                            record.collision_normal,
                            record.impulse,
                        ),
                    )
                )
            self._prev_collisions = kept

        mask = int(self.group_mask)
        for callback_name, collision in events:
            group = int(getattr(collision.collider.parent, "group", _ALL_GROUPS))
            if mask & group:
                handler = getattr(self.parent, callback_name, None)
                if callable(handler):
                    handler(collision)

    def update_physics(self, time_elapsed: float, sleep_velocity: float) -> None:
        """Integrate forces and move the parent by one step."""
        mass = self.mass.get()
        self.velocity += self._frame_force * (time_elapsed / mass)

        constraints = int(self.constraints)
        if constraints & Constraint.ROT:
            self.angular_velocity.set(0.0)
        if constraints & Constraint.X:
            self.velocity.set(Vec2(0.0, self.velocity.y))
        if constraints & Constraint.Y:
            self.velocity.set(Vec2(self.velocity.x, 0.0))

        transform = self.parent.transform
        transform.position += self.velocity.get() * time_elapsed
        transform.rotation += self.angular_velocity.get() * time_elapsed

    def resolve_collisions(self) -> None:
        """Apply the impulse and position correction of each recorded contact."""
        for record in list(self._prev_collisions):
            normal = record.collision_normal
            impulse = record.impulse
            mass = self.mass.get()
            self.velocity.set(self.velocity.get() - normal * (impulse / mass))
            self.parent.transform.position += record.post_collision_position
            r = self.relative_point(record.contact_point)
            spin = r.cross(normal * impulse) / self.moment_of_inertia()
            self.angular_velocity -= math.degrees(spin)

    def resolve_drag(self) -> None:
        """Apply friction from every recorded contact."""
        for record in list(self._prev_collisions):
            other = record.collider
            rv = other.velocity.get() - self.velocity.get()
            normal = record.collision_normal
            t = rv.dot(normal)
            if t != 0:
                tangent = rv - normal * t
            else:
                t = self._frame_force.dot(normal)
                if t == 0:
                    continue
                tangent = self._frame_force - normal * t
            if tangent.magnitude() == 0:
                continue
            tangent = tangent.normalize()

            mass = self.mass.get()
            jt = -rv.dot(tangent) / (1 / mass + 1 / other.mass.get())
            mu = math.sqrt(
                self.static_friction.get() ** 2 + other.static_friction.get() ** 2
            )
            if abs(jt) < abs(record.impulse * mu):
                friction_impulse = tangent * jt
            else:
                friction_impulse = tangent * (-record.impulse * mu)

            self.velocity += friction_impulse * (1 / mass)

            along = self.velocity.get().dot(tangent)
            if abs(along) < 0.05 and self._frame_force.dot(tangent) < 0.05:
                self.velocity -= tangent * along

    def apply_forces(self, time_elapsed: float) -> None:
        self.velocity += self._frame_force * (time_elapsed / self.mass.get())

    def set_collision(
        self,
        body: Rigidbody,
        contact_point: Vec2 | Iterable[float],
        normal: Vec2 | Iterable[float],
        velocity: Vec2 | Iterable[float],
        impulse: float,
        updated_position: Vec2 | Iterable[float],
    ) -> None:
        """Record a contact with ``body`` found during this frame."""
        contact_point = Vec2.of(contact_point)
        normal = Vec2.of(normal)
        velocity = Vec2.of(velocity)
        updated_position = Vec2.of(updated_position)
        with self._collision_lock:
            for record in self._prev_collisions:
                if record.collider is body:
                    record.frame_collision = True
                    record.first_collision = False
                    record.contact_point = contact_point
                    record.collision_normal = normal
                    record.collision_velocity = velocity
                    record.post_collision_position = updated_position
                    record.impulse = impulse
                    return
            self._prev_collisions.append(
                _ResultCollision(
                    body, contact_point, normal, velocity, updated_position,
                    impulse, True, True,
                )
            )

    def detach(self) -> None:
        """Remove the body from its engine."""
        if self.engine is not None:
            self.engine.remove(self)
            self.engine = None