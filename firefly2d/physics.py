"""Collision detection and response between convex rigid bodies."""

from __future__ import annotations

import math
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from firefly2d.geometry import Mesh, Vec2
from firefly2d.rigidbody import BoundingBox, BoundingBoxType, Rigidbody

__all__ = [
    "CollisionPoint",
    "CollisionRecord",
    "create_regular_polygon",
    "polygons_overlap",
    "minimum_translation",
    "virtual_collision_points",
    "filter_collision_points",
    "collision_response",
    "PhysicsEngine",
]

_MIN_CONTACT_SPEED = 0.05
_REST_SPEED = 0.05


@dataclass(frozen=True)
class CollisionPoint:
    """Where a vertex of one mesh would first meet an edge of the other."""

    vertex: Vec2
    edge_start: Vec2
    edge_end: Vec2
    distance: float
    collision_point: Vec2
    body: int


@dataclass(frozen=True)
class CollisionRecord:
    """A contact between two bodies found during a physics frame."""

    a: Rigidbody
    b: Rigidbody
    contact_point: Vec2
    normal: Vec2
    relative_velocity: Vec2
    post_position_a: Vec2
    post_position_b: Vec2
    impulse: float


def create_regular_polygon(sides: int, radius: float) -> list[Vec2]:
    """Vertices of a regular polygon centred on the origin, counter-clockwise."""
    return [
        Vec2(
            radius * math.cos(2 * math.pi * i / sides),
            radius * math.sin(2 * math.pi * i / sides),
        )
        for i in range(sides)
    ]


def _edges(vertices: Sequence[Vec2]) -> Iterable[tuple[Vec2, Vec2]]:
    return zip(vertices, list(vertices[1:]) + list(vertices[:1]))


def polygons_overlap(mesh1: Mesh, mesh2: Mesh) -> bool:
    """True unless one of ``mesh1``'s edge normals separates the two meshes."""
    for a, b in _edges(mesh1.vertices):
        axis = Vec2(-(a.y - b.y), a.x - b.x)
        q1 = [axis.dot(v) for v in mesh1.vertices]
        q2 = [axis.dot(v) for v in mesh2.vertices]
        if not (max(q2) >= min(q1) and max(q1) >= min(q2)):
            return False
    return True


def minimum_translation(mesh1: Mesh, mesh2: Mesh) -> Vec2 | None:
    """The vector that moves ``mesh1`` out of ``mesh2``, or None if apart."""
    overlap = math.inf
    smallest = Vec2()
    for axis in mesh1.axes() + mesh2.axes():
        p1 = mesh1.project(axis)
        p2 = mesh2.project(axis)
        amount = p1.overlap(p2)
        if amount is None:
            return None
        if p1.contains(p2) or p2.contains(p1):
            mins = abs(p1.min - p2.min)
            maxs = abs(p1.max - p2.max)
            amount += mins if mins < maxs else maxs
        if amount < overlap:
            overlap = amount
            smallest = axis
    return smallest * overlap


def virtual_collision_points(
    mesh1: Mesh, mesh2: Mesh, velocity_axis: Vec2, body_sign: int
) -> list[CollisionPoint]:
    """Where each vertex of ``mesh2``, moving along the axis, meets ``mesh1``'s edges."""
    velocity_axis = Vec2.of(velocity_axis)
    vax, vay = velocity_axis.x, velocity_axis.y
    axis = Vec2(-vay, vax)
    points: list[CollisionPoint] = []
    for vertex in mesh2.vertices:
        q_v = axis.dot(vertex)
        for v1, v2 in _edges(mesh1.vertices):
            q1 = axis.dot(v1)
            q2 = axis.dot(v2)
            if not ((q1 <= q_v <= q2) or (q2 <= q_v <= q1)):
                continue
            if q1 == q_v and q1 == q2:
                continue
            edge = v2 - v1
            d2 = edge / edge.magnitude()
            denominator = vay * d2.x - vax * d2.y
            if denominator == 0:
                continue
            h = (vax * v1.y + vay * vertex.x - vay * v1.x - vax * vertex.y) / denominator
            point = v1 + d2 * h
            if vax == 0:
                distance = abs(point.y - vertex.y)
            else:
                distance = abs((v1.x - vertex.x + d2.x * h) / vax)
            points.append(CollisionPoint(vertex, v1, v2, distance, point, body_sign))
    return points


def filter_collision_points(points: Iterable[CollisionPoint]) -> list[CollisionPoint]:
    """Keep the earliest contacts, all from the same body as the first one kept."""
    points = list(points)
    if not points:
        return []
    nearest = min(point.distance for point in points)
    earliest = [point for point in points if not point.distance > nearest]
    if not earliest:
        return []
    body = earliest[0].body
    return [point for point in earliest if point.body == body]


def collision_response(
    body1: Rigidbody,
    body2: Rigidbody,
    r1: Vec2,
    r2: Vec2,
    normal: Vec2,
    relative_velocity: Vec2,
) -> float:
    """The impulse that resolves a contact along ``normal``."""
    r1, r2 = Vec2.of(r1), Vec2.of(r2)
    normal, relative_velocity = Vec2.of(normal), Vec2.of(relative_velocity)
    e = body1.elasticity.get() * body2.elasticity.get()
    m1 = body1.mass.get()
    m2 = body2.mass.get()
    i1 = body1.moment_of_inertia()
    i2 = body2.moment_of_inertia()

    z = r1.cross(normal)
    a1 = Vec2(-z * r1.y / i1, z * r1.x / i1)
    z = r2.cross(normal)
    a2 = Vec2(-z * r2.y / i2, z * r2.x / i2)

    jr = -(1 + e) * relative_velocity.dot(normal)
    return jr / ((1 / m1) + (1 / m2) + normal.dot(a1 + a2))


class PhysicsEngine:
    """Keeps the rigid bodies, finds their contacts and resolves them.

    Movable bodies are kept before static ones, so only pairs with at least
    one movable body are tested.
    """

    def __init__(self, gravity: Vec2 | Iterable[float] = Vec2(), sleep_velocity: float = 0.0) -> None:
        self.gravity = Vec2.of(gravity)
        self.sleep_velocity = sleep_velocity
        self._bodies: list[Rigidbody] = []
        self._first_static = 0
        self._frame_collisions: list[CollisionRecord] = []
        self._update_lock = threading.Lock()
        self._collision_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._bodies)

    @property
    def bodies(self) -> tuple[Rigidbody, ...]:
        return tuple(self._bodies)

    @property
    def first_static(self) -> int:
        """Index of the first static body; the movable ones come before it."""
        return self._first_static

    @property
    def frame_collisions(self) -> tuple[CollisionRecord, ...]:
        return tuple(self._frame_collisions)

    def _index(self, body: Rigidbody) -> int | None:
        return next((i for i, b in enumerate(self._bodies) if b is body), None)

    def register(self, body: Rigidbody) -> None:
        with self._update_lock:
            if body.is_static:
                self._bodies.append(body)
            else:
                self._bodies.insert(0, body)
                self._first_static += 1

    def remove(self, body: Rigidbody) -> None:
        with self._update_lock:
            index = self._index(body)
            if index is None:
                return
            del self._bodies[index]
            if index < self._first_static:
                self._first_static -= 1

    def update_static(self, body: Rigidbody) -> None:
        """Move ``body`` to the section that matches its static flag."""
        with self._update_lock:
            index = self._index(body)
            if index is None:
                return
            if body.is_static:
                if index < self._first_static:
                    del self._bodies[index]
                    self._bodies.append(body)
                    self._first_static -= 1
            elif index >= self._first_static:
                del self._bodies[index]
                self._bodies.insert(0, body)
                self._first_static += 1

    def new_frame(self, time_elapsed: float) -> None:
        self._frame_collisions.clear()
        for body in list(self._bodies):
            body.start_collision_frame(self.gravity)

    def update(self, time_elapsed: float, thread: int, thread_count: int) -> None:
        """Detect contacts for this thread's share of the movable bodies."""
        bodies = list(self._bodies)
        local: list[CollisionRecord] = []
        for i in range(thread, self._first_static, thread_count):
            body1 = bodies[i]
            for body2 in bodies[i + 1:]:
                box1 = body1.get_bounding_box()
                box2 = body2.get_bounding_box()
                if box1 is None or box2 is None:
                    continue
                if not (body1.detect_collisions and body2.detect_collisions):
                    continue
                if box1.kind is BoundingBoxType.CONVEX and box2.kind is BoundingBoxType.CONVEX:
                    self._check_convex(body1, box1, body2, box2, local)
        with self._collision_lock:
            self._frame_collisions.extend(local)

    def resolve(self, time_elapsed: float) -> None:
        """Apply the frame's contacts and friction, then move the bodies."""
        for record in self._frame_collisions:
            self._resolve_collision(record)
        for record in self._frame_collisions:
            self._resolve_friction(record)
        for body in self._bodies[: self._first_static]:
            body.update_physics(time_elapsed, self.sleep_velocity)
        for body in list(self._bodies):
            body.end_collision_frame()

    def _check_convex(
        self,
        body1: Rigidbody,
        box1: BoundingBox,
        body2: Rigidbody,
        box2: BoundingBox,
        out: list[CollisionRecord],
    ) -> None:
        pos1 = body1.parent.transform.position.get()
        pos2 = body2.parent.transform.position.get()
        if (pos1 - pos2).magnitude() > box1.radius + box2.radius:
            return

        mesh1 = body1.get_mesh()
        mesh2 = body2.get_mesh()
        velocity1 = body1.velocity.get()
        velocity2 = body2.velocity.get()

        mtv = minimum_translation(mesh1, mesh2)
        if mtv is None:
            return

        if body1.is_trigger or body2.is_trigger:
            zero = Vec2()
            if body1.is_trigger:
                body1.set_collision(body2, zero, zero, zero, 0.0, zero)
            if body2.is_trigger:
                body2.set_collision(body1, zero, zero, zero, 0.0, zero)
            return

        relative = velocity1 - velocity2
        speed = relative.magnitude()
        if speed == 0:
            return
        velocity_axis = relative / speed

        delta1 = Vec2()
        delta2 = Vec2()
        if not body2.is_movable() or velocity1.magnitude() > velocity2.magnitude():
            mesh1.translate(mtv)
            delta1 = mtv
        else:
            mesh2.translate(-mtv)
            delta2 = -mtv

        points = virtual_collision_points(mesh1, mesh2, velocity_axis, 1)
        points += virtual_collision_points(mesh2, mesh1, -velocity_axis, -1)
        points = filter_collision_points(points)
        if not points:
            return

        vertex_sum = Vec2()
        edge_sum = Vec2()
        for point in points:
            vertex_sum = vertex_sum + point.vertex
            edge_sum = edge_sum + point.collision_point
        contact = (vertex_sum + edge_sum) / (2 * len(points))

        r1 = contact - mesh1.center_of_mass
        r2 = contact - mesh2.center_of_mass
        av1 = math.radians(body1.angular_velocity.get())
        av2 = math.radians(body2.angular_velocity.get())
        cp1 = Vec2(velocity1.x - av1 * r1.y, velocity1.y + av1 * r1.x)
        cp2 = Vec2(velocity2.x - av2 * r2.y, velocity2.y + av2 * r2.x)
        vr = cp1 - cp2
        if vr.magnitude() < _MIN_CONTACT_SPEED:
            return

        first = points[0]
        edge = first.edge_end - first.edge_start
        normal = edge.normal() * (first.body / edge.magnitude())

        impulse = collision_response(body1, body2, r1, r2, normal, vr)
        body1.set_collision(body2, contact, -normal, vr, impulse, delta1)
        body2.set_collision(body1, contact, normal, vr, impulse, delta2)
        out.append(CollisionRecord(body1, body2, contact, normal, vr, delta1, delta2, impulse))

    @staticmethod
    def _resolve_collision(record: CollisionRecord) -> None:
        a, b = record.a, record.b
        push = record.normal * record.impulse
        a.velocity += push * (1 / a.mass.get())
        b.velocity -= push * (1 / b.mass.get())
        a.parent.transform.position += record.post_position_a
        b.parent.transform.position += record.post_position_b

        ra = a.relative_point(record.contact_point)
        rb = b.relative_point(record.contact_point)
        a.angular_velocity += math.degrees(ra.cross(push) / a.moment_of_inertia())
        b.angular_velocity -= math.degrees(rb.cross(push) / b.moment_of_inertia())

    @staticmethod
    def _resolve_friction(record: CollisionRecord) -> None:
        a, b = record.a, record.b
        mass_a, mass_b = a.mass.get(), b.mass.get()
        rv = b.velocity.get() - a.velocity.get()
        normal = record.normal

        t = rv.dot(normal)
        if t == 0:
            return
        tangent = rv - normal * t
        if tangent.magnitude() == 0:
            return
        tangent = tangent.normalize()

        jt = -rv.dot(tangent) / (1 / mass_a + 1 / mass_b)
        mu = math.sqrt(a.static_friction.get() ** 2 + b.static_friction.get() ** 2)
        if abs(jt) < abs(record.impulse * mu):
            friction = tangent * jt
        else:
            dynamic = math.sqrt(a.dynamic_friction.get() ** 2 + b.dynamic_friction.get() ** 2)
            friction = tangent * (-record.impulse * dynamic)

        a.velocity += friction * (1 / mass_a)
        b.velocity -= friction * (1 / mass_b)

        for body in (a, b):
            along = body.velocity.get().dot(tangent)
            if abs(along) < _REST_SPEED and body.force.dot(tangent) < _REST_SPEED:
                body.velocity -= tangent * along