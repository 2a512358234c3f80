import math
from typing import NamedTuple, Sequence

Point = tuple[float, float]


class SegmentHit(NamedTuple):
    """Closest segment of a control polygon to a query point."""
    index: int
    projected: Point
    t: float


def dist2(a: Point, b: Point) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy


def distance(a: Point, b: Point) -> float:
    return math.sqrt(dist2(a, b))


def lerp(a: Point, b: Point, t: float) -> Point:
    return a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t


def as_point(p) -> Point:
    return float(p[0]), float(p[1])


def project_point_to_segment(p: Point, a: Point, b: Point) -> tuple[Point, float, float]:
    """
    Project p onto the finite segment a-b.
    Returns (q, t, d2): the clamped projection, its parameter in [0, 1] and
    the squared distance from p to q. A zero-length segment projects onto a.
    """
    ax, ay = a; bx, by = b; px, py = p
    vx, vy = bx - ax, by - ay
    denom = vx * vx + vy * vy
    if denom == 0.0:
        return a, 0.0, dist2(p, a)
    t = ((px - ax) * vx + (py - ay) * vy) / denom
    if t < 0.0:
        t = 0.0
    elif t > 1.0:
        t = 1.0
    q = (ax + t * vx, ay + t * vy)
    return q, t, dist2(p, q)


def nearest_segment(point: Point, points: Sequence[Point]) -> SegmentHit | None:
    """
    Return the segment (i -> i+1) of the open polygon closest to point.
    Ties keep the lowest index. None when there are fewer than 2 points.
    """
    if len(points) < 2:
        return None

    best: SegmentHit | None = None
    best_d2 = float("inf")
    for i in range(len(points) - 1):
        q, t, d2 = project_point_to_segment(point, points[i], points[i + 1])
        if d2 < best_d2:
            best_d2 = d2
            best = SegmentHit(i, q, t)
    return best


def nearest_point_index(points: Sequence[Point], pos: Point, radius: float) -> int | None:
    """Index of the control point closest to pos within radius, else None."""
    r2 = radius * radius
    best_i = None
    best_d2 = float("inf")
    for i, p in enumerate(points):
        d2 = dist2(p, pos)
        if d2 <= r2 and d2 < best_d2:
            best_i = i
            best_d2 = d2
    return best_i
