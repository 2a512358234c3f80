from typing import Iterable, Iterator

from .errors import OutOfRange
from .math import Point, SegmentHit, as_point, nearest_segment


class ControlPolygon:
    """
    Ordered control points of a single curve.

    The order is the curve topology: segment i joins points i and i+1 and the
    parametrization runs from the first point to the last one.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: list[Point] = [as_point(p) for p in points]

    # read-only views
    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, ControlPolygon):
            return NotImplemented
        return self._points == other._points

    def __repr__(self) -> str:
        return f"ControlPolygon({self._points!r})"

    def copy(self) -> "ControlPolygon":
        return ControlPolygon(self._points)

    def clear(self) -> None:
        self._points = []

    # ---- queries ------------------------------------------------------------
    def nearest_segment(self, point: Point) -> SegmentHit | None:
        return nearest_segment(as_point(point), self._points)

    def insertion_index(self, point: Point) -> int:
        """
        Where a new point at `point` goes:
          - empty or single point: append,
          - projected onto the start of the first segment: prepend,
          - projected onto the end of the last segment: append,
          - otherwise right after the start of the nearest segment.
        """
        n = len(self._points)
        hit = self.nearest_segment(point)
        if hit is None:
            return n
        if hit.index == 0 and hit.t == 0.0:
            return 0
        if hit.index == n - 2 and hit.t == 1.0:
            return n
        return hit.index + 1

    # ---- mutations ----------------------------------------------------------
    def insert_point(self, point: Point) -> int:
        """Insert the raw point where insertion_index puts it; return its index."""
        p = as_point(point)
        idx = self.insertion_index(p)
        self._points.insert(idx, p)
        return idx

    def remove_point(self, index: int) -> Point:
        self._check_index(index)
        return self._points.pop(index)

    def move_point(self, index: int, new_position: Point) -> None:
        self._check_index(index)
        self._points[index] = as_point(new_position)

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or not (0 <= index < len(self._points)):
            raise OutOfRange(f"no control point at index {index!r} (have {len(self._points)})")
