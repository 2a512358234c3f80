from typing import Iterable, Sequence

from .evaluators import BoundaryCondition, CurveEvaluator
from .math import Point, SegmentHit, as_point
from .polygon import ControlPolygon
from .registries import evaluator_registry, get_evaluator
from .sampling import SampledCurve, project_to_curve


class Curve:
    """
    One control polygon plus what is needed to turn it into a curve:
      - kind: evaluator registry key ("bezier", "bspline")
      - boundary: knot vector boundary condition (B-splines)
      - degree: B-spline degree; a Bezier curve's degree is len(points) - 1
      - knots: optional explicit knot vector, honoured while it fits the polygon
    Every mutation bumps `version`, which keys the sample memo.
    """

    def __init__(self,
                 kind: str = "bspline",
                 boundary: BoundaryCondition | str = BoundaryCondition.CLAMPED,
                 points: Iterable[Point] = (),
                 degree: int = 3,
                 knots: Sequence[float] | None = None):
        self._evaluator: CurveEvaluator = get_evaluator(kind)
        self._boundary = BoundaryCondition(boundary)
        self._polygon = ControlPolygon(points)
        self._degree = self._check_degree(degree)
        self._knots = self._check_knots(knots)
        self.version = 0
        self._sample_key: tuple[int, int] | None = None
        self._sample: SampledCurve | None = None

    @classmethod
    def build(cls, kind: str, boundary: BoundaryCondition | str, points: Iterable[Point], /, **kwargs) -> "Curve":
        return cls(kind=kind, boundary=boundary, points=points, **kwargs)

    def definition(self) -> tuple[str, BoundaryCondition, tuple[Point, ...]]:
        return self.kind, self.boundary, self.points

    # ---- read-only views ----------------------------------------------------
    @property
    def kind(self) -> str:
        return self._evaluator.kind

    @property
    def evaluator(self) -> CurveEvaluator:
        return self._evaluator

    @property
    def polygon(self) -> ControlPolygon:
        return self._polygon

    @property
    def points(self) -> tuple[Point, ...]:
        return self._polygon.points

    @property
    def degree(self) -> int:
        if self.kind == "bezier":
            return max(0, len(self._polygon) - 1)
        return self._degree

    @property
    def boundary(self) -> BoundaryCondition:
        return self._boundary

    @property
    def knots(self) -> tuple[float, ...] | None:
        return self._knots

    @property
    def closed(self) -> bool:
        return self.boundary is BoundaryCondition.PERIODIC

    def __len__(self) -> int:
        return len(self._polygon)

    def __repr__(self) -> str:
        return f"Curve(kind={self.kind!r}, boundary={self.boundary.value!r}, degree={self.degree}, points={list(self.points)!r})"

    # ---- settings -----------------------------------------------------------
    def set_kind(self, kind: str) -> "Curve":
        self._evaluator = get_evaluator(kind)
        self._touch()
        return self

    def set_boundary(self, boundary: BoundaryCondition | str) -> "Curve":
        self._boundary = BoundaryCondition(boundary)
        self._touch()
        return self

    def set_degree(self, degree: int) -> "Curve":
        self._degree = self._check_degree(degree)
        self._touch()
        return self

    def set_knots(self, knots: Sequence[float] | None) -> "Curve":
        self._knots = self._check_knots(knots)
        self._touch()
        return self

    def max_degree(self) -> int:
        return self._evaluator.max_degree(self)

    @staticmethod
    def _check_knots(knots: Sequence[float] | None) -> tuple[float, ...] | None:
        return tuple(float(k) for k in knots) if knots is not None else None

    @staticmethod
    def _check_degree(degree: int) -> int:
        degree = int(degree)
        if degree < 1:
            raise ValueError(f"Curve degree must be at least 1, got {degree}")
        return degree

    # ---- polygon edits ------------------------------------------------------
    def nearest_segment(self, point: Point) -> SegmentHit | None:
        return self._polygon.nearest_segment(point)

    def insert_point(self, point: Point) -> int:
        idx = self._polygon.insert_point(point)
        self._touch()
        return idx

    def remove_point(self, index: int) -> Point:
        removed = self._polygon.remove_point(index)
        self._touch()
        return removed

    def move_point(self, index: int, new_position: Point) -> None:
        self._polygon.move_point(index, new_position)
        self._touch()

    def clear(self) -> None:
        self._polygon.clear()
        self._touch()

    def _touch(self) -> None:
        self.version += 1

    # ---- geometry -----------------------------------------------------------
    def is_degenerate(self) -> bool:
        return self._evaluator.is_degenerate(self)

    def point_at(self, t: float) -> Point:
        return self._evaluator.point_at(self, t)

    def domain(self) -> tuple[float, float]:
        return self._evaluator.domain(self)

    def sample(self, n_samples: int) -> SampledCurve:
        key = (self.version, n_samples)
        if self._sample is None or self._sample_key != key:
            self._sample = self._evaluator.sample(self, n_samples)
            self._sample_key = key
        return self._sample

    def break_points(self) -> list[Point]:
        return self._evaluator.break_points(self)

    def closest_sample(self, point: Point, n_samples: int) -> tuple[int, float] | None:
        return project_to_curve(as_point(point), self.sample(n_samples))

    def copy(self) -> "Curve":
        return Curve(kind=self.kind, boundary=self.boundary, points=self.points,
                     degree=self._degree, knots=self.knots)

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        data = {
            "kind": self.kind,
            "boundary": self.boundary.value,
            "degree": self.degree,
            "points": [list(p) for p in self.points],
        }
        if self.knots is not None:
            data["knots"] = list(self.knots)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Curve":
        kind = data["kind"]
        if kind not in evaluator_registry:
            raise ValueError(f"Unknown curve kind '{kind}'")
        pts = [tuple(map(float, p)) for p in data.get("points", [])]
        return cls(
            kind=kind,
            boundary=data.get("boundary", BoundaryCondition.CLAMPED.value),
            points=pts,
            degree=data.get("degree", 3) if kind != "bezier" else 3,
            knots=data.get("knots"),
        )
