from abc import ABC, abstractmethod
from bisect import bisect_right
from enum import Enum
from typing import Callable, Sequence, TYPE_CHECKING

from .errors import DegenerateCurve
from .math import Point, lerp
from .registries import register_evaluator
from .sampling import EMPTY_SAMPLE, SampledCurve

if TYPE_CHECKING:
    from .curve import Curve


class BoundaryCondition(Enum):
    CLAMPED = "clamped"     # open curve, touches the first and last control points
    PERIODIC = "periodic"   # closed loop
    FLOATING = "floating"   # uniform unclamped knots


class CurveEvaluator(ABC):
    """
    GUI-agnostic strategy mapping a control polygon to curve geometry.
    Evaluators are stateless; everything they need is read from the curve.
    """
    kind: str = ""

    @abstractmethod
    def min_points(self, curve: "Curve") -> int:
        """Fewest control points for which the curve is defined."""

    @abstractmethod
    def domain(self, curve: "Curve") -> tuple[float, float]:
        """Inclusive parameter range of a non-degenerate curve."""

    @abstractmethod
    def curve_function(self, curve: "Curve") -> Callable[[float], Point]:
        """
        Return t -> point for a non-degenerate curve. Anything derived from
        the whole polygon (knots, wrapped points) is computed once here.
        """

    @abstractmethod
    def max_degree(self, curve: "Curve") -> int:
        """Highest degree the current polygon supports."""

    def is_degenerate(self, curve: "Curve") -> bool:
        return len(curve.points) < self.min_points(curve)

    def point_at(self, curve: "Curve", t: float) -> Point:
        if self.is_degenerate(curve):
            raise DegenerateCurve(
                f"{self.kind} curve needs {self.min_points(curve)} points, has {len(curve.points)}"
            )
        t0, t1 = self.domain(curve)
        t = min(max(t, t0), t1)
        return self.curve_function(curve)(t)

    def sample(self, curve: "Curve", n_samples: int) -> SampledCurve:
        """
        Evaluate the curve at n_samples uniformly spaced parameters covering
        its whole domain, endpoints included. Degenerate curves give an
        empty sample.
        """
        if n_samples < 1 or self.is_degenerate(curve):
            return EMPTY_SAMPLE
        t0, t1 = self.domain(curve)
        if n_samples == 1:
            params = (t0,)
        else:
            step = (t1 - t0) / (n_samples - 1)
            params = tuple(t0 + i * step for i in range(n_samples - 1)) + (t1,)
        f = self.curve_function(curve)
        return SampledCurve(points=tuple(f(t) for t in params), params=params)

    def break_points(self, curve: "Curve") -> list[Point]:
        if self.is_degenerate(curve):
            return []
        f = self.curve_function(curve)
        return [f(t) for t in self.break_params(curve)]

    def break_params(self, curve: "Curve") -> list[float]:
        t0, t1 = self.domain(curve)
        return [t0, t1]


def de_casteljau(points: Sequence[Point], t: float) -> Point:
    tmp = list(points)
    for r in range(1, len(tmp)):
        for i in range(len(tmp) - r):
            tmp[i] = lerp(tmp[i], tmp[i + 1], t)
    return tmp[0]


@register_evaluator("bezier")
class BezierEvaluator(CurveEvaluator):
    """Single Bezier curve of degree len(points) - 1 over t in [0, 1]."""

    def min_points(self, curve: "Curve") -> int:
        return 2

    def domain(self, curve: "Curve") -> tuple[float, float]:
        return 0.0, 1.0

    def max_degree(self, curve: "Curve") -> int:
        return max(1, len(curve.points) - 1)

    def curve_function(self, curve: "Curve") -> Callable[[float], Point]:
        pts = curve.points
        return lambda t: de_casteljau(pts, t)


# ---- knot vectors ------------------------------------------------------------
def clamped_knots(num_points: int, degree: int) -> list[float]:
    """degree+1 repeated knots at each end, unit spacing in between."""
    inner = num_points - degree
    return [0.0] * degree + [float(i) for i in range(inner + 1)] + [float(inner)] * degree


def floating_knots(num_points: int, degree: int) -> list[float]:
    return [float(i) for i in range(num_points + degree + 1)]


def de_boor(knots: Sequence[float], ctrl: Sequence[Point], degree: int, t: float) -> Point:
    """
    Evaluate the B-spline (knots, ctrl, degree) at t with de Boor's algorithm.
    t must lie inside [knots[degree], knots[len(ctrl)]].
    """
    n = len(ctrl)
    # span k with knots[k] <= t < knots[k+1]; the right end uses the last span
    k = bisect_right(knots, t) - 1
    k = min(max(k, degree), n - 1)
    d = [ctrl[j + k - degree] for j in range(degree + 1)]
    for r in range(1, degree + 1):
        for j in range(degree, r - 1, -1):
            left = knots[j + k - degree]
            denom = knots[j + 1 + k - r] - left
            alpha = 0.0 if denom == 0.0 else (t - left) / denom
            d[j] = lerp(d[j - 1], d[j], alpha)
    return d[degree]


@register_evaluator("bspline")
class BSplineEvaluator(CurveEvaluator):
    """
    Uniform B-spline of the curve's degree:
      - clamped: passes through the first and last control points,
      - floating: plain uniform knots, the ends float inside the polygon,
      - periodic: the first `degree` points are wrapped so the curve closes.
    An explicit knot vector on the curve is used while its length still
    matches the polygon (never for periodic curves).
    """

    def min_points(self, curve: "Curve") -> int:
        return curve.degree + 1

    def max_degree(self, curve: "Curve") -> int:
        return max(1, len(curve.points) - 1)

    def control_points(self, curve: "Curve") -> list[Point]:
        pts = list(curve.points)
        if curve.boundary is BoundaryCondition.PERIODIC:
            pts += pts[:curve.degree]
        return pts

    def knot_vector(self, curve: "Curve") -> list[float]:
        p = curve.degree
        n = len(self.control_points(curve))
        if (curve.knots is not None
                and curve.boundary is not BoundaryCondition.PERIODIC
                and len(curve.knots) == n + p + 1):
            return sorted(curve.knots)
        if curve.boundary is BoundaryCondition.CLAMPED:
            return clamped_knots(n, p)
        return floating_knots(n, p)

    def domain(self, curve: "Curve") -> tuple[float, float]:
        knots = self.knot_vector(curve)
        p = curve.degree
        return knots[p], knots[-p - 1]

    def curve_function(self, curve: "Curve") -> Callable[[float], Point]:
        ctrl = self.control_points(curve)
        knots = self.knot_vector(curve)
        p = curve.degree
        return lambda t: de_boor(knots, ctrl, p, t)

    def break_params(self, curve: "Curve") -> list[float]:
        t0, t1 = self.domain(curve)
        out: list[float] = []
        for x in self.knot_vector(curve):
            if t0 <= x <= t1 and (not out or x != out[-1]):
                out.append(x)
        return out
