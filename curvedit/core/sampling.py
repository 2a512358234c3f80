from dataclasses import dataclass
from typing import Iterator

from .math import Point, dist2


@dataclass(frozen=True)
class SampledCurve:
    """
    Fixed-resolution polyline approximation of a curve.
      - points: curve points in increasing parameter order
      - params: the parameter value each point was evaluated at
    """
    points: tuple[Point, ...] = ()
    params: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return not self.points


EMPTY_SAMPLE = SampledCurve()


def project_to_curve(point: Point, sampled: SampledCurve) -> tuple[int, float] | None:
    """
    Nearest sample to point as (sample_index, distance). Linear scan,
    lowest index on ties, None for an empty sample.
    """
    if sampled.is_empty:
        return None
    best_i = 0
    best_d2 = dist2(point, sampled.points[0])
    for i in range(1, len(sampled.points)):
        d2 = dist2(point, sampled.points[i])
        if d2 < best_d2:
            best_i = i
            best_d2 = d2
    return best_i, best_d2 ** 0.5
