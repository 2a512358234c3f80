"""
Curve files, dispatched on the file extension:
  - .dat: Bezier curves, one per point set
  - .crv: a single point set, loaded as the polyline through the points
  - .json: any curve kind, see curvedit.formats.json_format
"""

import logging
from pathlib import Path
from typing import Sequence

from curvedit.core import BoundaryCondition, Curve, MalformedFile

from . import json_format, legacy

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".dat", ".crv", ".json")


def load_curves(path: Path | str) -> list[Curve]:
    path = Path(path)
    ext = path.suffix.lower()
    if ext == ".dat":
        curves = [Curve(kind="bezier", points=pts) for pts in legacy.read_point_sets(path)]
    elif ext == ".crv":
        point_sets = legacy.read_point_sets(path)
        if len(point_sets) > 1:
            logger.warning("%s holds %d point sets, merging them into one", path, len(point_sets))
        points = [p for pts in point_sets for p in pts]
        curves = [Curve(kind="bspline", boundary=BoundaryCondition.CLAMPED, points=points, degree=1)]
    elif ext == ".json":
        curves = json_format.read_curves(path)
    else:
        raise MalformedFile(path, f"unrecognized file type '{ext}'")
    logger.info("Loaded %d curve(s) from %s", len(curves), path)
    return curves


def save_curves(path: Path | str, curves: Sequence[Curve]) -> None:
    path = Path(path)
    ext = path.suffix.lower()
    if ext == ".dat":
        for c in curves:
            if c.kind != "bezier":
                logger.warning("Saving %s curve to %s keeps only its control points", c.kind, path)
        legacy.write_point_sets(path, [c.points for c in curves])
    elif ext == ".crv":
        if len(curves) != 1:
            raise ValueError(f".crv files hold exactly one point set, got {len(curves)} curves")
        legacy.write_point_sets(path, [curves[0].points])
    elif ext == ".json":
        json_format.write_curves(path, curves)
    else:
        raise ValueError(f"Unsupported file type '{ext}', expected one of {', '.join(SUPPORTED_EXTENSIONS)}")
    logger.info("Saved %d curve(s) to %s", len(curves), path)


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "load_curves",
    "save_curves",
]
