"""
JSON curve files.

A file holds either one curve object or {"curves": [<curve>, ...]}:

    {
      "type": "bspline2d",          # or "bezier2d"
      "degree": 3,                  # required for B-splines
      "boundary": "clamped",        # "clamped" (default), "periodic" or "floating"
      "points": [{"x": 0.0, "y": 1.0}, ...],
      "knots": [0, 0, 0, 0, 1, 1, 1, 1]   # optional
    }
"""

import json
import math
from pathlib import Path
from typing import Any, Sequence

from curvedit.core import BoundaryCondition, Curve, MalformedFile

TYPE_TO_KIND = {
    "bezier2d": "bezier",
    "bspline2d": "bspline",
}
KIND_TO_TYPE = {v: k for k, v in TYPE_TO_KIND.items()}


def _number(value: Any, what: str, path) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedFile(path, f"invalid {what}: {value!r}")
    try:
        number = float(value)
    except OverflowError:
        raise MalformedFile(path, f"{what} out of range: {value!r}") from None
    if not math.isfinite(number):
        raise MalformedFile(path, f"non-finite {what}: {value!r}")
    return number


def curve_from_json(data: Any, path: Path | str = "<json>") -> Curve:
    if not isinstance(data, dict):
        raise MalformedFile(path, "a curve must be a JSON object")
    ty = data.get("type")
    if ty not in TYPE_TO_KIND:
        raise MalformedFile(path, f"unrecognized curve type {ty!r}")
    kind = TYPE_TO_KIND[ty]

    raw_points = data.get("points")
    if not isinstance(raw_points, list):
        raise MalformedFile(path, "a list of points must be specified")
    points = []
    for p in raw_points:
        if not isinstance(p, dict):
            raise MalformedFile(path, f"invalid point {p!r}")
        points.append((_number(p.get("x"), "x coord", path), _number(p.get("y"), "y coord", path)))

    degree = 3
    if kind == "bspline":
        raw_degree = data.get("degree")
        if isinstance(raw_degree, bool) or not isinstance(raw_degree, int) or raw_degree < 1:
            raise MalformedFile(path, f"a curve degree must be specified, got {raw_degree!r}")
        degree = raw_degree

    try:
        boundary = BoundaryCondition(data.get("boundary", BoundaryCondition.CLAMPED.value))
    except ValueError:
        raise MalformedFile(path, f"invalid boundary condition {data.get('boundary')!r}") from None

    knots = data.get("knots")
    if knots is not None:
        if not isinstance(knots, list):
            raise MalformedFile(path, "knots must be a list")
        knots = [_number(k, "knot value", path) for k in knots]

    return Curve(kind=kind, boundary=boundary, points=points, degree=degree, knots=knots)


def curve_to_json(curve: Curve) -> dict:
    data: dict[str, Any] = {"type": KIND_TO_TYPE[curve.kind]}
    if curve.kind == "bspline":
        data["degree"] = curve.degree
    data["boundary"] = curve.boundary.value
    data["points"] = [{"x": x, "y": y} for x, y in curve.points]
    if curve.knots is not None:
        data["knots"] = list(curve.knots)
    return data


def parse_curves(text: str, path: Path | str = "<json>") -> list[Curve]:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedFile(path, f"invalid JSON: {e.msg}", e.lineno) from e
    if isinstance(doc, dict) and "curves" in doc:
        if not isinstance(doc["curves"], list):
            raise MalformedFile(path, "'curves' must be a list")
        return [curve_from_json(c, path) for c in doc["curves"]]
    return [curve_from_json(doc, path)]


def dump_curves(curves: Sequence[Curve]) -> str:
    if len(curves) == 1:
        doc: Any = curve_to_json(curves[0])
    else:
        doc = {"curves": [curve_to_json(c) for c in curves]}
    return json.dumps(doc, indent=2)


def read_curves(path: Path | str) -> list[Curve]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedFile(path, f"cannot read file: {e}") from e
    return parse_curves(text, path)


def write_curves(path: Path | str, curves: Sequence[Curve]) -> None:
    Path(path).write_text(dump_curves(curves) + "\n", encoding="utf-8")
