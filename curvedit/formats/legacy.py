"""
Reader and writer for the line-based point files (.dat and .crv).

    # comment
    <number of point sets>
    P, <n>          polynomial point set, or Q, <n> for rational (weights ignored)
    x, y[, w]
    ...
"""

import logging
import math
import re
from pathlib import Path
from typing import Iterable, Sequence

from curvedit.core import MalformedFile, Point

logger = logging.getLogger(__name__)

_HEADER = re.compile(r"^\s*(P|Q)\s*,\s*(\d+)\s*$")


def read_point_sets(path: Path | str) -> list[list[Point]]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedFile(path, f"cannot read file: {e}") from e
    return parse_point_sets(lines, path)


def parse_point_sets(lines: Iterable[str], path: Path | str = "<string>") -> list[list[Point]]:
    sets: list[list[Point]] = []
    expected: list[int] = []
    num_sets: int | None = None
    current: list[Point] | None = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        if num_sets is None:
            try:
                num_sets = int(line)
            except ValueError:
                raise MalformedFile(path, f"expected the number of point sets, got {line!r}", lineno) from None
            if num_sets < 0:
                raise MalformedFile(path, f"negative point set count {num_sets}", lineno)
            continue

        header = _HEADER.match(line)
        if header is not None:
            current = []
            sets.append(current)
            expected.append(int(header.group(2)))
            continue

        if current is None:
            raise MalformedFile(path, "coordinates before any 'P, n' or 'Q, n' header", lineno)
        coords = [c.strip() for c in line.split(",")]
        if len(coords) < 2:
            raise MalformedFile(path, f"expected 'x, y', got {line!r}", lineno)
        try:
            x, y = float(coords[0]), float(coords[1])
        except ValueError:
            raise MalformedFile(path, f"invalid coordinates {line!r}", lineno) from None
        if not (math.isfinite(x) and math.isfinite(y)):
            raise MalformedFile(path, f"non-finite coordinates {line!r}", lineno)
        current.append((x, y))

    if num_sets is None:
        raise MalformedFile(path, "empty file")
    if num_sets != len(sets):
        logger.warning("%s declares %d point set(s) but contains %d", path, num_sets, len(sets))
    for i, (pts, n) in enumerate(zip(sets, expected)):
        if len(pts) != n:
            logger.warning("%s: point set #%d declares %d point(s) but has %d", path, i, n, len(pts))
    return sets


def format_point_sets(point_sets: Sequence[Sequence[Point]]) -> str:
    out = [f"{len(point_sets)}"]
    for pts in point_sets:
        out.append(f"P,{len(pts)}")
        for x, y in pts:
            out.append(f"{x!r}, {y!r}")
    return "\n".join(out) + "\n"


def write_point_sets(path: Path | str, point_sets: Sequence[Sequence[Point]]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        f.write(format_point_sets(point_sets))
