"""Exceptions raised by the curve geometry core and the file formats."""


class CurveError(Exception):
    """Base class for curvedit errors."""


class OutOfRange(CurveError, IndexError):
    """A control point index does not exist in the polygon."""


class DegenerateCurve(CurveError, ValueError):
    """The polygon has fewer points than the curve kind needs."""


class MalformedFile(CurveError, ValueError):
    """A curve file could not be parsed."""

    def __init__(self, path, message: str, line: int | None = None):
        self.path = str(path)
        self.line = line
        where = f"{self.path}:{line}" if line is not None else self.path
        super().__init__(f"{where}: {message}")
