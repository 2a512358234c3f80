"""Interactive Bezier and B-spline curve editor."""

__version__ = "0.1.0"
