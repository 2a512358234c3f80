from dataclasses import dataclass

from curvedit.core import Point


@dataclass
class Camera2d:
    """
    Pan/zoom view onto the world plane. World y points up, screen y down;
    the world point `center` sits in the middle of the widget.
    """
    center: Point = (0.0, 0.0)
    zoom: float = 1.0
    pixels_per_unit: float = 100.0
    min_zoom: float = 0.1

    @property
    def scale(self) -> float:
        return self.pixels_per_unit * self.zoom

    def to_screen(self, p: Point, width: float, height: float) -> Point:
        s = self.scale
        return (width * 0.5 + (p[0] - self.center[0]) * s,
                height * 0.5 - (p[1] - self.center[1]) * s)

    def to_world(self, p: Point, width: float, height: float) -> Point:
        s = self.scale
        return (self.center[0] + (p[0] - width * 0.5) / s,
                self.center[1] - (p[1] - height * 0.5) / s)

    def world_length(self, pixels: float) -> float:
        return pixels / self.scale

    def pan(self, dx_px: float, dy_px: float) -> None:
        """Move the view by a mouse drag of (dx_px, dy_px) screen pixels."""
        s = self.scale
        self.center = (self.center[0] - dx_px / s, self.center[1] + dy_px / s)

    def zoom_by(self, amount: float) -> None:
        self.zoom = max(self.min_zoom, self.zoom + amount)
