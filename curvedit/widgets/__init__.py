from .camera import Camera2d
from .canvas import CanvasWidget

__all__ = [
    "Camera2d",
    "CanvasWidget",
]
