from curvedit.menu.curve_item import CurveItem
from curvedit.menu.curve_panel import CurvePanel
from curvedit.menu.top_bar import Bar

__all__ = [
    "Bar",
    "CurveItem",
    "CurvePanel",
]
