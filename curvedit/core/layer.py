from dataclasses import dataclass, field, asdict

from .curve import Curve

Color = tuple[float, float, float]


@dataclass
class DisplayAttributes:
    draw_curve: bool = True
    draw_control_polygon: bool = True
    draw_control_points: bool = True
    draw_break_points: bool = True
    curve_color: Color = (0.8, 0.8, 0.1)
    control_color: Color = (0.8, 0.8, 0.8)
    break_point_color: Color = (0.1, 0.8, 0.8)

    @classmethod
    def from_dict(cls, data: dict) -> "DisplayAttributes":
        out = cls()
        for key, value in data.items():
            if not hasattr(out, key):
                continue
            if key.endswith("_color"):
                value = tuple(float(c) for c in value)
            setattr(out, key, value)
        return out


@dataclass
class CurveLayer:
    """A curve as the editor shows it: geometry plus name and display attributes."""
    curve: Curve = field(default_factory=Curve)
    name: str = "Curve"
    display: DisplayAttributes = field(default_factory=DisplayAttributes)

    # Accessor
    @property
    def points(self):
        return self.curve.points

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "curve": self.curve.to_dict(),
            "display": asdict(self.display),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CurveLayer":
        return cls(
            curve=Curve.from_dict(data["curve"]),
            name=data.get("name", "Curve"),
            display=DisplayAttributes.from_dict(data.get("display", {})),
        )
