"""Editor settings, read from a YAML file."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .evaluators import BoundaryCondition
from .layer import Color
from .registries import evaluator_registry

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    n_samples: int = 100
    hit_radius_px: float = 12.0
    default_kind: str = "bspline"
    default_degree: int = 3
    default_boundary: str = BoundaryCondition.CLAMPED.value
    fade_unselected: bool = True
    attenuation: float = 0.4
    pixels_per_unit: float = 100.0
    curve_color: Color = (0.8, 0.8, 0.1)
    control_color: Color = (0.8, 0.8, 0.8)
    break_point_color: Color = (0.1, 0.8, 0.8)

    def __post_init__(self):
        self.n_samples = int(self.n_samples)
        self.default_degree = int(self.default_degree)
        self.hit_radius_px = float(self.hit_radius_px)
        self.attenuation = float(self.attenuation)
        self.pixels_per_unit = float(self.pixels_per_unit)
        if self.n_samples < 2:
            raise ValueError(f"n_samples must be at least 2, got {self.n_samples}")
        if self.default_degree < 1:
            raise ValueError(f"default_degree must be at least 1, got {self.default_degree}")
        if self.hit_radius_px <= 0 or self.pixels_per_unit <= 0:
            raise ValueError("hit_radius_px and pixels_per_unit must be positive")
        if not 0.0 <= self.attenuation <= 1.0:
            raise ValueError(f"attenuation must be in [0, 1], got {self.attenuation}")
        if self.default_kind not in evaluator_registry:
            raise ValueError(f"Unknown curve kind '{self.default_kind}'")
        BoundaryCondition(self.default_boundary)
        for name in ("curve_color", "control_color", "break_point_color"):
            value = tuple(float(c) for c in getattr(self, name))
            if len(value) != 3 or not all(0.0 <= c <= 1.0 for c in value):
                raise ValueError(f"{name} must be three floats in [0, 1], got {value}")
            setattr(self, name, value)


def load_config(path: Path | str | None = None) -> EditorConfig:
    """Load settings from a YAML file. Missing file or None gives the defaults."""
    if path is None:
        return EditorConfig()
    path = Path(path)
    if not path.exists():
        logger.warning("Config file %s not found, using defaults", path)
        return EditorConfig()

    try:
        with path.open("r", encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f) or {}
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")

    known = {f.name for f in fields(EditorConfig)}
    unknown = sorted(str(k) for k in raw if k not in known)
    if unknown:
        logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))
    try:
        config = EditorConfig(**{k: v for k, v in raw.items() if k in known})
    except (TypeError, ValueError) as e:
        raise ValueError(f"{path}: {e}") from e
    logger.info("Config loaded from %s", path)
    return config
