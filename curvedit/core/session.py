import logging
from dataclasses import dataclass

from .curve import Curve
from .errors import OutOfRange
from .layer import CurveLayer
from .math import Point

logger = logging.getLogger(__name__)


# ---- edit commands -----------------------------------------------------------
@dataclass(frozen=True)
class AddPoint:
    position: Point


@dataclass(frozen=True)
class MovePoint:
    index: int
    position: Point


@dataclass(frozen=True)
class RemovePoint:
    index: int


EditCommand = AddPoint | MovePoint | RemovePoint


class EditSession:
    """
    The curves being edited and which one is active.

    Edit commands always target the active curve. A command naming a control
    point that does not exist is ignored and leaves the curve unchanged.
    """

    def __init__(self, layers: list[CurveLayer] | None = None, active_idx: int = -1):
        self._layers = layers or []
        self._active_idx = active_idx if 0 <= active_idx < len(self._layers) else (0 if self._layers else -1)

    @property
    def active_idx(self) -> int:
        return self._active_idx

    @property
    def active_layer(self) -> CurveLayer | None:
        if self._active_idx < 0 or self._active_idx >= len(self._layers):
            return None
        return self._layers[self._active_idx]

    @property
    def active_curve(self) -> Curve | None:
        layer = self.active_layer
        return layer.curve if layer is not None else None

    @property
    def layers(self) -> tuple[CurveLayer, ...]:
        return tuple(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __getitem__(self, key: int | str) -> CurveLayer:
        if isinstance(key, int):
            if 0 <= key < len(self._layers):
                return self._layers[key]
            raise IndexError(key)
        if isinstance(key, str):
            for layer in self._layers:
                if layer.name == key:
                    return layer
            raise KeyError(key)
        raise TypeError("key must be int or str")

    # ---- curve list ---------------------------------------------------------
    def set_active(self, index: int) -> None:
        if not (0 <= index < len(self._layers)):
            raise IndexError(index)
        self._active_idx = index

    def add_layer(self, layer: CurveLayer, activate: bool = False) -> int:
        idx = len(self._layers)
        self._layers.append(layer)
        if self._active_idx == -1 or activate:
            self._active_idx = idx
        return idx

    def add_curve(self, curve: Curve | None = None, name: str | None = None, activate: bool = True) -> int:
        name = name or f"Curve {len(self._layers) + 1}"
        return self.add_layer(CurveLayer(curve=curve if curve is not None else Curve(), name=name), activate=activate)

    def remove_layer(self, index: int) -> bool:
        if not (0 <= index < len(self._layers)):
            return False
        self._layers.pop(index)
        if len(self._layers) == 0:
            self._active_idx = -1
        elif self._active_idx >= index and self._active_idx != 0:
            self._active_idx -= 1
        return True

    # ---- edits --------------------------------------------------------------
    def apply(self, command: EditCommand) -> int | None:
        """
        Run one edit command on the active curve.
        Returns the index of the point the command touched, or None when
        nothing changed.
        """
        curve = self.active_curve
        if curve is None:
            logger.debug("No active curve, ignoring %s", command)
            return None
        try:
            match command:
                case AddPoint(position=pos):
                    return curve.insert_point(pos)
                case MovePoint(index=idx, position=pos):
                    curve.move_point(idx, pos)
                    return idx
                case RemovePoint(index=idx):
                    curve.remove_point(idx)
                    return idx
                case _:
                    raise TypeError(f"Unknown edit command {command!r}")
        except OutOfRange as e:
            logger.debug("Ignoring %s: %s", command, e)
            return None

    # ---- serialization ------------------------------------------------------
    def curves(self) -> list[Curve]:
        return [layer.curve for layer in self._layers]

    def to_dict(self) -> dict:
        return {
            "active_idx": self._active_idx,
            "layers": [layer.to_dict() for layer in self._layers],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EditSession":
        layers = [CurveLayer.from_dict(ld) for ld in data.get("layers", [])]
        return cls(layers=layers, active_idx=data.get("active_idx", -1))
