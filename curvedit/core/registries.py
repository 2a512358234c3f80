from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .evaluators import CurveEvaluator

evaluator_registry: dict[str, type["CurveEvaluator"]] = {}


def register_evaluator(name: str):
    def _decorator(cls: type["CurveEvaluator"]) -> type["CurveEvaluator"]:
        if not name or name in evaluator_registry:
            raise ValueError(f"Invalid or duplicate curve kind '{name}'")
        cls.kind = name
        evaluator_registry[name] = cls
        return cls
    return _decorator


def get_evaluator(kind: str) -> "CurveEvaluator":
    try:
        return evaluator_registry[kind]()
    except KeyError:
        raise ValueError(f"Unknown curve kind '{kind}'") from None
