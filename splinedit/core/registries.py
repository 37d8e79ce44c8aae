from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from .splines import Spline

curve_registry: dict[str, type["Spline"]] = {}


def register_curve(name: str):
    def _decorator(cls: type["Spline"]) -> type["Spline"]:
        if not name or name in curve_registry:
            raise ValueError(f"Invalid or duplicate curve name '{name}'")
        curve_registry[name] = cls
        return cls
    return _decorator
