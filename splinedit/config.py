"""
Editor configuration.

All tunables of the curve editor live in `EditorConfig`: point sizes and
colors, the color of each curve kind, gizmo line width, the remove key and
the frame interval. Values default to the reference look of the tool and can
be overridden from a plain dict (e.g. parsed from a JSON file by the caller).
"""
from dataclasses import dataclass, field, fields

from splinedit.core.math import Color, WHITE, PINK, YELLOW, GREEN, RED
from splinedit.core.splines import SAMPLES_PER_SEGMENT, CURVE_KINDS


def _default_curve_colors() -> dict[str, Color]:
    return {
        "linestrip": WHITE,
        "bspline": PINK,
        "cardinal": YELLOW,
        "bezier": GREEN,
    }


def _parse_color(key: str, value) -> Color:
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a hex color string, got {value!r}")
    return Color.from_hex(value)


@dataclass
class EditorConfig:
    display_radius: float = 5.0
    selected_radius: float = 10.0
    default_color: Color = GREEN
    selected_color: Color = RED
    curve_colors: dict[str, Color] = field(default_factory=_default_curve_colors)
    line_width: float = 5.0
    remove_key: str = "C"
    frame_interval_ms: int = 16
    samples_per_segment: int = SAMPLES_PER_SEGMENT

    def __post_init__(self):
        if self.display_radius <= 0 or self.selected_radius <= 0:
            raise ValueError("point radii must be > 0")
        if self.line_width <= 0:
            raise ValueError("line_width must be > 0")
        if self.frame_interval_ms <= 0:
            raise ValueError("frame_interval_ms must be > 0")
        if self.samples_per_segment <= 0:
            raise ValueError("samples_per_segment must be > 0")
        if len(self.remove_key) != 1:
            raise ValueError(f"remove_key must be a single character, got '{self.remove_key}'")
        unknown = set(self.curve_colors) - set(CURVE_KINDS)
        if unknown:
            raise ValueError(f"Unknown curve kinds: {sorted(unknown)}")

    def curve_color(self, kind: str) -> Color:
        return self.curve_colors.get(kind, WHITE)

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "display_radius": self.display_radius,
            "selected_radius": self.selected_radius,
            "default_color": self.default_color.to_hex(),
            "selected_color": self.selected_color.to_hex(),
            "curve_colors": {k: c.to_hex() for k, c in self.curve_colors.items()},
            "line_width": self.line_width,
            "remove_key": self.remove_key,
            "frame_interval_ms": self.frame_interval_ms,
            "samples_per_segment": self.samples_per_segment,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "EditorConfig":
        if not isinstance(data, dict):
            raise ValueError(f"config must be a JSON object, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        extra = set(data) - known
        if extra:
            raise ValueError(f"Unknown config keys: {sorted(extra)}")
        kwargs = dict(data)
        for key in ("default_color", "selected_color"):
            if key in kwargs:
                kwargs[key] = _parse_color(key, kwargs[key])
        if "curve_colors" in kwargs:
            if not isinstance(kwargs["curve_colors"], dict):
                raise ValueError("curve_colors must be a mapping of curve kind to color")
            colors = _default_curve_colors()
            colors.update({k: _parse_color(k, v) for k, v in kwargs["curve_colors"].items()})
            kwargs["curve_colors"] = colors
        if "remove_key" in kwargs and not isinstance(kwargs["remove_key"], str):
            raise ValueError(f"remove_key must be a string, got {kwargs['remove_key']!r}")
        for key, convert in (
                ("display_radius", float), ("selected_radius", float), ("line_width", float),
                ("frame_interval_ms", int), ("samples_per_segment", int),
        ):
            if key in kwargs:
                try:
                    kwargs[key] = convert(kwargs[key])
                except (TypeError, ValueError):
                    raise ValueError(f"{key} must be a number, got {kwargs[key]!r}") from None
        return cls(**kwargs)
