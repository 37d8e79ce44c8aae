from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .math import Point, Matrix4, segment_coefficients, sample_segments
from .registries import register_curve, curve_registry

SAMPLES_PER_SEGMENT = 100

BSPLINE_MATRIX: Matrix4 = (
    (1 / 6, 4 / 6, 1 / 6, 0.0),
    (-3 / 6, 0.0, 3 / 6, 0.0),
    (3 / 6, -6 / 6, 3 / 6, 0.0),
    (-1 / 6, 3 / 6, -3 / 6, 1 / 6),
)

BEZIER_MATRIX: Matrix4 = (
    (1.0, 0.0, 0.0, 0.0),
    (-3.0, 3.0, 0.0, 0.0),
    (3.0, -6.0, 3.0, 0.0),
    (-1.0, 3.0, -3.0, 1.0),
)


def cardinal_matrix(tension: float) -> Matrix4:
    s = tension
    return (
        (0.0, 1.0, 0.0, 0.0),
        (-s, 0.0, s, 0.0),
        (2.0 * s, s - 3.0, 3.0 - 2.0 * s, -s),
        (-s, 2.0 - s, s - 2.0, s),
    )


class Spline(ABC):
    """
    GUI-agnostic curve kind: turns an ordered sequence of control points into
    a polyline ready for line-strip rendering.

    Implementations never mutate the input and return [] when there are not
    enough points to build the curve.
    """
    min_points: int = 0

    def __init__(self, samples_per_segment: int = SAMPLES_PER_SEGMENT):
        if samples_per_segment <= 0:
            raise ValueError("samples_per_segment must be > 0")
        self.samples_per_segment = int(samples_per_segment)

    @abstractmethod
    def segments(self, pts: Sequence[Point], /) -> Iterable[list[Point]]:
        """
        Yield polynomial coefficients [a, b, c, d] for each cubic segment.
        """

    def tessellate(self, pts: Sequence[Point], /) -> list[Point]:
        if len(pts) < self.min_points:
            return []
        return sample_segments(list(self.segments(pts)), self.samples_per_segment)


@register_curve("linestrip")
class LineStrip(Spline):
    def segments(self, pts: Sequence[Point], /):
        return iter(())

    def tessellate(self, pts: Sequence[Point], /) -> list[Point]:
        return [(float(x), float(y)) for x, y in pts]


@register_curve("bspline")
class UniformBSpline(Spline):
    """
    Uniform cubic B-spline over consecutive 4-point windows. The curve only
    approximates its control points. Short inputs (2 or 3 points) repeat the
    first and last points once so at least one window exists.
    """
    min_points = 2

    def segments(self, pts: Sequence[Point], /):
        p = list(pts)
        if len(p) < 4:
            p = [p[0]] + p + [p[-1]]
        for i in range(len(p) - 3):
            yield segment_coefficients(p[i:i + 4], BSPLINE_MATRIX)


@register_curve("cardinal")
class CatmullRomSpline(Spline):
    """
    Cardinal spline with Catmull-Rom tension (0.5). Phantom endpoints are
    mirrored so the curve starts at the first point and ends at the last one,
    passing through every control point.
    """
    min_points = 2

    def __init__(self, samples_per_segment: int = SAMPLES_PER_SEGMENT, tension: float = 0.5):
        super().__init__(samples_per_segment)
        self.tension = float(tension)

    def segments(self, pts: Sequence[Point], /):
        n = len(pts)
        first = (2.0 * pts[0][0] - pts[1][0], 2.0 * pts[0][1] - pts[1][1])
        last = (2.0 * pts[-1][0] - pts[-2][0], 2.0 * pts[-1][1] - pts[-2][1])
        p = [first] + list(pts) + [last]
        matrix = cardinal_matrix(self.tension)
        for i in range(n - 1):
            yield segment_coefficients(p[i:i + 4], matrix)


@register_curve("bezier")
class CubicBezier(Spline):
    """
    A single cubic Bezier segment, drawn only when exactly 4 control points
    exist: p0 and p3 are anchors, p1 and p2 the tangent handles.
    """
    min_points = 4

    def segments(self, pts: Sequence[Point], /):
        if len(pts) != 4:
            return
        yield segment_coefficients(pts, BEZIER_MATRIX)


CURVE_KINDS: tuple[str, ...] = tuple(curve_registry)

_default_curves: dict[str, Spline] = {name: cls() for name, cls in curve_registry.items()}


def tessellate(kind: str, points: Sequence[Point]) -> list[Point]:
    return _default_curves[kind].tessellate(points)


def tessellate_linestrip(points: Sequence[Point]) -> list[Point]:
    return tessellate("linestrip", points)


def tessellate_bspline(points: Sequence[Point]) -> list[Point]:
    return tessellate("bspline", points)


def tessellate_cardinal(points: Sequence[Point]) -> list[Point]:
    return tessellate("cardinal", points)


def tessellate_bezier(points: Sequence[Point]) -> list[Point]:
    return tessellate("bezier", points)
