import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from PySide6.QtGui import QColor

Point = tuple[float, float]
# 4x4 characteristic matrix, rows are the coefficients of 1, t, t^2, t^3
Matrix4 = tuple[tuple[float, float, float, float], ...]


def dist(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def segment_coefficients(p: Sequence[Point], char_matrix: Matrix4) -> list[Point]:
    """
    Multiply the characteristic matrix by the 4 control points of a segment.
    Returns the polynomial coefficients [a, b, c, d] so that
    position(t) = a + b*t + c*t^2 + d*t^3.
    """
    coeffs: list[Point] = []
    for row in char_matrix:
        x = row[0] * p[0][0] + row[1] * p[1][0] + row[2] * p[2][0] + row[3] * p[3][0]
        y = row[0] * p[0][1] + row[1] * p[1][1] + row[2] * p[2][1] + row[3] * p[3][1]
        coeffs.append((x, y))
    return coeffs


def eval_polynomial(coeffs: Sequence[Point], t: float) -> Point:
    a, b, c, d = coeffs
    tt = t * t
    ttt = tt * t
    x = a[0] + b[0] * t + c[0] * tt + d[0] * ttt
    y = a[1] + b[1] * t + c[1] * tt + d[1] * ttt
    return (x, y)


def sample_segments(segments: Sequence[Sequence[Point]], samples_per_segment: int) -> list[Point]:
    """
    Sample a piecewise cubic curve over its whole parameter range [0, m],
    m = number of segments, at resolution = samples_per_segment * m
    subdivisions (resolution + 1 points). Segment joins are sampled once.
    """
    m = len(segments)
    if m == 0:
        return []
    resolution = samples_per_segment * m
    out: list[Point] = []
    for i in range(resolution + 1):
        t = m * i / resolution
        # the last sample belongs to the end of the last segment
        idx = min(int(t), m - 1)
        out.append(eval_polynomial(segments[idx], t - idx))
    return out


@dataclass(frozen=True)
class Color:
    """
    Framework-free RGBA container, 0..255 per channel.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def to_rgba(self, /) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

    def to_qcolor(self) -> "QColor":
        from PySide6.QtGui import QColor
        return QColor(self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @staticmethod
    def from_hex(value: str) -> "Color":
        s = value.lstrip("#")
        if len(s) not in (6, 8):
            raise ValueError(f"Invalid color '{value}'")
        try:
            channels = [int(s[i:i + 2], 16) for i in range(0, len(s), 2)]
        except ValueError:
            raise ValueError(f"Invalid color '{value}'") from None
        return Color(*channels)


# css palette
WHITE = Color(255, 255, 255)
PINK = Color(255, 192, 203)
YELLOW = Color(255, 255, 0)
GREEN = Color(0, 128, 0)
RED = Color(255, 0, 0)
