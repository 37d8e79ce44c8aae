import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, TYPE_CHECKING

from .math import Point, Color, GREEN, RED, dist

if TYPE_CHECKING:
    from splinedit.config import EditorConfig

logger = logging.getLogger(__name__)


@dataclass
class ControlPoint:
    """
      - position: world-space anchor
      - is_selected: drag marker, at most one per store
      - display_radius: drawn size
      - selected_radius: hit-test threshold for the pointer
    """
    position: Point = (0.0, 0.0)
    is_selected: bool = False
    display_radius: float = 5.0
    selected_radius: float = 10.0
    default_color: Color = GREEN
    selected_color: Color = RED

    def __post_init__(self):
        if self.display_radius <= 0 or self.selected_radius <= 0:
            raise ValueError("ControlPoint radii must be > 0")
        self.position = (float(self.position[0]), float(self.position[1]))

    @property
    def color(self) -> Color:
        return self.selected_color if self.is_selected else self.default_color

    @property
    def radius(self) -> float:
        return self.display_radius

    def hit(self, point: Point) -> bool:
        return dist(self.position, point) < self.selected_radius


@dataclass
class ControlPointStore:
    """
    Ordered control points. Order is the curve parameterization order.
    Mutual exclusion of the selection is kept by the callers: `select`
    does not clear other points.
    """
    points: list[ControlPoint] = field(default_factory=list)
    display_radius: float = 5.0
    selected_radius: float = 10.0
    default_color: Color = GREEN
    selected_color: Color = RED

    @classmethod
    def from_config(cls, config: "EditorConfig") -> "ControlPointStore":
        return cls(
            display_radius=config.display_radius,
            selected_radius=config.selected_radius,
            default_color=config.default_color,
            selected_color=config.selected_color,
        )

    # ---- mutations -----------------------------------------------------------
    def append(self, position: Point) -> ControlPoint:
        point = ControlPoint(
            position=position,
            display_radius=self.display_radius,
            selected_radius=self.selected_radius,
            default_color=self.default_color,
            selected_color=self.selected_color,
        )
        self.points.append(point)
        logger.debug("Added control point #%d at (%.2f, %.2f)", len(self.points) - 1, *point.position)
        return point

    def remove_last(self) -> Optional[ControlPoint]:
        if not self.points:
            return None
        point = self.points.pop()
        logger.debug("Removed control point #%d", len(self.points))
        return point

    def clear_selection(self):
        for point in self.points:
            point.is_selected = False

    def select(self, index: int):
        if not (0 <= index < len(self.points)):
            raise IndexError(index)
        self.points[index].is_selected = True
        logger.debug("Selected control point #%d", index)

    def move_selected_to(self, position: Point):
        idx = self.find_selected()
        if idx is None:
            return
        self.points[idx].position = (float(position[0]), float(position[1]))

    # ---- queries -------------------------------------------------------------
    def find_selected(self) -> Optional[int]:
        for i, point in enumerate(self.points):
            if point.is_selected:
                return i
        return None

    def find_within_radius(self, point: Point) -> Optional[int]:
        """
        First point in store order whose hit zone contains `point`.
        Overlapping hit zones resolve to the earliest appended point.
        """
        for i, candidate in enumerate(self.points):
            if candidate.hit(point):
                return i
        return None

    # read-only views
    def positions(self) -> Sequence[Point]:
        return tuple(p.position for p in self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[ControlPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> ControlPoint:
        return self.points[index]
