import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence, TYPE_CHECKING

from .control_points import ControlPointStore
from .interaction import InteractionStateMachine, PointerState, InteractionResult
from .math import Point, Color
from .splines import Spline, CURVE_KINDS
from .registries import curve_registry

if TYPE_CHECKING:
    from splinedit.config import EditorConfig

logger = logging.getLogger(__name__)


class InputSource(ABC):
    @abstractmethod
    def poll(self) -> PointerState:
        """
        Return the input snapshot for this frame and reset just-pressed edges.
        Only the latest pointer move sample is kept.
        """


class Camera(ABC):
    @abstractmethod
    def screen_to_world(self, screen_point: Point, /) -> Optional[Point]:
        """
        Project a screen position to world space, or None when there is no
        usable viewport.
        """


class Renderer(ABC):
    """
    Fire-and-forget draw target. Coordinates are world space.
    """

    def begin_frame(self):
        pass

    def end_frame(self):
        pass

    @abstractmethod
    def linestrip(self, points: Sequence[Point], color: Color, /):
        pass

    @abstractmethod
    def circle(self, center: Point, radius: float, color: Color, /):
        pass


@dataclass
class FrameReport:
    interaction: InteractionResult
    curves: dict[str, int] = field(default_factory=dict)
    circles: int = 0


class FrameOrchestrator:
    """
    One tick per rendered frame, stages always in this order:
      1. poll input
      2. interaction (delete / select / drag / create)
      3. evaluate every curve kind on the post-interaction points
      4. emit draw calls
    """

    def __init__(
            self,
            store: ControlPointStore,
            input_source: InputSource,
            camera: Camera,
            renderer: Renderer,
            config: "EditorConfig | None" = None,
    ):
        self.store = store
        self.input_source = input_source
        self.renderer = renderer
        self.interaction = InteractionStateMachine(store, camera)
        if config is None:
            from splinedit.config import EditorConfig
            config = EditorConfig()
        self.config = config
        self.curves: dict[str, Spline] = {
            name: curve_registry[name](config.samples_per_segment) for name in CURVE_KINDS
        }

    def evaluate(self) -> dict[str, list[Point]]:
        points = self.store.positions()
        return {name: curve.tessellate(points) for name, curve in self.curves.items()}

    def tick(self) -> FrameReport:
        pointer = self.input_source.poll()
        result = self.interaction.step(pointer)
        if result.created or result.removed:
            logger.debug("Control points: %d", len(self.store))

        polylines = self.evaluate()

        report = FrameReport(interaction=result)
        self.renderer.begin_frame()
        # a single point has no line to draw, only its circle
        if len(self.store) >= 2:
            for name, polyline in polylines.items():
                if not polyline:
                    continue
                self.renderer.linestrip(polyline, self.config.curve_color(name))
                report.curves[name] = len(polyline)
        for point in self.store:
            self.renderer.circle(point.position, point.radius, point.color)
            report.circles += 1
        self.renderer.end_frame()
        return report
