from .math import Point, Color, dist
from .splines import (
    Spline, LineStrip, UniformBSpline, CatmullRomSpline, CubicBezier, CURVE_KINDS, SAMPLES_PER_SEGMENT,
    tessellate, tessellate_linestrip, tessellate_bspline, tessellate_cardinal, tessellate_bezier,
)
from .control_points import ControlPoint, ControlPointStore
from .interaction import PointerState, InteractionState, InteractionResult, InteractionStateMachine
from .frame import InputSource, Camera, Renderer, FrameOrchestrator, FrameReport
