from .math import Point, SegmentHit, dist2, project_point_to_segment, nearest_segment, nearest_point_index
from .errors import CurveError, OutOfRange, DegenerateCurve, MalformedFile
from .polygon import ControlPolygon
from .sampling import SampledCurve, project_to_curve
from .evaluators import BoundaryCondition, CurveEvaluator, BezierEvaluator, BSplineEvaluator
from .registries import evaluator_registry, get_evaluator
from .curve import Curve
from .layer import CurveLayer, DisplayAttributes, Color
from .session import EditSession, AddPoint, MovePoint, RemovePoint, EditCommand
from .config import EditorConfig, load_config

curve_kind_labels = {
    "bezier": "Bezier",
    "bspline": "B-spline",
}
