"""
Face geometry mapping.

Expands a parameter vector into concrete feature coordinates around a face
center. Four fixed rows anchor the face:

    eyebrow row   center_y - 50
    eye row       40% of the way from the eyebrow row to the nose row
    nose row      center_y + 10
    mouth row     center_y + 40

Each raw parameter in [-1, 1] is first rescaled into a feature-specific
range (see scale_parameters); the curves below are built from those scaled
values and must stay bit-for-bit stable to reproduce existing faces.
"""

from dataclasses import dataclass
from typing import Dict, NamedTuple, Tuple

from faceindex.face.parameters import FaceDimensions, ParameterVector

BASE_STROKE_WIDTH = 2
EYE_WIDTH = 20
INNER_EYE_BASE_X = 20
EYEBROW_BASE_WIDTH = 20
NOSTRIL_DISTANCE = 5

EYEBROW_ROW_OFFSET = -50
NOSE_ROW_OFFSET = 10
MOUTH_ROW_OFFSET = 40
EYE_ROW_FRACTION = 0.4


class Point(NamedTuple):
    """2D coordinate."""
    x: float
    y: float


def _fmt(value: float) -> str:
    # Shortest round-trip form, integral values without a fractional part
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _pt(point: Point) -> str:
    return f"{_fmt(point.x)} {_fmt(point.y)}"


@dataclass(frozen=True)
class CubicCurve:
    """Cubic Bézier segment."""
    start: Point
    control1: Point
    control2: Point
    end: Point

    def segment_data(self) -> str:
        """Path command continuing from the current point."""
        return f"C{_pt(self.control1)} {_pt(self.control2)} {_pt(self.end)}"

    def to_path(self) -> str:
        """Standalone vector path data."""
        return f"M{_pt(self.start)} {self.segment_data()}"

    def to_dict(self) -> Dict:
        return {
            'start': self.start._asdict(),
            'control1': self.control1._asdict(),
            'control2': self.control2._asdict(),
            'end': self.end._asdict(),
            'path': self.to_path(),
        }


@dataclass(frozen=True)
class QuadraticCurve:
    """Quadratic Bézier segment."""
    start: Point
    control: Point
    end: Point

    def to_path(self) -> str:
        """Standalone vector path data."""
        return f"M{_pt(self.start)} Q{_pt(self.control)} {_pt(self.end)}"

    def to_dict(self) -> Dict:
        return {
            'start': self.start._asdict(),
            'control': self.control._asdict(),
            'end': self.end._asdict(),
            'path': self.to_path(),
        }


@dataclass(frozen=True)
class Segment:
    """Straight line between two points."""
    start: Point
    end: Point

    def to_dict(self) -> Dict:
        return {'start': self.start._asdict(), 'end': self.end._asdict()}


@dataclass(frozen=True)
class StrokeWidths:
    base: float
    eyebrows: float


@dataclass(frozen=True)
class Eyebrows:
    y: float
    left: CubicCurve
    right: CubicCurve


@dataclass(frozen=True)
class Eyes:
    y: float
    left: Segment
    right: Segment


@dataclass(frozen=True)
class Nose:
    y: float
    left_nostril: Point
    right_nostril: Point
    left_ala: QuadraticCurve
    right_ala: QuadraticCurve


@dataclass(frozen=True)
class Mouth:
    """
    Mouth outline.

    Attributes:
        y: Mouth row
        upper_lip: Two cubic halves meeting at the philtrum, left half first
        lower_lip: Single cubic from the left corner to the right corner
    """
    y: float
    upper_lip: Tuple[CubicCurve, CubicCurve]
    lower_lip: CubicCurve

    def upper_lip_path(self) -> str:
        """Upper lip as one continuous path."""
        left, right = self.upper_lip
        return f"{left.to_path()} {right.segment_data()}"


@dataclass(frozen=True)
class FeatureGeometry:
    """Everything a renderer needs to draw one face."""
    stroke_widths: StrokeWidths
    eyebrows: Eyebrows
    eyes: Eyes
    nose: Nose
    mouth: Mouth

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'stroke_widths': {
                'base': self.stroke_widths.base,
                'eyebrows': self.stroke_widths.eyebrows,
            },
            'eyebrows': {
                'y': self.eyebrows.y,
                'left': self.eyebrows.left.to_dict(),
                'right': self.eyebrows.right.to_dict(),
            },
            'eyes': {
                'y': self.eyes.y,
                'left': self.eyes.left.to_dict(),
                'right': self.eyes.right.to_dict(),
            },
            'nose': {
                'y': self.nose.y,
                'left_nostril': self.nose.left_nostril._asdict(),
                'right_nostril': self.nose.right_nostril._asdict(),
                'left_ala': self.nose.left_ala.to_dict(),
                'right_ala': self.nose.right_ala.to_dict(),
            },
            'mouth': {
                'y': self.mouth.y,
                'upper_lip': [curve.to_dict() for curve in self.mouth.upper_lip],
                'upper_lip_path': self.mouth.upper_lip_path(),
                'lower_lip': self.mouth.lower_lip.to_dict(),
            },
        }


def scale_parameters(params: ParameterVector) -> Dict[str, float]:
    """
    Rescale raw [-1, 1] parameters into physical feature ranges.

    Args:
        params: Synthesized parameters

    Returns:
        Dictionary keyed by feature name:
            eyebrow_curve          [0, 8]      brow arch depth
            eyebrow_peak_offset    [0.2, 0.8]  peak position along the brow
            eyebrow_width          [1, 1.3]    multiplier on base brow width
            eye_y_offset           [-6, 6]
            eye_x_offset           [-3, 3]
            upper_lip_curve        [0, 1]
            lower_lip_curve        [0, 1]      inverted
            cupid_bow_offset       [0.2, 0.8]
            nose_width             [10, 14]
            cupid_bow_strength     [0, 1]
            mouth_width            [1.25, 2.5] multiplier on nose-to-mouth distance
            eyebrow_stroke_width   [1, 2.5]    multiplier on base stroke width
    """
    return {
        'eyebrow_curve': 8 * (params.eyebrow_curve + 1) * 0.5,
        'eyebrow_peak_offset': 0.2 + 0.6 * ((params.eyebrow_peak_offset + 1) * 0.5),
        'eyebrow_width': 1 + 0.15 * (params.eyebrow_width + 1),
        'eye_y_offset': 6 * params.eye_y_offset,
        'eye_x_offset': 3 * params.eye_x_offset,
        'upper_lip_curve': (params.upper_lip_curve + 1) * 0.5,
        'lower_lip_curve': (-params.lower_lip_curve + 1) * 0.5,
        'cupid_bow_offset': 0.5 + 0.3 * params.cupid_bow_offset,
        'nose_width': 12 + 2 * params.nose_width,
        'cupid_bow_strength': (params.cupid_bow_strength + 1) * 0.5,
        'mouth_width': 1.25 + 0.625 * (params.mouth_width + 1),
        'eyebrow_stroke_width': 1 + 0.75 * (params.eyebrow_stroke_width + 1),
    }


def map_geometry(dimensions: FaceDimensions, params: ParameterVector) -> FeatureGeometry:
    """
    Derive feature coordinates and curves for one face.

    Args:
        dimensions: Face center
        params: Synthesized parameters

    Returns:
        Feature geometry
    """
    cx = dimensions.center_x
    cy = dimensions.center_y
    scaled = scale_parameters(params)

    # Rows
    eyebrow_y = cy + EYEBROW_ROW_OFFSET
    nose_y = cy + NOSE_ROW_OFFSET
    eye_base_y = eyebrow_y + (nose_y - eyebrow_y) * EYE_ROW_FRACTION
    mouth_y = cy + MOUTH_ROW_OFFSET
    nose_mouth_distance = mouth_y - nose_y

    # Eyes
    eye_y = eye_base_y + scaled['eye_y_offset']
    inner_eye_x = INNER_EYE_BASE_X + scaled['eye_x_offset']
    left_inner_eye_x = cx - inner_eye_x
    left_outer_eye_x = left_inner_eye_x - EYE_WIDTH
    right_inner_eye_x = cx + inner_eye_x
    right_outer_eye_x = right_inner_eye_x + EYE_WIDTH

    # Eyebrows span outward from the inner eye corners
    eyebrow_span = EYEBROW_BASE_WIDTH * scaled['eyebrow_width']
    left_outer_eyebrow_x = left_inner_eye_x - eyebrow_span
    right_outer_eyebrow_x = right_inner_eye_x + eyebrow_span
    left_peak_x = left_inner_eye_x - (eyebrow_span * scaled['eyebrow_peak_offset'])
    right_peak_x = right_inner_eye_x + (eyebrow_span * scaled['eyebrow_peak_offset'])
    peak_y = eyebrow_y - scaled['eyebrow_curve']

    # Nose
    nose_width = scaled['nose_width']
    left_ala_x = cx - nose_width
    right_ala_x = cx + nose_width

    # Mouth
    mouth_width = nose_mouth_distance * scaled['mouth_width']
    lip_start = cx - mouth_width / 2
    lip_end = cx + mouth_width / 2
    lip_length = mouth_width / 2
    left_lip_peak_x = lip_start + lip_length * scaled['cupid_bow_offset']
    right_lip_peak_x = lip_end - lip_length * scaled['cupid_bow_offset']

    upper_lip_height = 5 * scaled['upper_lip_curve']
    upper_lip_peak_y = mouth_y - upper_lip_height
    cupid_bow_y = upper_lip_peak_y + upper_lip_height * scaled['cupid_bow_strength']
    lower_lip_y = mouth_y + scaled['lower_lip_curve'] * 8

    return FeatureGeometry(
        stroke_widths=StrokeWidths(
            base=BASE_STROKE_WIDTH,
            eyebrows=BASE_STROKE_WIDTH * scaled['eyebrow_stroke_width'],
        ),
        eyebrows=Eyebrows(
            y=eyebrow_y,
            left=CubicCurve(
                start=Point(left_outer_eyebrow_x, eyebrow_y),
                control1=Point(left_peak_x, peak_y),
                control2=Point(left_peak_x, peak_y),
                end=Point(left_inner_eye_x, eyebrow_y),
            ),
            right=CubicCurve(
                start=Point(right_outer_eyebrow_x, eyebrow_y),
                control1=Point(right_peak_x, peak_y),
                control2=Point(right_peak_x, peak_y),
                end=Point(right_inner_eye_x, eyebrow_y),
            ),
        ),
        eyes=Eyes(
            y=eye_y,
            left=Segment(Point(left_outer_eye_x, eye_y), Point(left_inner_eye_x, eye_y)),
            right=Segment(Point(right_inner_eye_x, eye_y), Point(right_outer_eye_x, eye_y)),
        ),
        nose=Nose(
            y=nose_y,
            left_nostril=Point(cx - NOSTRIL_DISTANCE, nose_y),
            right_nostril=Point(cx + NOSTRIL_DISTANCE, nose_y),
            left_ala=QuadraticCurve(
                start=Point(left_ala_x, cy),
                control=Point(left_ala_x - 2, cy + 5),
                end=Point(left_ala_x, nose_y),
            ),
            right_ala=QuadraticCurve(
                start=Point(right_ala_x, cy),
                control=Point(right_ala_x + 2, cy + 5),
                end=Point(right_ala_x, nose_y),
            ),
        ),
        mouth=Mouth(
            y=mouth_y,
            upper_lip=(
                CubicCurve(
                    start=Point(lip_start, mouth_y),
                    control1=Point(left_lip_peak_x, upper_lip_peak_y),
                    control2=Point(left_lip_peak_x, upper_lip_peak_y),
                    end=Point(cx, cupid_bow_y),
                ),
                CubicCurve(
                    start=Point(cx, cupid_bow_y),
                    control1=Point(right_lip_peak_x, upper_lip_peak_y),
                    control2=Point(right_lip_peak_x, upper_lip_peak_y),
                    end=Point(lip_end, mouth_y),
                ),
            ),
            lower_lip=CubicCurve(
                start=Point(lip_start, mouth_y),
                control1=Point(cx - mouth_width / 4, lower_lip_y),
                control2=Point(cx + mouth_width / 4, lower_lip_y),
                end=Point(lip_end, mouth_y),
            ),
        ),
    )
