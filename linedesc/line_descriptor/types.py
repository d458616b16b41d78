"""
Line descriptor value types: KeyLine, LSDParam, drawing flags and the
KeyLine vectors.
"""

from enum import IntFlag

from .._native import KeyLineC, LSDParamC
from ..core.types import Point2f
from ..core.vector import Vector
from ..types import SimpleType, opencv_type_simple, receive
from ._bindings import call_keyline_new, call_keyline_point, call_lsd_param_new

__all__ = [
    "KeyLine",
    "LSDParam",
    "DrawLinesMatchesFlags",
    "DrawLinesMatchesFlags_DEFAULT",
    "DrawLinesMatchesFlags_DRAW_OVER_OUTIMG",
    "DrawLinesMatchesFlags_NOT_DRAW_SINGLE_LINES",
    "MLN10",
    "RELATIVE_ERROR_FACTOR",
    "VectorOfKeyLine",
    "VectorOfVectorOfKeyLine",
]

MLN10 = 2.30258509299404568402
RELATIVE_ERROR_FACTOR = 100.0


class DrawLinesMatchesFlags(IntFlag):
    """Drawing options for ``draw_keylines`` / ``draw_line_matches``."""

    DEFAULT = 0
    # Draw on the existing content of the output image
    DRAW_OVER_OUTIMG = 1
    # Single keylines are not drawn
    NOT_DRAW_SINGLE_LINES = 2


DrawLinesMatchesFlags_DEFAULT = DrawLinesMatchesFlags.DEFAULT
DrawLinesMatchesFlags_DRAW_OVER_OUTIMG = DrawLinesMatchesFlags.DRAW_OVER_OUTIMG
DrawLinesMatchesFlags_NOT_DRAW_SINGLE_LINES = DrawLinesMatchesFlags.NOT_DRAW_SINGLE_LINES


@opencv_type_simple(size=68)
class KeyLine(SimpleType, KeyLineC):
    """
    A line extracted from an image (cv::line_descriptor::KeyLine).

    Coordinates come in two frames: the original image
    (``start_point_x``...) and the octave the line was extracted from
    (``s_point_in_octave_x``...). ``pt`` is the line midpoint.

    Attributes
    ----------
    angle : float
        Orientation of the line.
    class_id : int
        Object ID, used to cluster keylines by the line they represent.
    octave : int
        Octave (pyramid layer) the line was extracted from.
    pt : Point2f
        Coordinates of the middle point.
    response : float
        Line length divided by the maximum of the image dimensions.
    size : float
        Area of the smallest rectangle containing the line.
    line_length : float
        Length of the line in its octave.
    num_of_pixels : int
        Number of pixels covered by the line.
    """

    @classmethod
    def default(cls) -> "KeyLine":
        """Native default-constructed keyline."""
        return receive(cls, call_keyline_new())

    def _point(self, getter: str) -> Point2f:
        return receive(Point2f, call_keyline_point(self.as_extern(), getter))

    def get_start_point(self) -> Point2f:
        """Start point in the original image."""
        return self._point("getStartPoint")

    def get_end_point(self) -> Point2f:
        """End point in the original image."""
        return self._point("getEndPoint")

    def get_start_point_in_octave(self) -> Point2f:
        return self._point("getStartPointInOctave")

    def get_end_point_in_octave(self) -> Point2f:
        return self._point("getEndPointInOctave")


@opencv_type_simple(size=56)
class LSDParam(SimpleType, LSDParamC):
    """Parameters of the LSD line segment detector."""

    @classmethod
    def default(cls) -> "LSDParam":
        """Native defaults (scale 0.8, sigma_scale 0.6, quant 2.0, ang_th 22.5...)."""
        return receive(cls, call_lsd_param_new())


class VectorOfKeyLine(Vector):
    """std::vector<cv::line_descriptor::KeyLine>"""

    __slots__ = ()

    _native_name = "VectorOfKeyLine"
    _element = KeyLine


class VectorOfVectorOfKeyLine(Vector):
    """std::vector<std::vector<KeyLine>> (one keyline list per image)."""

    __slots__ = ()

    _native_name = "VectorOfVectorOfKeyLine"
    _element = VectorOfKeyLine

    def push(self, value) -> None:
        if isinstance(value, VectorOfKeyLine):
            super().push(value)
            return
        with VectorOfKeyLine.from_iterable(value) as inner:
            super().push(inner)

    def to_lists(self) -> list[list[KeyLine]]:
        lists = []
        for inner in self:
            with inner:
                lists.append(inner.to_list())
        return lists
