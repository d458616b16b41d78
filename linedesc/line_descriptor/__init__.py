"""
Bindings for OpenCV's line_descriptor module.

Line detection (``BinaryDescriptor``, ``LSDDetector``), binary descriptor
extraction and matching (``BinaryDescriptorMatcher``), and drawing helpers.
"""

from .descriptor import BinaryDescriptor, BinaryDescriptorParams, PtrOfBinaryDescriptor
from .detector import LSDDetector, PtrOfLSDDetector
from .drawing import draw_keylines, draw_line_matches
from .matcher import BinaryDescriptorMatcher, PtrOfBinaryDescriptorMatcher
from .types import (
    MLN10,
    RELATIVE_ERROR_FACTOR,
    DrawLinesMatchesFlags,
    DrawLinesMatchesFlags_DEFAULT,
    DrawLinesMatchesFlags_DRAW_OVER_OUTIMG,
    DrawLinesMatchesFlags_NOT_DRAW_SINGLE_LINES,
    KeyLine,
    LSDParam,
    VectorOfKeyLine,
    VectorOfVectorOfKeyLine,
)

__all__ = [
    # Detectors / extractors
    "BinaryDescriptor",
    "BinaryDescriptorParams",
    "PtrOfBinaryDescriptor",
    "LSDDetector",
    "PtrOfLSDDetector",
    # Matching
    "BinaryDescriptorMatcher",
    "PtrOfBinaryDescriptorMatcher",
    # Drawing
    "draw_keylines",
    "draw_line_matches",
    "DrawLinesMatchesFlags",
    "DrawLinesMatchesFlags_DEFAULT",
    "DrawLinesMatchesFlags_DRAW_OVER_OUTIMG",
    "DrawLinesMatchesFlags_NOT_DRAW_SINGLE_LINES",
    # Values
    "KeyLine",
    "LSDParam",
    "VectorOfKeyLine",
    "VectorOfVectorOfKeyLine",
    "MLN10",
    "RELATIVE_ERROR_FACTOR",
]
