"""
Core OpenCV collaborators used by the line descriptor API.
"""

from .mat import (
    CV_8S,
    CV_8U,
    CV_8UC1,
    CV_8UC3,
    CV_16S,
    CV_16U,
    CV_32F,
    CV_32FC1,
    CV_32S,
    CV_64F,
    Mat,
    make_type,
)
from .persistence import FileNode, FileStorage
from .types import FLT_MAX, DMatch, Point2f, Scalar
from .vector import (
    Vector,
    VectorOfDMatch,
    VectorOfi8,
    VectorOfMat,
    VectorOfu8,
    VectorOfVectorOfDMatch,
)

__all__ = [
    "Mat",
    "make_type",
    "CV_8U",
    "CV_8S",
    "CV_16U",
    "CV_16S",
    "CV_32S",
    "CV_32F",
    "CV_64F",
    "CV_8UC1",
    "CV_8UC3",
    "CV_32FC1",
    "FileNode",
    "FileStorage",
    "Point2f",
    "Scalar",
    "DMatch",
    "FLT_MAX",
    "Vector",
    "VectorOfDMatch",
    "VectorOfMat",
    "VectorOfVectorOfDMatch",
    "VectorOfi8",
    "VectorOfu8",
]
