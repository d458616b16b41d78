"""
Fixed-layout core types used by the line descriptor API.
"""

from .._native import DMatchC, Point2fC, ScalarC
from ..types import SimpleType, opencv_type_simple

__all__ = ["Point2f", "Scalar", "DMatch", "FLT_MAX"]

FLT_MAX = 3.4028234663852886e38


@opencv_type_simple(size=8)
class Point2f(SimpleType, Point2fC):
    """2D point with float coordinates (cv::Point2f)."""

    def __init__(self, x: float = 0.0, y: float = 0.0):
        super().__init__(x, y)

    def __iter__(self):
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"Point2f({self.x!r}, {self.y!r})"


@opencv_type_simple(size=32)
class Scalar(SimpleType, ScalarC):
    """
    Four-element double vector (cv::Scalar).

    Drawing functions use ``Scalar.all(-1)`` to mean "pick a random color".
    """

    def __init__(self, v0: float = 0.0, v1: float = 0.0, v2: float = 0.0, v3: float = 0.0):
        super().__init__()
        self.val[:] = (v0, v1, v2, v3)

    @classmethod
    def all(cls, value: float) -> "Scalar":
        return cls(value, value, value, value)

    def __getitem__(self, index: int) -> float:
        return self.val[index]

    def __iter__(self):
        return iter(self.val[:])

    def __repr__(self) -> str:
        return f"Scalar{tuple(self.val[:])!r}"


@opencv_type_simple(size=16)
class DMatch(SimpleType, DMatchC):
    """Match between a query descriptor and a train descriptor (cv::DMatch)."""

    def __init__(
        self,
        query_idx: int = -1,
        train_idx: int = -1,
        img_idx: int = -1,
        distance: float = FLT_MAX,
    ):
        super().__init__(query_idx, train_idx, img_idx, distance)

    def __lt__(self, other: "DMatch") -> bool:
        return self.distance < other.distance
