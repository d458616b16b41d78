"""
cv::Mat handle.

Only the surface the line descriptor API needs is bound: construction,
shape and type queries. Pixel access is out of scope; images come from
native code.
"""

from .._logging import scoped_logger
from ..types import I32, Boxed, arg_container
from ._bindings import (
    call_mat_cols,
    call_mat_empty,
    call_mat_new,
    call_mat_new_rows_cols,
    call_mat_rows,
    call_mat_type,
)

__all__ = [
    "Mat",
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
    "make_type",
]

logger = scoped_logger("core")

CV_8U = 0
CV_8S = 1
CV_16U = 2
CV_16S = 3
CV_32S = 4
CV_32F = 5
CV_64F = 6

_CN_SHIFT = 3
_DEPTH_MASK = (1 << _CN_SHIFT) - 1


def make_type(depth: int, channels: int) -> int:
    """Combine a depth (``CV_8U``...) and a channel count (``CV_MAKETYPE``)."""
    return (depth & _DEPTH_MASK) + ((channels - 1) << _CN_SHIFT)


CV_8UC1 = make_type(CV_8U, 1)
CV_8UC3 = make_type(CV_8U, 3)
CV_32FC1 = make_type(CV_32F, 1)


class Mat(Boxed):
    """
    Owned n-dimensional array (cv::Mat).

    Example:
        >>> with Mat.new(480, 640, CV_8UC1) as image:
        ...     image.rows, image.cols
        (480, 640)
    """

    __slots__ = ()

    _native_name = "Mat"

    @classmethod
    def default(cls) -> "Mat":
        """Create an empty matrix."""
        return cls.from_extern(call_mat_new())

    @classmethod
    def new(cls, rows: int, cols: int, typ: int) -> "Mat":
        """Allocate a ``rows`` x ``cols`` matrix of element type ``typ``."""
        mat = cls.from_extern(
            call_mat_new_rows_cols(
                arg_container(I32, rows).as_extern(),
                arg_container(I32, cols).as_extern(),
                arg_container(I32, typ).as_extern(),
            )
        )
        logger.debug("Mat created", extra={"rows": rows, "cols": cols, "type_name": "Mat"})
        return mat

    @property
    def rows(self) -> int:
        return call_mat_rows(self.as_raw())

    @property
    def cols(self) -> int:
        return call_mat_cols(self.as_raw())

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def typ(self) -> int:
        """Element type code (``CV_8UC1``...)."""
        return call_mat_type(self.as_raw())

    def depth(self) -> int:
        return self.typ() & _DEPTH_MASK

    def channels(self) -> int:
        return (self.typ() >> _CN_SHIFT) + 1

    def empty(self) -> bool:
        return bool(call_mat_empty(self.as_raw()))
