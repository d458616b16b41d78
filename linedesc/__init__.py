"""
linedesc - ctypes bindings for OpenCV's line_descriptor module.

The package talks to a thin C shim around OpenCV (``ocvrs_line_descriptor``)
through ctypes. No dependencies beyond the standard library.

Quick Start
-----------

    >>> import linedesc
    >>> from linedesc import BinaryDescriptor, Mat, VectorOfKeyLine, CV_8UC1
    >>>
    >>> image = Mat.new(480, 640, CV_8UC1)
    >>> with BinaryDescriptor.create_binary_descriptor() as bd:
    ...     lines = VectorOfKeyLine.new()
    ...     bd.detect(image, lines)
    ...     for line in lines:
    ...         print(line.get_start_point(), line.get_end_point())

Locating the native library
---------------------------

The shim is loaded on first use. Set ``LINEDESC_LIB_PATH`` to its path, or
``LINEDESC_LIB_NAME`` to search for another base name. ``load_library(path)``
loads explicitly.

Resource handling
-----------------

Every native object (``Mat``, ``BinaryDescriptor``, vectors...) is owned by
exactly one Python wrapper. Use ``with`` or call ``close()`` for
deterministic release; garbage collection releases what is left.

Marshalling layer
-----------------

``linedesc.types`` holds the conversion contracts used by every binding:
scalar copy types, fixed-layout aggregates, opaque handles, text and byte
buffers. See that package for writing new bindings.
"""

from linedesc._bindings import get_lib as get_lib
from linedesc._bindings import load_library as load_library
from linedesc._logging import setup_logging as setup_logging
from linedesc._version import __version__ as __version__

# Core
from linedesc.core import (
    CV_8UC1,
    CV_8UC3,
    CV_32FC1,
    FLT_MAX,
    DMatch,
    FileNode,
    FileStorage,
    Mat,
    Point2f,
    Scalar,
    VectorOfDMatch,
    VectorOfi8,
    VectorOfMat,
    VectorOfu8,
    VectorOfVectorOfDMatch,
)

# Exceptions (commonly-used exceptions at root; all via linedesc.exceptions)
from linedesc.exceptions import (
    EncodingError,
    LibraryNotFoundError,
    LineDescError,
    NativeError,
    OwnershipTransferError,
    StateError,
)

# Line descriptor
from linedesc.line_descriptor import (
    MLN10,
    RELATIVE_ERROR_FACTOR,
    BinaryDescriptor,
    BinaryDescriptorMatcher,
    BinaryDescriptorParams,
    DrawLinesMatchesFlags,
    KeyLine,
    LSDDetector,
    LSDParam,
    VectorOfKeyLine,
    VectorOfVectorOfKeyLine,
    draw_keylines,
    draw_line_matches,
)

# Text
from linedesc.types import CString


def set_log_level(level: str) -> None:
    """Set logging verbosity level.

    Args:
        level: One of 'trace', 'debug', 'info', 'warn', 'error', 'off'.

    Example:
        >>> import linedesc
        >>> linedesc.set_log_level('debug')  # Trace handle creation
    """
    setup_logging(level)


__all__ = [
    # Line descriptor
    "BinaryDescriptor",
    "BinaryDescriptorParams",
    "BinaryDescriptorMatcher",
    "LSDDetector",
    "LSDParam",
    "KeyLine",
    "VectorOfKeyLine",
    "VectorOfVectorOfKeyLine",
    "DrawLinesMatchesFlags",
    "draw_keylines",
    "draw_line_matches",
    "MLN10",
    "RELATIVE_ERROR_FACTOR",
    # Core
    "Mat",
    "FileNode",
    "FileStorage",
    "Point2f",
    "Scalar",
    "DMatch",
    "FLT_MAX",
    "VectorOfDMatch",
    "VectorOfVectorOfDMatch",
    "VectorOfMat",
    "VectorOfi8",
    "VectorOfu8",
    "CV_8UC1",
    "CV_8UC3",
    "CV_32FC1",
    "CString",
    # Library
    "get_lib",
    "load_library",
    # Logging
    "setup_logging",
    "set_log_level",
    # Exceptions
    "LineDescError",
    "EncodingError",
    "OwnershipTransferError",
    "NativeError",
    "LibraryNotFoundError",
    "StateError",
]
