"""
linedesc exceptions.

This module defines the exception hierarchy for linedesc:

    LineDescError (base)
    ├── EncodingError - Text cannot be represented as a C string
    ├── OwnershipTransferError - Owned transfer of a borrow-only container
    ├── NativeError - OpenCV reported an error through a Result struct
    │   ├── BadArgumentError - Invalid argument (StsBadArg, StsBadSize, ...)
    │   ├── OutOfRangeError - Argument outside its valid range
    │   ├── NativeAssertionError - CV_Assert failed inside OpenCV
    │   ├── NotImplementedNativeError - Feature not built into OpenCV
    │   └── NativeMemoryError - OpenCV ran out of memory
    ├── LibraryNotFoundError - Native shim could not be loaded
    ├── LayoutMismatchError - Aggregate layout differs from the native one
    └── StateError - Released handle or consumed value used again

Usage:
    try:
        detector.detect(image, keylines, scale=2, num_octaves=1)
    except linedesc.BadArgumentError as e:
        print(f"OpenCV rejected the arguments: {e}")
    except linedesc.NativeError as e:
        print(f"Error {e.code} ({e.original_code}): {e}")
"""

from typing import Any

__all__ = [
    "LineDescError",
    "EncodingError",
    "OwnershipTransferError",
    "NativeError",
    "BadArgumentError",
    "OutOfRangeError",
    "NativeAssertionError",
    "NotImplementedNativeError",
    "NativeMemoryError",
    "LibraryNotFoundError",
    "LayoutMismatchError",
    "StateError",
    "ERROR_CODE_MAP",
    "error_from_code",
]


class LineDescError(Exception):
    """
    Base exception for all linedesc errors.

    Attributes
    ----------
    message : str
        Human-readable error description.
    code : str
        Stable, string-based error code (e.g., "NATIVE_BAD_ARG").
        Use this for programmatic error handling.
    details : dict[str, Any]
        Structured context (e.g., {"operation": "detect"}).
    original_code : int | None
        The native integer code (``cv::Error::Code``) when one exists.
    """

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.original_code = original_code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, code={self.code!r})"


# =============================================================================
# Marshalling Errors
# =============================================================================


class EncodingError(LineDescError, ValueError):
    """
    Text cannot become a null-terminated UTF-8 buffer.

    Raised by the strict conversion path (``CString.new``) when the text has
    an embedded NUL byte (code ``ENCODING_NUL_BYTE``) or characters with no
    UTF-8 encoding such as lone surrogates (code ``ENCODING_INVALID_UTF8``).
    Use the lossy path (``CString.new_nofail``) when truncation is acceptable.

    Attributes
    ----------
    nul_position : int
        Byte offset of the first NUL in the encoded text, or -1.
    """

    def __init__(
        self,
        message: str,
        code: str = "ENCODING_NUL_BYTE",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
        nul_position: int = -1,
    ):
        super().__init__(message, code, details, original_code)
        self.nul_position = nul_position


class OwnershipTransferError(LineDescError, NotImplementedError):
    """
    Owned transfer requested from a borrow-only container.

    ``CString`` and ``ByteBuffer`` only lend their memory for the duration of
    a call. No binding hands them to native code for keeps, so
    ``into_extern()`` is intentionally unimplemented for them. Seeing this
    error means a binding is wired incorrectly; it is not meant to be caught.
    """

    def __init__(
        self,
        message: str,
        code: str = "OWNERSHIP_TRANSFER_UNSUPPORTED",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


# =============================================================================
# Native Errors
# =============================================================================


class NativeError(LineDescError, RuntimeError):
    """
    Error reported by OpenCV.

    Raised when a native entry point returns a Result with a non-zero
    ``error_code``. ``original_code`` holds the ``cv::Error::Code`` value and
    the message is the text of the ``cv::Exception``.
    """

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


class BadArgumentError(NativeError, ValueError):
    """OpenCV rejected an argument (bad size, flag, mask, null pointer...)."""

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_BAD_ARG",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if original_code is None:
            original_code = -5
        super().__init__(message, code, details, original_code)


class OutOfRangeError(NativeError, IndexError):
    """An argument was outside its valid range (``StsOutOfRange``)."""

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_OUT_OF_RANGE",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if original_code is None:
            original_code = -211
        super().__init__(message, code, details, original_code)


class NativeAssertionError(NativeError):
    """
    A ``CV_Assert`` failed inside OpenCV (``StsAssert``).

    Usually means the inputs violate a precondition of the algorithm, e.g.
    an empty image passed to ``detect`` or descriptors of the wrong type
    passed to a matcher.
    """

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_ASSERTION",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if original_code is None:
            original_code = -215
        super().__init__(message, code, details, original_code)


class NotImplementedNativeError(NativeError, NotImplementedError):
    """The requested feature is not available in this OpenCV build."""

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_NOT_IMPLEMENTED",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if original_code is None:
            original_code = -213
        super().__init__(message, code, details, original_code)


class NativeMemoryError(NativeError, MemoryError):
    """OpenCV failed to allocate memory (``StsNoMem``)."""

    def __init__(
        self,
        message: str,
        code: str = "NATIVE_NO_MEMORY",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        if original_code is None:
            original_code = -4
        super().__init__(message, code, details, original_code)


# =============================================================================
# Library and Layout Errors
# =============================================================================


class LibraryNotFoundError(LineDescError, OSError):
    """
    The native shim library could not be located or loaded.

    Set ``LINEDESC_LIB_PATH`` to the full path of the shared library, or
    install it next to the package.
    """

    def __init__(
        self,
        message: str,
        code: str = "LIBRARY_NOT_FOUND",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


class LayoutMismatchError(LineDescError, TypeError):
    """A fixed-layout aggregate does not have the byte size native code expects."""

    def __init__(
        self,
        message: str,
        code: str = "LAYOUT_MISMATCH",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


# =============================================================================
# State Errors
# =============================================================================


class StateError(LineDescError, RuntimeError):
    """
    Invalid object state error.

    Raised when an operation is attempted on an object in an invalid state:
    - Using a closed/released native handle
    - Marshalling an aggregate whose ownership was already transferred
    """

    def __init__(
        self,
        message: str,
        code: str = "STATE_ERROR",
        details: dict[str, Any] | None = None,
        original_code: int | None = None,
    ):
        super().__init__(message, code, details, original_code)


# =============================================================================
# cv::Error::Code mapping
# =============================================================================

ERROR_CODE_MAP: dict[int, type[NativeError]] = {
    -4: NativeMemoryError,  # StsNoMem
    -5: BadArgumentError,  # StsBadArg
    -10: BadArgumentError,  # BadImageSize
    -15: BadArgumentError,  # BadNumChannels
    -17: BadArgumentError,  # BadDepth
    -27: BadArgumentError,  # StsNullPtr
    -201: BadArgumentError,  # StsBadSize
    -205: BadArgumentError,  # StsUnmatchedFormats
    -206: BadArgumentError,  # StsBadFlag
    -207: BadArgumentError,  # StsBadPoint
    -208: BadArgumentError,  # StsBadMask
    -209: BadArgumentError,  # StsUnmatchedSizes
    -210: BadArgumentError,  # StsUnsupportedFormat
    -211: OutOfRangeError,  # StsOutOfRange
    -213: NotImplementedNativeError,  # StsNotImplemented
    -215: NativeAssertionError,  # StsAssert
}


def error_from_code(
    error_code: int, message: str, details: dict[str, Any] | None = None
) -> NativeError:
    """Build the exception matching a ``cv::Error::Code``.

    Unknown codes map to the generic ``NativeError``.
    """
    cls = ERROR_CODE_MAP.get(error_code, NativeError)
    if cls is NativeError:
        return NativeError(message, details=details, original_code=error_code)
    return cls(message, details=details, original_code=error_code)
