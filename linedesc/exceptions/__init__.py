"""
linedesc exceptions.

This module defines the exception hierarchy for linedesc:

    LineDescError (base)
    ├── EncodingError - Text cannot be represented as a C string
    ├── OwnershipTransferError - Owned transfer of a borrow-only container
    ├── NativeError - OpenCV reported an error through a Result struct
    │   ├── BadArgumentError
    │   ├── OutOfRangeError
    │   ├── NativeAssertionError
    │   ├── NotImplementedNativeError
    │   └── NativeMemoryError
    ├── LibraryNotFoundError - Native shim could not be loaded
    ├── LayoutMismatchError - Aggregate layout differs from the native one
    └── StateError - Released handle or consumed value used again
"""

from .exceptions import (
    ERROR_CODE_MAP,
    BadArgumentError,
    EncodingError,
    LayoutMismatchError,
    LibraryNotFoundError,
    LineDescError,
    NativeAssertionError,
    NativeError,
    NativeMemoryError,
    NotImplementedNativeError,
    OutOfRangeError,
    OwnershipTransferError,
    StateError,
    error_from_code,
)

__all__ = [
    # Base
    "LineDescError",
    # Marshalling
    "EncodingError",
    "OwnershipTransferError",
    # Native
    "NativeError",
    "BadArgumentError",
    "OutOfRangeError",
    "NativeAssertionError",
    "NotImplementedNativeError",
    "NativeMemoryError",
    # Library / layout
    "LibraryNotFoundError",
    "LayoutMismatchError",
    # State
    "StateError",
    # Mapping
    "ERROR_CODE_MAP",
    "error_from_code",
]
