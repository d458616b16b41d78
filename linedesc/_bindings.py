"""
Native library access.

Loads the shim lazily, wires up signatures from ``_native``, and converts
``Result`` structs into return values or exceptions.
"""

import ctypes
from typing import Any

from ._config import LibraryConfig
from ._logging import scoped_logger
from ._native import ByteStringC, setup_signatures
from .exceptions import LibraryNotFoundError, error_from_code

logger = scoped_logger("loader")

_lib: Any = None


def load_library(path: str | None = None) -> Any:
    """Load the native shim and make it the active library.

    Args:
        path: Explicit library path. When omitted, the location comes from
            ``LibraryConfig.from_env()``.

    Returns:
        The loaded ``ctypes.CDLL`` with signatures applied.

    Raises:
        LibraryNotFoundError: If no candidate could be loaded.
    """
    global _lib

    config = LibraryConfig(lib_path=path) if path else LibraryConfig.from_env()
    candidates = config.candidates()
    if not candidates:
        raise LibraryNotFoundError(
            f"Native library '{config.lib_name}' not found. "
            "Set LINEDESC_LIB_PATH to the shared library path.",
            details={"lib_name": config.lib_name},
        )

    errors = []
    for candidate in candidates:
        try:
            lib = ctypes.CDLL(candidate)
        except OSError as exc:
            errors.append(f"{candidate}: {exc}")
            logger.debug("Failed to load candidate", extra={"path": candidate})
            continue
        setup_signatures(lib)
        _lib = lib
        logger.debug("Loaded native library", extra={"path": candidate})
        return lib

    raise LibraryNotFoundError(
        f"Failed to load native library '{config.lib_name}': {'; '.join(errors)}",
        details={"candidates": candidates},
    )


def get_lib() -> Any:
    """Return the active native library, loading it on first use."""
    if _lib is None:
        return load_library()
    return _lib


def set_lib(lib: Any) -> None:
    """Install an already-loaded library object as the active library."""
    global _lib
    setup_signatures(lib)
    _lib = lib


def reset_lib() -> None:
    """Forget the active library; the next ``get_lib()`` loads again."""
    global _lib
    _lib = None


# =============================================================================
# Native-owned text and bytes
# =============================================================================


def read_buffer(ptr: Any, length: int) -> bytes:
    """Copy ``length`` bytes at ``ptr`` into Python bytes."""
    return ctypes.string_at(ptr, length)


def take_string(handle: Any) -> str:
    """Copy a native NUL-terminated string, then release it.

    The handle must come from a native function documented to return an
    owned string. It is invalid after this call.
    """
    raw = ctypes.string_at(handle)
    get_lib().ocvrs_string_delete(handle)
    return raw.decode("utf-8", errors="replace")


def take_bytes(handle: Any) -> bytes:
    """Copy a native byte string (``ByteStringC``), then release it."""
    view = ctypes.cast(handle, ctypes.POINTER(ByteStringC)).contents
    data = read_buffer(view.data, view.len) if view.data and view.len else b""
    get_lib().ocvrs_bytes_delete(handle)
    return data


# =============================================================================
# Result handling
# =============================================================================


def check(result: Any, details: dict[str, Any] | None = None) -> Any:
    """Unwrap a native ``Result`` struct.

    Args:
        result: ``ResultVoid`` or ``Result<T>`` returned by an entry point.
        details: Context attached to the raised exception.

    Returns:
        The ``result`` field, or None for ``ResultVoid``.

    Raises:
        NativeError: Or the subclass mapped from ``error_code``.
    """
    if result.error_code != 0:
        if result.error_msg:
            message = take_string(result.error_msg)
        else:
            message = f"OpenCV error {result.error_code}"
        raise error_from_code(result.error_code, message, details)
    return getattr(result, "result", None)
