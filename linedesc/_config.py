"""
Native library configuration.

Environment::

    LINEDESC_LIB_PATH=/path/to/libocvrs_line_descriptor.so  (explicit library)
    LINEDESC_LIB_NAME=ocvrs_line_descriptor                 (base name to search)
"""

from __future__ import annotations

import ctypes.util
import os
import platform
from dataclasses import dataclass
from pathlib import Path

__all__ = ["DEFAULT_LIB_NAME", "LibraryConfig", "platform_lib_filename"]

DEFAULT_LIB_NAME = "ocvrs_line_descriptor"

_PACKAGE_DIR = Path(__file__).resolve().parent


def platform_lib_filename(name: str) -> str:
    """Get platform-specific shared library file name for ``name``."""
    system = platform.system()
    if system == "Darwin":
        return f"lib{name}.dylib"
    elif system == "Windows":
        return f"{name}.dll"
    else:
        return f"lib{name}.so"


@dataclass(frozen=True)
class LibraryConfig:
    """
    Where to find the native shim.

    Attributes
    ----------
    lib_path : str | None
        Explicit path to the shared library. When set, no search happens.
    lib_name : str
        Base library name used for the search (without prefix/suffix).
    """

    lib_path: str | None = None
    lib_name: str = DEFAULT_LIB_NAME

    @classmethod
    def from_env(cls) -> LibraryConfig:
        """Build configuration from ``LINEDESC_*`` environment variables."""
        return cls(
            lib_path=os.environ.get("LINEDESC_LIB_PATH") or None,
            lib_name=os.environ.get("LINEDESC_LIB_NAME") or DEFAULT_LIB_NAME,
        )

    def candidates(self) -> list[str]:
        """Return library paths to try, in order."""
        if self.lib_path:
            return [self.lib_path]

        paths = []
        bundled = _PACKAGE_DIR / platform_lib_filename(self.lib_name)
        if bundled.exists():
            paths.append(str(bundled))
        found = ctypes.util.find_library(self.lib_name)
        if found:
            paths.append(found)
        return paths
