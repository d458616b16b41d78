"""
Opaque native objects.

A boxed type owns exactly one native handle and releases it exactly once
through its native destructor. Handles come from native factories only; the
Python side never allocates them.

Subclasses name their destructor::

    class BinaryDescriptor(Boxed):
        _native_name = "BinaryDescriptor"   # -> cv_BinaryDescriptor_delete

``ptr_of(cls)`` returns the ``cv::Ptr<T>`` flavour of a boxed class. It
behaves like ``cls`` but owns the smart pointer, reaches the object through
``cv_PtrOf<Name>_get_inner_ptr``, and releases with ``cv_PtrOf<Name>_delete``.
"""

import ctypes
from typing import Any, TypeVar

from .._bindings import get_lib
from .._logging import TRACE, scoped_logger
from ..exceptions import StateError

__all__ = ["Boxed", "ptr_of"]

logger = scoped_logger("marshal")

B = TypeVar("B", bound="Boxed")


class Boxed:
    """
    Owning wrapper around one opaque native handle.

    Release happens on ``close()``, on ``with`` exit, or when the wrapper is
    garbage collected, whichever comes first. ``close()`` is idempotent.
    Wrappers cannot be copied or pickled.

    Thread safety: a wrapper may be handed to another thread, but no locking
    is provided. Concurrent use of one native object is the caller's concern.
    """

    __slots__ = ("_ptr", "_deleter", "__weakref__")

    _native_name: str = ""

    extern_receive = ctypes.c_void_p
    extern_send = ctypes.c_void_p
    extern_send_mut = ctypes.c_void_p

    def __init__(self, ptr: int):
        if not ptr:
            raise StateError(f"{type(self).__name__} received a null native handle")
        # Bound to the library that produced the handle
        self._deleter = getattr(get_lib(), self._delete_fn_name())
        self._ptr: int | None = ptr

    # -------------------------------------------------------------------------
    # Receive
    # -------------------------------------------------------------------------

    @classmethod
    def from_extern(cls: type[B], raw: Any) -> B:
        """Take ownership of a handle returned by a matching native factory."""
        if isinstance(raw, ctypes.c_void_p):
            raw = raw.value
        instance = cls.__new__(cls)
        Boxed.__init__(instance, raw)
        return instance

    # -------------------------------------------------------------------------
    # Argument
    # -------------------------------------------------------------------------

    @classmethod
    def into_extern_container(cls, value: Any) -> Any:
        return cls.into_extern_container_nofail(value)

    @classmethod
    def into_extern_container_nofail(cls, value: Any) -> Any:
        return value

    # -------------------------------------------------------------------------
    # Send
    # -------------------------------------------------------------------------

    @property
    def _handle(self) -> int:
        """Get the owned handle, raising if released."""
        if self._ptr is None:
            raise StateError(f"{type(self).__name__} is closed")
        return self._ptr

    def as_raw(self) -> int:
        """Handle used for native calls on this object."""
        return self._handle

    def as_extern(self) -> ctypes.c_void_p:
        return ctypes.c_void_p(self.as_raw())

    def as_extern_mut(self) -> ctypes.c_void_p:
        return ctypes.c_void_p(self.as_raw())

    def into_extern(self) -> ctypes.c_void_p:
        """Give the handle away; native code becomes responsible for releasing it."""
        handle = self._handle
        self._ptr = None
        return ctypes.c_void_p(handle)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    @classmethod
    def _delete_fn_name(cls) -> str:
        return f"cv_{cls._native_name}_delete"

    def _free_handle(self) -> None:
        ptr = getattr(self, "_ptr", None)
        if ptr:
            self._deleter(ptr)
            self._ptr = None
            if logger.isEnabledFor(TRACE):
                logger.trace(
                    "Handle released", extra={"type_name": type(self).__name__, "handle": ptr}
                )

    @property
    def closed(self) -> bool:
        return getattr(self, "_ptr", None) is None

    def close(self) -> None:
        """
        Release the native object.

        Safe to call multiple times (idempotent).
        """
        self._free_handle()

    def __enter__(self: B) -> B:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def __del__(self):
        try:
            self._free_handle()
        except Exception:
            pass

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} owns a native handle and cannot be copied")

    def __deepcopy__(self, memo: dict):
        raise TypeError(f"{type(self).__name__} owns a native handle and cannot be copied")

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} owns a native handle and cannot be pickled")

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"0x{self._ptr:x}"
        return f"<{type(self).__name__} {state}>"


_PTR_CLASSES: dict[type, type] = {}


def ptr_of(cls: type[B]) -> type[B]:
    """Return the ``cv::Ptr<cls>`` wrapper class for a boxed class."""
    ptr_cls = _PTR_CLASSES.get(cls)
    if ptr_cls is not None:
        return ptr_cls

    name = cls._native_name

    def as_raw(self: Any) -> int:
        return getattr(get_lib(), f"cv_PtrOf{name}_get_inner_ptr")(self._handle)

    def _delete_fn_name(klass: Any) -> str:
        return f"cv_PtrOf{name}_delete"

    ptr_cls = type(
        f"PtrOf{name}",
        (cls,),
        {
            "__slots__": (),
            "__doc__": f"Smart pointer (cv::Ptr) to {cls.__name__}.",
            "as_raw": as_raw,
            "_delete_fn_name": classmethod(_delete_fn_name),
        },
    )
    _PTR_CLASSES[cls] = ptr_cls
    return ptr_cls
