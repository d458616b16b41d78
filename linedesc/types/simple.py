"""
Fixed-layout aggregates.

A simple type is a ``ctypes.Structure`` whose layout matches the native one
byte for byte. It crosses the boundary as a pointer to its own memory and is
read back from native code by raw byte copy.

Declare one by mixing ``SimpleType`` in front of the raw struct and
decorating with ``opencv_type_simple``::

    @opencv_type_simple(size=8)
    class Point2f(SimpleType, Point2fC):
        pass

``size`` is checked against ``ctypes.sizeof`` when the class is defined.
"""

import ctypes
from typing import Any, Callable, TypeVar

from ..exceptions import LayoutMismatchError, StateError

__all__ = ["SimpleType", "opencv_type_simple"]

T = TypeVar("T", bound="SimpleType")


class SimpleType:
    """
    Mixin implementing all three marshalling roles for a ctypes struct.

    - receive: the raw struct by value, copied into a new instance
    - argument: the instance is its own extern container
    - send: ``POINTER(raw struct)`` to the instance memory, for both const
      and mutable access
    - owned transfer: ``into_extern()`` returns the pointer and marks the
      instance consumed; further marshalling raises ``StateError``
    """

    __slots__ = ()

    extern_receive: Any = None
    extern_send: Any = None
    extern_send_mut: Any = None

    @classmethod
    def from_extern(cls: type[T], raw: Any) -> T:
        """Copy a native value (struct or pointer to struct) into a new instance."""
        if isinstance(raw, ctypes._Pointer):
            raw = raw.contents
        return cls.from_buffer_copy(bytes(raw))  # type: ignore[attr-defined]

    @classmethod
    def into_extern_container(cls, value: Any) -> Any:
        return cls.into_extern_container_nofail(value)

    @classmethod
    def into_extern_container_nofail(cls, value: Any) -> Any:
        return value

    @property
    def consumed(self) -> bool:
        """True once ownership has been handed to native code."""
        return self.__dict__.get("_consumed", False)  # type: ignore[attr-defined]

    def _ensure_live(self) -> None:
        if self.consumed:
            raise StateError(
                f"{type(self).__name__} was moved into native code and can no longer be used"
            )

    def as_extern(self) -> Any:
        self._ensure_live()
        return ctypes.cast(ctypes.pointer(self), self.extern_send)  # type: ignore[arg-type]

    def as_extern_mut(self) -> Any:
        self._ensure_live()
        return ctypes.cast(ctypes.pointer(self), self.extern_send_mut)  # type: ignore[arg-type]

    def into_extern(self) -> Any:
        """Hand the instance memory to native code.

        The returned pointer keeps the memory alive. Use ``from_extern`` on a
        pointer returned by native code to get an owned copy back.
        """
        ptr = self.as_extern_mut()
        self.__dict__["_consumed"] = True  # type: ignore[attr-defined]
        return ptr

    def copy(self: T) -> T:
        """Return a byte-for-byte copy."""
        return type(self).from_buffer_copy(bytes(self))  # type: ignore[arg-type, attr-defined]

    def __copy__(self: T) -> T:
        return self.copy()

    def __deepcopy__(self: T, memo: dict) -> T:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return bytes(self) == bytes(other)  # type: ignore[call-overload]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={getattr(self, name)!r}"
            for name, *_ in self._fields_  # type: ignore[attr-defined]
        )
        return f"{type(self).__name__}({fields})"


def _raw_struct(cls: type) -> type:
    for klass in cls.__mro__:
        if issubclass(klass, ctypes.Structure) and "_fields_" in klass.__dict__:
            return klass
    raise TypeError(f"{cls.__name__} has no ctypes.Structure base with _fields_")


def opencv_type_simple(size: int | None = None) -> Callable[[type[T]], type[T]]:
    """Class decorator registering a fixed-layout aggregate.

    Args:
        size: Expected native ``sizeof``. When given, a different
            ``ctypes.sizeof`` raises ``LayoutMismatchError`` at definition.
    """

    def wrap(cls: type[T]) -> type[T]:
        if not issubclass(cls, SimpleType):
            raise TypeError(f"{cls.__name__} must derive from SimpleType")
        raw = _raw_struct(cls)
        actual = ctypes.sizeof(cls)
        if size is not None and actual != size:
            raise LayoutMismatchError(
                f"{cls.__name__} is {actual} bytes, native layout is {size} bytes",
                details={"type": cls.__name__, "expected": size, "actual": actual},
            )
        cls.extern_receive = raw
        cls.extern_send = ctypes.POINTER(raw)
        cls.extern_send_mut = ctypes.POINTER(raw)
        return cls

    return wrap
