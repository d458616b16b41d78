"""
Marshalling contracts for values crossing the native boundary.

Three roles cooperate, each implemented only where it applies:

``OpenCVType``
    What a native function hands back for a type and how to rebuild an owned
    Python value from it (``extern_receive`` / ``from_extern``).

``OpenCVTypeArg``
    How a Python argument becomes an *extern container*: a value that keeps
    a boundary-safe representation alive for the duration of a call. The
    strict path may raise, the ``_nofail`` path never does.

``OpenCVTypeExternContainer``
    How the container is presented to native code: read-only pointer,
    mutable pointer, or an owned transfer.

Category implementations:

- scalars: ``CopyType`` instances (``I32``, ``F64``, ``BOOL``...) below
- fixed-layout aggregates: ``SimpleType`` in ``simple.py``
- opaque native objects: ``Boxed`` in ``boxed.py``
- text: ``CString`` / ``STRING`` in ``text.py``
- byte buffers: ``ByteBuffer`` / ``BYTES`` in ``buffer.py``

Binding code is written once against these roles::

    container = arg_container(I32, octaves)
    check(lib.cv_..._setNumOfOctaves_int(handle, container.as_extern()))
"""

import ctypes
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "OpenCVType",
    "OpenCVTypeArg",
    "OpenCVTypeExternContainer",
    "CopyType",
    "ScalarContainer",
    "arg_container",
    "receive",
    "VOID",
    "BOOL",
    "I8",
    "U8",
    "I16",
    "U16",
    "I32",
    "U32",
    "I64",
    "U64",
    "F32",
    "F64",
    "ISIZE",
    "USIZE",
    "CONST_VOID_PTR",
    "MUT_VOID_PTR",
    "COPY_TYPES",
]


@runtime_checkable
class OpenCVType(Protocol):
    """Boundary-return contract.

    ``from_extern`` asserts that ``raw`` really describes a value of this
    type. Passing anything that did not come from a matching native factory
    is undefined behaviour, not an error.
    """

    extern_receive: Any

    def from_extern(self, raw: Any) -> Any: ...


@runtime_checkable
class OpenCVTypeArg(Protocol):
    """Argument contract: turn a Python value into an extern container."""

    def into_extern_container(self, value: Any) -> "OpenCVTypeExternContainer": ...

    def into_extern_container_nofail(self, value: Any) -> "OpenCVTypeExternContainer": ...


@runtime_checkable
class OpenCVTypeExternContainer(Protocol):
    """Container contract: present the held value to native code."""

    def as_extern(self) -> Any: ...

    def as_extern_mut(self) -> Any: ...

    def into_extern(self) -> Any: ...


# =============================================================================
# Copy types
# =============================================================================


class ScalarContainer:
    """Extern container of a scalar: the ctypes value itself, by copy."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    def as_extern(self) -> Any:
        return self._value

    def as_extern_mut(self) -> Any:
        return self._value

    def into_extern(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return f"ScalarContainer({self._value!r})"


class CopyType:
    """
    Marshaller for a plain-old-data scalar.

    The value crosses the boundary unchanged: receive, send and mutable send
    all use ``ctype`` itself. Conversions from Python apply ctypes' own
    coercion (e.g. ``I8`` wraps 200 to -56), exactly what a by-value native
    copy would do.

    Attributes
    ----------
    name : str
        Short name used in reprs and errors.
    ctype : type | None
        The ctypes scalar, or None for ``VOID``.
    """

    __slots__ = ("name", "ctype")

    def __init__(self, name: str, ctype: Any):
        self.name = name
        self.ctype = ctype

    @property
    def extern_receive(self) -> Any:
        return self.ctype

    @property
    def extern_send(self) -> Any:
        return self.ctype

    @property
    def extern_send_mut(self) -> Any:
        return self.ctype

    def from_extern(self, raw: Any) -> Any:
        if self.ctype is None:
            return None
        if isinstance(raw, ctypes._SimpleCData):
            return raw.value
        return raw

    def into_extern_container(self, value: Any) -> ScalarContainer:
        return self.into_extern_container_nofail(value)

    def into_extern_container_nofail(self, value: Any) -> ScalarContainer:
        if self.ctype is None:
            return ScalarContainer(None)
        if isinstance(value, self.ctype):
            return ScalarContainer(value)
        return ScalarContainer(self.ctype(value))

    def __repr__(self) -> str:
        return f"CopyType({self.name})"


VOID = CopyType("void", None)
BOOL = CopyType("bool", ctypes.c_bool)
I8 = CopyType("i8", ctypes.c_int8)
U8 = CopyType("u8", ctypes.c_uint8)
I16 = CopyType("i16", ctypes.c_int16)
U16 = CopyType("u16", ctypes.c_uint16)
I32 = CopyType("i32", ctypes.c_int32)
U32 = CopyType("u32", ctypes.c_uint32)
I64 = CopyType("i64", ctypes.c_int64)
U64 = CopyType("u64", ctypes.c_uint64)
F32 = CopyType("f32", ctypes.c_float)
F64 = CopyType("f64", ctypes.c_double)
ISIZE = CopyType("isize", ctypes.c_ssize_t)
USIZE = CopyType("usize", ctypes.c_size_t)
CONST_VOID_PTR = CopyType("*const c_void", ctypes.c_void_p)
MUT_VOID_PTR = CopyType("*mut c_void", ctypes.c_void_p)

COPY_TYPES = (
    VOID,
    BOOL,
    I8,
    U8,
    I16,
    U16,
    I32,
    U32,
    I64,
    U64,
    F32,
    F64,
    ISIZE,
    USIZE,
    CONST_VOID_PTR,
    MUT_VOID_PTR,
)


# =============================================================================
# Generic helpers
# =============================================================================


def arg_container(marshaller: Any, value: Any, *, strict: bool = True) -> Any:
    """Build the extern container for ``value`` using ``marshaller``.

    ``strict=False`` selects the infallible path, for contexts such as
    cleanup where raising is not acceptable.
    """
    if strict:
        return marshaller.into_extern_container(value)
    return marshaller.into_extern_container_nofail(value)


def receive(marshaller: Any, raw: Any) -> Any:
    """Rebuild an owned value from what a native function returned."""
    return marshaller.from_extern(raw)
