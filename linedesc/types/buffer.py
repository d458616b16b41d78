"""
Byte buffer marshalling.

A byte sequence crosses the boundary as a pointer plus an implicit length
(``len(container)``), borrowed for one call. ``bytearray`` and writable
``memoryview`` arguments are shared with native code, so native writes
through ``as_extern_mut()`` land in the caller's object. Immutable ``bytes``
are copied into a private buffer first.
"""

import ctypes
from typing import Any

from .._bindings import take_bytes
from ..exceptions import OwnershipTransferError

__all__ = ["ByteBuffer", "BYTES", "BytesType", "receive_bytes"]


class ByteBuffer:
    """Extern container for a byte sequence."""

    __slots__ = ("_array", "_length", "_source")

    extern_send = ctypes.POINTER(ctypes.c_uint8)
    extern_send_mut = ctypes.POINTER(ctypes.c_uint8)

    def __init__(self, data: bytes | bytearray | memoryview):
        if isinstance(data, memoryview) and data.readonly:
            data = data.tobytes()
        length = data.nbytes if isinstance(data, memoryview) else len(data)
        array_type = ctypes.c_uint8 * length
        if isinstance(data, (bytearray, memoryview)):
            # Shares memory; holding the export also blocks resizing during the call
            self._array = array_type.from_buffer(data)
        else:
            self._array = array_type.from_buffer_copy(data)
        self._length = length
        self._source = data

    @classmethod
    def new(cls, data: bytes | bytearray | memoryview) -> "ByteBuffer":
        return cls(data)

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self._array)

    def __repr__(self) -> str:
        return f"ByteBuffer(len={self._length})"

    def as_extern(self) -> Any:
        return ctypes.cast(self._array, ctypes.POINTER(ctypes.c_uint8))

    def as_extern_mut(self) -> Any:
        return ctypes.cast(self._array, ctypes.POINTER(ctypes.c_uint8))

    def into_extern(self) -> Any:
        raise OwnershipTransferError(
            "ByteBuffer.into_extern() is intentionally unimplemented: native code never "
            "takes ownership of this buffer, and handing it over would leak it"
        )

    def release(self) -> None:
        """Drop the memory export so a shared ``bytearray`` can be resized again."""
        self._array = (ctypes.c_uint8 * 0)()
        self._length = 0
        self._source = b""


def receive_bytes(handle: Any) -> bytes:
    """Copy a native byte string into ``bytes`` and release the native copy."""
    if isinstance(handle, ctypes.c_void_p):
        handle = handle.value
    if not handle:
        return b""
    return take_bytes(handle)


class BytesType:
    """Marshaller for byte sequences (the ``Vec<u8>`` category)."""

    __slots__ = ()

    extern_receive = ctypes.c_void_p

    def from_extern(self, raw: Any) -> bytes:
        return receive_bytes(raw)

    def into_extern_container(self, value: bytes | bytearray | memoryview) -> ByteBuffer:
        return ByteBuffer.new(value)

    def into_extern_container_nofail(self, value: bytes | bytearray | memoryview) -> ByteBuffer:
        return ByteBuffer.new(value)

    def __repr__(self) -> str:
        return "BytesType()"


BYTES = BytesType()
