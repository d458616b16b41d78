"""
Text marshalling.

Python ``str`` goes out as an intermediate null-terminated buffer
(``CString``) built right before the call. Text coming back is a native
string handle: it is copied into a ``str`` and the native copy is released.
"""

import ctypes
from typing import Any

from .._bindings import take_string
from ..exceptions import EncodingError, OwnershipTransferError

__all__ = ["CString", "STRING", "StringType", "cstring_new_nofail", "receive_string"]

_TRANSFER_MESSAGE = (
    "{name}.into_extern() is intentionally unimplemented: native code never takes "
    "ownership of this buffer, and handing it over would leak it"
)


def _to_bytes(text: str | bytes | bytearray, errors: str = "strict") -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8", errors)
    return bytes(text)


class CString:
    """
    Owned NUL-terminated byte buffer, valid for the duration of one call.

    Build it with ``CString.new`` (raises on embedded NUL) or
    ``CString.new_nofail`` (truncates at the first NUL). The buffer never
    contains a NUL before its terminator.
    """

    __slots__ = ("_data", "_buffer")

    extern_send = ctypes.c_char_p
    extern_send_mut = ctypes.POINTER(ctypes.c_char)

    def __init__(self, data: bytes):
        # Callers go through new()/new_nofail(); data is already NUL-free
        self._data = data
        self._buffer = ctypes.create_string_buffer(data, len(data) + 1)

    @classmethod
    def new(cls, text: str | bytes | bytearray) -> "CString":
        """Strict conversion.

        Raises:
            EncodingError: If the text contains a NUL byte or does not encode
                as UTF-8 (lone surrogates).
        """
        try:
            data = _to_bytes(text)
        except UnicodeEncodeError as exc:
            raise EncodingError(
                f"text is not valid UTF-8 at position: {exc.start} ({exc.reason})",
                code="ENCODING_INVALID_UTF8",
                details={"position": exc.start, "reason": exc.reason},
            ) from exc
        nul = data.find(b"\x00")
        if nul != -1:
            raise EncodingError(
                f"nul byte found in provided data at position: {nul}",
                details={"nul_position": nul, "length": len(data)},
                nul_position=nul,
            )
        return cls(data)

    @classmethod
    def new_nofail(cls, text: str | bytes | bytearray) -> "CString":
        """Lossy conversion: keeps the bytes before the first NUL.

        Characters that do not encode as UTF-8 become ``?``; this never raises.
        """
        data = _to_bytes(text, errors="replace")
        nul = data.find(b"\x00")
        if nul != -1:
            data = data[:nul]
        return cls(data)

    @property
    def data(self) -> bytes:
        """Bytes without the terminator."""
        return self._data

    def to_str(self) -> str:
        return self._data.decode("utf-8", errors="replace")

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CString):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"CString({self._data!r})"

    # -------------------------------------------------------------------------
    # Extern container
    # -------------------------------------------------------------------------

    def as_extern(self) -> ctypes.c_char_p:
        return ctypes.cast(self._buffer, ctypes.c_char_p)

    def as_extern_mut(self) -> Any:
        return ctypes.cast(self._buffer, ctypes.POINTER(ctypes.c_char))

    def into_extern(self) -> Any:
        raise OwnershipTransferError(_TRANSFER_MESSAGE.format(name=type(self).__name__))


def cstring_new_nofail(text: str | bytes | bytearray) -> CString:
    """Build a ``CString``, truncating at the first NUL instead of failing."""
    return CString.new_nofail(text)


def receive_string(handle: Any) -> str:
    """Copy a native string handle into ``str`` and release the native copy."""
    if isinstance(handle, ctypes.c_void_p):
        handle = handle.value
    if not handle:
        return ""
    return take_string(handle)


class StringType:
    """
    Marshaller for text.

    The argument side accepts ``str`` (and ``bytes``); the container is a
    ``CString``. The receive side is a native string handle.
    """

    __slots__ = ()

    extern_receive = ctypes.c_void_p

    def from_extern(self, raw: Any) -> str:
        return receive_string(raw)

    def into_extern_container(self, value: str | bytes | bytearray) -> CString:
        return CString.new(value)

    def into_extern_container_nofail(self, value: str | bytes | bytearray) -> CString:
        return CString.new_nofail(value)

    def __repr__(self) -> str:
        return "StringType()"


STRING = StringType()
