"""
std::vector<T> handles.

``Vector`` is generic over an element marshaller: ``get`` rebuilds an owned
element with ``from_extern`` and ``push`` sends one through its extern
container. Native code copies pushed elements, so the Python value stays
owned by the caller.
"""

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

from ..types import BYTES, I8, U8, Boxed, arg_container, receive
from ._bindings import (
    call_vector_clear,
    call_vector_from_slice,
    call_vector_get,
    call_vector_len,
    call_vector_new,
    call_vector_push,
    call_vector_u8_to_bytes,
)
from .mat import Mat
from .types import DMatch

__all__ = [
    "Vector",
    "VectorOfDMatch",
    "VectorOfMat",
    "VectorOfVectorOfDMatch",
    "VectorOfi8",
    "VectorOfu8",
]

V = TypeVar("V", bound="Vector")


class Vector(Boxed):
    """
    Owned native vector.

    Subclasses set ``_native_name`` (``VectorOfDMatch`` maps to the
    ``cv_VectorOfDMatch_*`` entry points) and ``_element``, the marshaller
    of one element.
    """

    __slots__ = ()

    _element: Any = None

    @classmethod
    def new(cls: type[V]) -> V:
        """Create an empty vector."""
        return cls.from_extern(call_vector_new(cls._native_name))

    @classmethod
    def from_iterable(cls: type[V], items: Iterable[Any]) -> V:
        """Create a vector holding copies of ``items``."""
        vector = cls.new()
        try:
            for item in items:
                vector.push(item)
        except BaseException:
            vector.close()
            raise
        return vector

    def __len__(self) -> int:
        return call_vector_len(self._native_name, self.as_raw())

    def len(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def get(self, index: int) -> Any:
        """Return an owned copy of the element at ``index``.

        Raises:
            IndexError: If ``index`` is out of range.
        """
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError(f"{type(self).__name__} index {index} out of range (len {size})")
        raw = call_vector_get(self._native_name, self.as_raw(), index)
        return receive(self._element, raw)

    def __getitem__(self, index: int) -> Any:
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:
        for index in range(len(self)):
            yield self.get(index)

    def __bool__(self) -> bool:
        # Live handle is truthy even when empty
        return not self.closed

    def push(self, value: Any) -> None:
        container = arg_container(self._element, value)
        call_vector_push(self._native_name, self.as_raw(), container.as_extern())

    def extend(self, values: Iterable[Any]) -> None:
        for value in values:
            self.push(value)

    def clear(self) -> None:
        call_vector_clear(self._native_name, self.as_raw())

    def to_list(self) -> list[Any]:
        return list(self)


class VectorOfDMatch(Vector):
    """std::vector<cv::DMatch>"""

    __slots__ = ()

    _native_name = "VectorOfDMatch"
    _element = DMatch


class VectorOfMat(Vector):
    """std::vector<cv::Mat>"""

    __slots__ = ()

    _native_name = "VectorOfMat"
    _element = Mat


class VectorOfVectorOfDMatch(Vector):
    """std::vector<std::vector<cv::DMatch>> (per-query match lists)."""

    __slots__ = ()

    _native_name = "VectorOfVectorOfDMatch"
    _element = VectorOfDMatch

    def push(self, value: Any) -> None:
        if isinstance(value, VectorOfDMatch):
            super().push(value)
            return
        with VectorOfDMatch.from_iterable(value) as inner:
            super().push(inner)

    def to_lists(self) -> list[list[DMatch]]:
        lists = []
        for inner in self:
            with inner:
                lists.append(inner.to_list())
        return lists


class _ByteVector(Vector):
    __slots__ = ()

    @classmethod
    def from_slice(cls: type[V], data: bytes | bytearray | memoryview) -> V:
        """Create a vector from a byte sequence in a single native call."""
        buffer = arg_container(BYTES, data)
        return cls.from_extern(
            call_vector_from_slice(cls._native_name, buffer.as_extern(), len(buffer))
        )


class VectorOfi8(_ByteVector):
    """std::vector<char> (used as a match mask)."""

    __slots__ = ()

    _native_name = "VectorOfi8"
    _element = I8

    def to_bytes(self) -> bytes:
        return bytes(value & 0xFF for value in self)


class VectorOfu8(_ByteVector):
    """std::vector<uchar>"""

    __slots__ = ()

    _native_name = "VectorOfu8"
    _element = U8

    def to_bytes(self) -> bytes:
        """Copy the contents in one native call."""
        return receive(BYTES, call_vector_u8_to_bytes(self.as_raw()))
