"""
XML/YAML/JSON persistence handles (cv::FileStorage, cv::FileNode).

Descriptor objects serialise their parameters through these; see
``BinaryDescriptor.write`` and ``BinaryDescriptor.read``.
"""

from ..types import I32, STRING, Boxed, arg_container, receive
from ._bindings import (
    call_file_node_empty,
    call_file_node_name,
    call_file_node_new,
    call_file_storage_first_top_level_node,
    call_file_storage_is_opened,
    call_file_storage_new,
    call_file_storage_node,
    call_file_storage_open,
    call_file_storage_release,
    call_file_storage_release_and_get_string,
)

__all__ = ["FileNode", "FileStorage"]


class FileNode(Boxed):
    """Node of a file storage tree (cv::FileNode)."""

    __slots__ = ()

    _native_name = "FileNode"

    @classmethod
    def default(cls) -> "FileNode":
        return cls.from_extern(call_file_node_new())

    def empty(self) -> bool:
        return bool(call_file_node_empty(self.as_raw()))

    def name(self) -> str:
        """Node name; empty for unnamed nodes."""
        return receive(STRING, call_file_node_name(self.as_raw()))


class FileStorage(Boxed):
    """
    Serialisation target or source (cv::FileStorage).

    ``release()`` closes the storage on the native side; ``close()`` frees
    the handle itself. Writing to memory::

        fs = FileStorage.open("out.yml", FileStorage.WRITE | FileStorage.MEMORY)
        descriptor.write(fs)
        text = fs.release_and_get_string()
    """

    __slots__ = ()

    _native_name = "FileStorage"

    READ = 0
    WRITE = 1
    APPEND = 2
    MEMORY = 4
    FORMAT_MASK = 7 << 3
    FORMAT_AUTO = 0
    FORMAT_XML = 1 << 3
    FORMAT_YAML = 2 << 3
    FORMAT_JSON = 3 << 3
    BASE64 = 64
    WRITE_BASE64 = BASE64 | WRITE

    @classmethod
    def default(cls) -> "FileStorage":
        """Create a storage that is not opened."""
        return cls.from_extern(call_file_storage_new())

    @classmethod
    def open(cls, source: str, flags: int, encoding: str = "") -> "FileStorage":
        """Open ``source`` (a path, or the text itself with ``MEMORY``).

        Raises:
            EncodingError: If ``source`` or ``encoding`` contains a NUL byte.
        """
        filename = arg_container(STRING, source)
        encoding_container = arg_container(STRING, encoding)
        return cls.from_extern(
            call_file_storage_open(
                filename.as_extern(),
                arg_container(I32, flags).as_extern(),
                encoding_container.as_extern(),
                source if not flags & cls.MEMORY else "<memory>",
            )
        )

    def is_opened(self) -> bool:
        return bool(call_file_storage_is_opened(self.as_raw()))

    def release(self) -> None:
        """Flush and close the storage. The handle stays valid."""
        call_file_storage_release(self.as_raw())

    def release_and_get_string(self) -> str:
        """Close the storage and return the serialised text (``MEMORY`` mode)."""
        return receive(STRING, call_file_storage_release_and_get_string(self.as_raw()))

    def get_first_top_level_node(self) -> FileNode:
        return FileNode.from_extern(call_file_storage_first_top_level_node(self.as_raw()))

    def __getitem__(self, nodename: str) -> FileNode:
        container = arg_container(STRING, nodename)
        return FileNode.from_extern(
            call_file_storage_node(self.as_raw(), container.as_extern(), nodename)
        )
