"""
Tests for byte buffer marshalling (ByteBuffer, BYTES).
"""

import ctypes

import pytest


class TestByteBuffer:
    """Tests for ByteBuffer."""

    def test_bytes_copied(self):
        """Immutable bytes are copied into a private buffer."""
        from linedesc.types import ByteBuffer

        data = b"\x01\x02\x03"
        buf = ByteBuffer.new(data)
        buf.as_extern_mut()[0] = 0x7F

        assert data == b"\x01\x02\x03"
        assert bytes(buf) == b"\x7f\x02\x03"
        assert len(buf) == 3

    def test_bytearray_shared(self):
        """Native writes through a bytearray container reach the caller."""
        from linedesc.types import ByteBuffer

        data = bytearray(b"\x00\x00\x00\x00")
        buf = ByteBuffer.new(data)
        buf.as_extern_mut()[2] = 9

        assert data == bytearray(b"\x00\x00\x09\x00")

    def test_writable_memoryview_shared(self):
        """Writable memoryviews are shared too."""
        from linedesc.types import ByteBuffer

        data = bytearray(b"ab")
        buf = ByteBuffer.new(memoryview(data))
        buf.as_extern_mut()[0] = ord("z")

        assert data == bytearray(b"zb")

    def test_readonly_memoryview_copied(self):
        """Read-only memoryviews are copied."""
        from linedesc.types import ByteBuffer

        buf = ByteBuffer.new(memoryview(b"abc"))

        assert bytes(buf) == b"abc"

    def test_pointer_type(self):
        """The container is a uint8 pointer."""
        from linedesc.types import ByteBuffer

        ptr = ByteBuffer.new(b"abc").as_extern()

        assert isinstance(ptr, ctypes.POINTER(ctypes.c_uint8))
        assert ctypes.string_at(ptr, 3) == b"abc"

    def test_release_allows_resize(self):
        """release() drops the export so the bytearray can grow again."""
        from linedesc.types import ByteBuffer

        data = bytearray(b"abc")
        buf = ByteBuffer.new(data)

        with pytest.raises(BufferError):
            data.append(1)

        buf.release()
        data.append(1)

        assert len(buf) == 0
        assert data == bytearray(b"abc\x01")

    def test_into_extern_unsupported(self):
        """Owned transfer is refused."""
        from linedesc.exceptions import OwnershipTransferError
        from linedesc.types import ByteBuffer

        with pytest.raises(OwnershipTransferError):
            ByteBuffer.new(b"x").into_extern()


class TestReceiveBytes:
    """Tests for the receive side of BYTES."""

    def test_null_handle(self):
        """A null handle reads as b''."""
        from linedesc.types import BYTES, receive

        assert receive(BYTES, None) == b""

    def test_handle_copied_and_released(self, fake_lib):
        """A native byte string is copied then freed."""
        from linedesc.types import BYTES, receive

        handle = fake_lib.new_bytes(b"\xde\xad")

        assert receive(BYTES, ctypes.c_void_p(handle)) == b"\xde\xad"
        assert fake_lib.freed_bytes == [handle]

    def test_marshaller_builds_byte_buffer(self):
        """BYTES argument side builds a ByteBuffer."""
        from linedesc.types import BYTES, ByteBuffer, arg_container

        assert isinstance(arg_container(BYTES, b"ab"), ByteBuffer)
        assert isinstance(arg_container(BYTES, b"ab", strict=False), ByteBuffer)
