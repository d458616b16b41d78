"""
Tests for Result unwrapping and native-owned text/bytes.
"""

import ctypes

import pytest


class TestCheck:
    """Tests for check()."""

    def test_void_success(self):
        """A successful ResultVoid returns None."""
        from linedesc._bindings import check
        from linedesc._native import ResultVoid

        assert check(ResultVoid(0, None)) is None

    def test_payload_success(self):
        """A successful Result<T> returns its payload."""
        from linedesc._bindings import check
        from linedesc._native import ResultInt

        assert check(ResultInt(0, None, 42)) == 42

    def test_error_maps_code_and_message(self, fake_lib):
        """Errors raise the mapped class with the native message."""
        from linedesc._bindings import check
        from linedesc._native import ResultVoid
        from linedesc.exceptions import NativeAssertionError

        msg = fake_lib.new_string(b"Assertion failed (!image.empty())")

        with pytest.raises(NativeAssertionError, match="image.empty") as exc_info:
            check(ResultVoid(-215, msg), {"operation": "detect"})

        assert exc_info.value.original_code == -215
        assert exc_info.value.details == {"operation": "detect"}

    def test_error_message_released(self, fake_lib):
        """The native error string is released exactly once."""
        from linedesc._bindings import check
        from linedesc._native import ResultVoid
        from linedesc.exceptions import BadArgumentError

        msg = fake_lib.new_string(b"bad")

        with pytest.raises(BadArgumentError):
            check(ResultVoid(-5, msg))

        assert fake_lib.freed_strings == [msg]
        assert fake_lib.pending_strings == 0

    def test_error_without_message(self, fake_lib):
        """A missing message yields a generic one."""
        from linedesc._bindings import check
        from linedesc._native import ResultVoid
        from linedesc.exceptions import NativeError

        with pytest.raises(NativeError, match="OpenCV error -2"):
            check(ResultVoid(-2, None))

    def test_error_from_entry_point(self, fake_lib):
        """An injected failure surfaces through the call wrappers."""
        from linedesc.core._bindings import call_mat_new
        from linedesc.exceptions import NativeMemoryError

        fake_lib.fail_next("cv_Mat_Mat", -4, "Failed to allocate 1 bytes")

        with pytest.raises(NativeMemoryError, match="allocate") as exc_info:
            call_mat_new()

        assert exc_info.value.details == {"operation": "Mat"}
        assert fake_lib.pending_strings == 0


class TestNativeText:
    """Tests for take_string() and take_bytes()."""

    def test_take_string(self, fake_lib):
        """take_string() copies and frees."""
        from linedesc._bindings import take_string

        handle = fake_lib.new_string("numOfOctave: 1".encode())

        assert take_string(handle) == "numOfOctave: 1"
        assert fake_lib.freed_strings == [handle]

    def test_take_string_invalid_utf8(self, fake_lib):
        """Invalid UTF-8 is replaced, not raised."""
        from linedesc._bindings import take_string

        handle = fake_lib.new_string(b"ok\xff")

        assert take_string(handle) == "ok�"

    def test_take_bytes(self, fake_lib):
        """take_bytes() copies ptr+len and frees."""
        from linedesc._bindings import take_bytes

        handle = fake_lib.new_bytes(b"\x00\x01\x02\xff")

        assert take_bytes(handle) == b"\x00\x01\x02\xff"
        assert fake_lib.freed_bytes == [handle]

    def test_take_bytes_empty(self, fake_lib):
        """An empty byte string gives b'' and is still freed."""
        from linedesc._bindings import take_bytes

        handle = fake_lib.new_bytes(b"")

        assert take_bytes(handle) == b""
        assert fake_lib.freed_bytes == [handle]

    def test_read_buffer(self):
        """read_buffer() copies length bytes from a pointer."""
        from linedesc._bindings import read_buffer

        buf = ctypes.create_string_buffer(b"abcdef")

        assert read_buffer(ctypes.addressof(buf), 3) == b"abc"
