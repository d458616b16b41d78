"""
Tests for the exception hierarchy and cv::Error::Code mapping.

Tests that:
1. Every exception derives from LineDescError and a matching builtin
2. Native error codes map to the right subclass
3. Messages, codes and details survive construction
"""

import pytest


class TestErrorTypes:
    """Tests for error type hierarchy and accessibility."""

    def test_base_error_importable(self, linedesc):
        """LineDescError is importable from linedesc."""
        assert hasattr(linedesc, "LineDescError")
        assert issubclass(linedesc.LineDescError, Exception)

    @pytest.mark.parametrize(
        "name, builtin",
        [
            ("EncodingError", ValueError),
            ("OwnershipTransferError", NotImplementedError),
            ("NativeError", RuntimeError),
            ("BadArgumentError", ValueError),
            ("OutOfRangeError", IndexError),
            ("NotImplementedNativeError", NotImplementedError),
            ("NativeMemoryError", MemoryError),
            ("LibraryNotFoundError", OSError),
            ("LayoutMismatchError", TypeError),
            ("StateError", RuntimeError),
        ],
    )
    def test_builtin_compatibility(self, name, builtin):
        """Each error is also catchable as the matching builtin."""
        import linedesc.exceptions as exceptions

        cls = getattr(exceptions, name)
        assert issubclass(cls, exceptions.LineDescError)
        assert issubclass(cls, builtin)

    def test_native_subclasses(self):
        """Mapped native errors derive from NativeError."""
        from linedesc.exceptions import (
            BadArgumentError,
            NativeAssertionError,
            NativeError,
            NativeMemoryError,
            NotImplementedNativeError,
            OutOfRangeError,
        )

        for cls in (
            BadArgumentError,
            OutOfRangeError,
            NativeAssertionError,
            NotImplementedNativeError,
            NativeMemoryError,
        ):
            assert issubclass(cls, NativeError)


class TestErrorAttributes:
    """Tests for message, code, details and original_code."""

    def test_default_code(self):
        """Base error uses INTERNAL_ERROR by default."""
        from linedesc.exceptions import LineDescError

        err = LineDescError("boom")
        assert err.code == "INTERNAL_ERROR"
        assert err.details == {}
        assert err.original_code is None
        assert str(err) == "boom"

    def test_details_preserved(self):
        """details dict is kept as given."""
        from linedesc.exceptions import StateError

        err = StateError("closed", details={"type": "Mat"})
        assert err.details == {"type": "Mat"}
        assert err.code == "STATE_ERROR"

    def test_repr_includes_code(self):
        """repr shows class, message and code."""
        from linedesc.exceptions import NativeError

        assert repr(NativeError("x")) == "NativeError('x', code='NATIVE_ERROR')"

    def test_encoding_error_nul_position(self):
        """EncodingError carries the NUL offset."""
        from linedesc.exceptions import EncodingError

        err = EncodingError("nul", nul_position=3)
        assert err.nul_position == 3
        assert err.code == "ENCODING_NUL_BYTE"

    @pytest.mark.parametrize(
        "cls_name, original",
        [
            ("BadArgumentError", -5),
            ("OutOfRangeError", -211),
            ("NativeAssertionError", -215),
            ("NotImplementedNativeError", -213),
            ("NativeMemoryError", -4),
        ],
    )
    def test_default_original_code(self, cls_name, original):
        """Native subclasses default original_code to their cv::Error::Code."""
        import linedesc.exceptions as exceptions

        assert getattr(exceptions, cls_name)("x").original_code == original


class TestErrorFromCode:
    """Tests for error_from_code() and ERROR_CODE_MAP."""

    @pytest.mark.parametrize(
        "code, cls_name",
        [
            (-4, "NativeMemoryError"),
            (-5, "BadArgumentError"),
            (-27, "BadArgumentError"),
            (-201, "BadArgumentError"),
            (-211, "OutOfRangeError"),
            (-213, "NotImplementedNativeError"),
            (-215, "NativeAssertionError"),
        ],
    )
    def test_mapped_codes(self, code, cls_name):
        """Known codes build their mapped class."""
        import linedesc.exceptions as exceptions

        err = exceptions.error_from_code(code, "message", {"operation": "detect"})

        assert type(err) is getattr(exceptions, cls_name)
        assert err.original_code == code
        assert err.details == {"operation": "detect"}
        assert str(err) == "message"

    @pytest.mark.parametrize("code", [-1, -2, -9999, 7])
    def test_unknown_codes_are_native_error(self, code):
        """Unmapped codes build a plain NativeError."""
        from linedesc.exceptions import NativeError, error_from_code

        err = error_from_code(code, "message")

        assert type(err) is NativeError
        assert err.original_code == code
        assert err.code == "NATIVE_ERROR"

    def test_map_values_are_native_errors(self):
        """ERROR_CODE_MAP only holds NativeError subclasses."""
        from linedesc.exceptions import ERROR_CODE_MAP, NativeError

        assert all(issubclass(cls, NativeError) for cls in ERROR_CODE_MAP.values())
