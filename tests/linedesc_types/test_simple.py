"""
Tests for fixed-layout aggregates (SimpleType, opencv_type_simple).
"""

import copy
import ctypes

import pytest


class TestDeclaration:
    """Tests for the opencv_type_simple decorator."""

    def test_size_mismatch_raises(self):
        """Declaring the wrong native size fails at class definition."""
        from linedesc._native import Point2fC
        from linedesc.exceptions import LayoutMismatchError
        from linedesc.types import SimpleType, opencv_type_simple

        with pytest.raises(LayoutMismatchError) as exc_info:

            @opencv_type_simple(size=12)
            class Wrong(SimpleType, Point2fC):
                pass

        assert exc_info.value.details == {"type": "Wrong", "expected": 12, "actual": 8}

    def test_requires_simple_type(self):
        """Only SimpleType subclasses can be decorated."""
        from linedesc._native import Point2fC
        from linedesc.types import opencv_type_simple

        with pytest.raises(TypeError, match="SimpleType"):

            @opencv_type_simple(size=8)
            class NotSimple(Point2fC):
                pass

    def test_roles_are_raw_struct(self):
        """Receive is the raw struct; send is a pointer to it."""
        from linedesc._native import KeyLineC
        from linedesc.line_descriptor import KeyLine

        assert KeyLine.extern_receive is KeyLineC
        assert KeyLine.extern_send is ctypes.POINTER(KeyLineC)
        assert KeyLine.extern_send_mut is ctypes.POINTER(KeyLineC)

    @pytest.mark.parametrize(
        "module, name, size",
        [
            ("linedesc.core", "Point2f", 8),
            ("linedesc.core", "Scalar", 32),
            ("linedesc.core", "DMatch", 16),
            ("linedesc.line_descriptor", "KeyLine", 68),
            ("linedesc.line_descriptor", "LSDParam", 56),
        ],
    )
    def test_declared_sizes(self, module, name, size):
        """Bound aggregates have their native size."""
        import importlib

        cls = getattr(importlib.import_module(module), name)

        assert ctypes.sizeof(cls) == size


class TestReceive:
    """Tests for from_extern()."""

    def test_copies_struct(self):
        """Receiving copies; later native changes are not visible."""
        from linedesc._native import Point2fC
        from linedesc.core import Point2f

        raw = Point2fC(1.0, 2.0)
        point = Point2f.from_extern(raw)
        raw.x = 9.0

        assert point.x == 1.0
        assert isinstance(point, Point2f)

    def test_accepts_pointer(self):
        """A pointer to the raw struct is dereferenced and copied."""
        from linedesc._native import DMatchC
        from linedesc.core import DMatch

        raw = DMatchC(1, 2, 3, 0.25)
        match = DMatch.from_extern(ctypes.pointer(raw))

        assert (match.query_idx, match.train_idx, match.img_idx, match.distance) == (1, 2, 3, 0.25)


class TestSend:
    """Tests for as_extern(), as_extern_mut() and into_extern()."""

    def test_pointer_aliases_instance(self):
        """The extern pointer refers to the instance memory."""
        from linedesc.core import Point2f

        point = Point2f(1.0, 2.0)
        point.as_extern_mut().contents.y = 5.0

        assert point.y == 5.0

    def test_into_extern_consumes(self):
        """After into_extern() the value can no longer be marshalled."""
        from linedesc.core import Scalar
        from linedesc.exceptions import StateError

        color = Scalar(1, 2, 3, 4)
        ptr = color.into_extern()

        assert tuple(ptr.contents.val) == (1.0, 2.0, 3.0, 4.0)
        assert color.consumed
        with pytest.raises(StateError, match="moved into native code"):
            color.as_extern()

    def test_container_is_value(self):
        """A simple type is its own extern container."""
        from linedesc.core import Point2f
        from linedesc.types import arg_container

        point = Point2f(1.0, 1.0)

        assert arg_container(Point2f, point) is point


class TestValueSemantics:
    """Tests for copy, equality and repr."""

    def test_copy_is_independent(self):
        """copy() and copy.copy() return independent instances."""
        from linedesc.core import Point2f

        point = Point2f(1.0, 2.0)
        dup = copy.copy(point)
        dup.x = 3.0

        assert point.x == 1.0
        assert copy.deepcopy(point) == point

    def test_equality_by_bytes(self):
        """Equal fields compare equal; other types do not."""
        from linedesc.core import DMatch

        assert DMatch(1, 2, 0, 0.5) == DMatch(1, 2, 0, 0.5)
        assert DMatch(1, 2, 0, 0.5) != DMatch(1, 2, 0, 0.75)
        assert DMatch() != "DMatch"

    def test_unhashable(self):
        """Mutable aggregates are not hashable."""
        from linedesc.core import Point2f

        with pytest.raises(TypeError):
            hash(Point2f())

    def test_keyline_repr_lists_fields(self):
        """Generic repr names every field."""
        from linedesc.line_descriptor import KeyLine

        text = repr(KeyLine())

        assert text.startswith("KeyLine(angle=")
        assert "num_of_pixels=0" in text


class TestCoreValues:
    """Tests for Point2f, Scalar and DMatch conveniences."""

    def test_point_iter(self):
        """Point2f unpacks to (x, y)."""
        from linedesc.core import Point2f

        assert tuple(Point2f(1.5, -2.0)) == (1.5, -2.0)

    def test_scalar_all(self):
        """Scalar.all() fills all four channels."""
        from linedesc.core import Scalar

        assert tuple(Scalar.all(-1)) == (-1.0, -1.0, -1.0, -1.0)
        assert Scalar(0, 255, 0)[1] == 255.0

    def test_dmatch_defaults(self):
        """Default DMatch has no indices and the maximal distance."""
        from linedesc.core import FLT_MAX, DMatch

        match = DMatch()

        assert (match.query_idx, match.train_idx, match.img_idx) == (-1, -1, -1)
        assert match.distance == pytest.approx(FLT_MAX)

    def test_dmatch_orders_by_distance(self):
        """DMatch sorts by distance."""
        from linedesc.core import DMatch

        matches = sorted([DMatch(0, 0, 0, 3.0), DMatch(1, 1, 0, 1.0)])

        assert [m.query_idx for m in matches] == [1, 0]
