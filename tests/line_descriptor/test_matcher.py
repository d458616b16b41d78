"""
Tests for BinaryDescriptorMatcher.
"""

import pytest

from tests.fixtures import CV_8UC1


def _descriptors(rows):
    from linedesc.core import Mat

    return Mat.new(rows, 32, CV_8UC1)


class TestConstruction:
    """Tests for matcher construction."""

    def test_default(self, no_leaks):
        """default() creates a plain matcher."""
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher:
            assert type(matcher) is BinaryDescriptorMatcher

        assert [kind for kind, _ in no_leaks.deleted] == ["BinaryDescriptorMatcher"]

    def test_create(self, no_leaks):
        """create_binary_descriptor_matcher() returns a cv::Ptr wrapper."""
        from linedesc.line_descriptor import (
            BinaryDescriptorMatcher,
            PtrOfBinaryDescriptorMatcher,
        )

        with BinaryDescriptorMatcher.create_binary_descriptor_matcher() as matcher:
            assert isinstance(matcher, PtrOfBinaryDescriptorMatcher)
            assert isinstance(matcher, BinaryDescriptorMatcher)

        assert [kind for kind, _ in no_leaks.deleted] == ["PtrOfBinaryDescriptorMatcher"]


class TestMatch:
    """Tests for match against explicit train descriptors."""

    def test_match(self, no_leaks):
        """One best match per query descriptor."""
        from linedesc.core import VectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.create_binary_descriptor_matcher() as matcher, _descriptors(
            3
        ) as query, _descriptors(2) as train, VectorOfDMatch.new() as matches:
            matcher.match(query, train, matches)

            assert [(m.query_idx, m.train_idx) for m in matches] == [(0, 0), (1, 1), (2, 0)]

    def test_match_releases_default_mask(self, no_leaks):
        """The temporary empty mask is deleted after the call."""
        from linedesc.core import VectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            1
        ) as query, VectorOfDMatch.new() as matches:
            matcher.match(query, query, matches)
            assert [kind for kind, _ in no_leaks.deleted] == ["Mat"]

    def test_match_replaces_content(self, no_leaks):
        """Existing matches are overwritten."""
        from linedesc.core import DMatch, VectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            1
        ) as query, VectorOfDMatch.from_iterable([DMatch(), DMatch()]) as matches:
            matcher.match(query, query, matches)

            assert len(matches) == 1


class TestKnnRadius:
    """Tests for knn_match / radius_match."""

    def test_knn_match(self, no_leaks):
        """k candidates per query, sorted by distance."""
        from linedesc.core import VectorOfVectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            2
        ) as query, _descriptors(5) as train, VectorOfVectorOfDMatch.new() as matches:
            matcher.knn_match(query, train, matches, k=3)
            lists = matches.to_lists()

        assert [len(inner) for inner in lists] == [3, 3]
        assert [m.distance for m in lists[1]] == sorted(m.distance for m in lists[1])

    def test_knn_match_records_k(self, no_leaks):
        """k is sent as a 32-bit int."""
        import ctypes

        from linedesc.core import VectorOfVectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        name = (
            "cv_line_descriptor_BinaryDescriptorMatcher_"
            "knnMatch_const_const_MatR_const_MatR_vector_vector_DMatch__R_int_const_MatR_bool"
        )
        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            1
        ) as query, VectorOfVectorOfDMatch.new() as matches:
            matcher.knn_match(query, query, matches, 2, compact_result=True)

        args = no_leaks.calls_for(name)[-1]
        assert isinstance(args[4], ctypes.c_int32)
        assert args[4].value == 2
        assert args[6].value is True

    def test_radius_match(self, no_leaks):
        """Only candidates within max_distance are kept."""
        from linedesc.core import VectorOfVectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            2
        ) as query, _descriptors(6) as train, VectorOfVectorOfDMatch.new() as matches:
            matcher.radius_match(query, train, matches, max_distance=2.5)
            lists = matches.to_lists()

        assert [len(inner) for inner in lists] == [3, 3]
        assert all(m.distance <= 2.5 for inner in lists for m in inner)


class TestDataset:
    """Tests for the add/train/query flow."""

    def test_query_without_dataset(self, no_leaks):
        """Querying an untrained matcher fails the native assertion."""
        from linedesc.core import VectorOfDMatch
        from linedesc.exceptions import NativeAssertionError
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(
            1
        ) as query, VectorOfDMatch.new() as matches:
            with pytest.raises(NativeAssertionError) as exc_info:
                matcher.match_query(query, matches)

        assert exc_info.value.details == {"operation": "BinaryDescriptorMatcher.match"}

    def test_add_train_match(self, no_leaks):
        """Matches reference the image index of the dataset."""
        from linedesc.core import VectorOfDMatch, VectorOfMat
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.create_binary_descriptor_matcher() as matcher:
            with _descriptors(1) as first, _descriptors(1) as second:
                with VectorOfMat.from_iterable([first, second]) as dataset:
                    matcher.add(dataset)
            matcher.train()

            with _descriptors(2) as query, VectorOfDMatch.new() as matches:
                matcher.match_query(query, matches)
                assert [(m.query_idx, m.img_idx) for m in matches] == [(0, 0), (1, 1)]

    def test_add_requires_retrain(self, no_leaks):
        """add() after train() leaves the matcher untrained."""
        from linedesc.core import VectorOfDMatch, VectorOfMat
        from linedesc.exceptions import NativeAssertionError
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(1) as desc:
            with VectorOfMat.from_iterable([desc]) as dataset:
                matcher.add(dataset)
                matcher.train()
                matcher.add(dataset)

            with VectorOfDMatch.new() as matches, pytest.raises(NativeAssertionError):
                matcher.match_query(desc, matches)

    def test_knn_and_radius_query(self, no_leaks):
        """Query variants run against the trained dataset."""
        from linedesc.core import VectorOfMat, VectorOfVectorOfDMatch
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(4) as desc:
            with VectorOfMat.from_iterable([desc]) as dataset:
                matcher.add(dataset)
            matcher.train()

            with VectorOfVectorOfDMatch.new() as knn, VectorOfVectorOfDMatch.new() as radius:
                matcher.knn_match_query(desc, knn, 2)
                matcher.radius_match_query(desc, radius, 0.0)

                assert [len(inner) for inner in knn.to_lists()] == [2, 2, 2, 2]
                assert [len(inner) for inner in radius.to_lists()] == [1, 1, 1, 1]

    def test_clear(self, no_leaks):
        """clear() drops the dataset."""
        from linedesc.core import VectorOfDMatch, VectorOfMat
        from linedesc.exceptions import NativeAssertionError
        from linedesc.line_descriptor import BinaryDescriptorMatcher

        with BinaryDescriptorMatcher.default() as matcher, _descriptors(1) as desc:
            with VectorOfMat.from_iterable([desc]) as dataset:
                matcher.add(dataset)
            matcher.train()
            matcher.clear()
            matcher.train()

            with VectorOfDMatch.new() as matches, pytest.raises(NativeAssertionError):
                matcher.match_query(desc, matches)
