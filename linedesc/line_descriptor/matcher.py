"""
BinaryDescriptorMatcher: Multi-Index Hashing matcher for binary descriptors.

Two modes, as in OpenCV:

- query/train: ``match(query, train, matches)`` compares two descriptor sets
- dataset: ``add([...])`` then ``train()``, then ``match_query(query, matches)``
"""

from contextlib import ExitStack

from .._logging import scoped_logger
from ..core.mat import Mat
from ..core.vector import VectorOfDMatch, VectorOfMat, VectorOfVectorOfDMatch
from ..types import BOOL, F32, I32, Boxed, arg_container, ptr_of
from ._args import or_default
from ._bindings import (
    call_matcher_add,
    call_matcher_clear,
    call_matcher_create,
    call_matcher_knn_match,
    call_matcher_knn_match_query,
    call_matcher_match,
    call_matcher_match_query,
    call_matcher_new,
    call_matcher_radius_match,
    call_matcher_radius_match_query,
    call_matcher_train,
)

__all__ = ["BinaryDescriptorMatcher", "PtrOfBinaryDescriptorMatcher"]

logger = scoped_logger("line_descriptor")


class BinaryDescriptorMatcher(Boxed):
    """Matcher for binary line descriptors (Hamming distance)."""

    __slots__ = ()

    _native_name = "BinaryDescriptorMatcher"

    @classmethod
    def default(cls) -> "BinaryDescriptorMatcher":
        matcher = cls.from_extern(call_matcher_new())
        logger.debug("BinaryDescriptorMatcher created", extra={"type_name": cls.__name__})
        return matcher

    @staticmethod
    def create_binary_descriptor_matcher() -> "BinaryDescriptorMatcher":
        """Create a matcher held by a ``cv::Ptr``."""
        matcher = PtrOfBinaryDescriptorMatcher.from_extern(call_matcher_create())
        logger.debug(
            "BinaryDescriptorMatcher created", extra={"type_name": "PtrOfBinaryDescriptorMatcher"}
        )
        return matcher

    # -------------------------------------------------------------------------
    # Best match
    # -------------------------------------------------------------------------

    def match(
        self,
        query_descriptors: Mat,
        train_descriptors: Mat,
        matches: VectorOfDMatch,
        mask: Mat | None = None,
    ) -> None:
        """For every query descriptor, find the best match in ``train_descriptors``."""
        with ExitStack() as stack:
            mask = or_default(stack, mask, Mat.default)
            call_matcher_match(
                self.as_raw(),
                query_descriptors.as_extern(),
                train_descriptors.as_extern(),
                matches.as_extern_mut(),
                mask.as_extern(),
            )

    def match_query(
        self,
        query_descriptors: Mat,
        matches: VectorOfDMatch,
        masks: VectorOfMat | None = None,
    ) -> None:
        """Like ``match``, against the dataset built with ``add``/``train``."""
        with ExitStack() as stack:
            masks = or_default(stack, masks, VectorOfMat.new)
            call_matcher_match_query(
                self.as_raw(),
                query_descriptors.as_extern(),
                matches.as_extern_mut(),
                masks.as_extern(),
            )

    # -------------------------------------------------------------------------
    # k best matches
    # -------------------------------------------------------------------------

    def knn_match(
        self,
        query_descriptors: Mat,
        train_descriptors: Mat,
        matches: VectorOfVectorOfDMatch,
        k: int,
        mask: Mat | None = None,
        compact_result: bool = False,
    ) -> None:
        """Retrieve the ``k`` closest train descriptors for every query descriptor."""
        with ExitStack() as stack:
            mask = or_default(stack, mask, Mat.default)
            call_matcher_knn_match(
                self.as_raw(),
                query_descriptors.as_extern(),
                train_descriptors.as_extern(),
                matches.as_extern_mut(),
                arg_container(I32, k).as_extern(),
                mask.as_extern(),
                arg_container(BOOL, compact_result).as_extern(),
            )

    def knn_match_query(
        self,
        query_descriptors: Mat,
        matches: VectorOfVectorOfDMatch,
        k: int,
        masks: VectorOfMat | None = None,
        compact_result: bool = False,
    ) -> None:
        with ExitStack() as stack:
            masks = or_default(stack, masks, VectorOfMat.new)
            call_matcher_knn_match_query(
                self.as_raw(),
                query_descriptors.as_extern(),
                matches.as_extern_mut(),
                arg_container(I32, k).as_extern(),
                masks.as_extern(),
                arg_container(BOOL, compact_result).as_extern(),
            )

    # -------------------------------------------------------------------------
    # Matches within a radius
    # -------------------------------------------------------------------------

    def radius_match(
        self,
        query_descriptors: Mat,
        train_descriptors: Mat,
        matches: VectorOfVectorOfDMatch,
        max_distance: float,
        mask: Mat | None = None,
        compact_result: bool = False,
    ) -> None:
        """Retrieve all train descriptors within ``max_distance`` of each query."""
        with ExitStack() as stack:
            mask = or_default(stack, mask, Mat.default)
            call_matcher_radius_match(
                self.as_raw(),
                query_descriptors.as_extern(),
                train_descriptors.as_extern(),
                matches.as_extern_mut(),
                arg_container(F32, max_distance).as_extern(),
                mask.as_extern(),
                arg_container(BOOL, compact_result).as_extern(),
            )

    def radius_match_query(
        self,
        query_descriptors: Mat,
        matches: VectorOfVectorOfDMatch,
        max_distance: float,
        masks: VectorOfMat | None = None,
        compact_result: bool = False,
    ) -> None:
        with ExitStack() as stack:
            masks = or_default(stack, masks, VectorOfMat.new)
            call_matcher_radius_match_query(
                self.as_raw(),
                query_descriptors.as_extern(),
                matches.as_extern_mut(),
                arg_container(F32, max_distance).as_extern(),
                masks.as_extern(),
                arg_container(BOOL, compact_result).as_extern(),
            )

    # -------------------------------------------------------------------------
    # Dataset
    # -------------------------------------------------------------------------

    def add(self, descriptors: VectorOfMat) -> None:
        """Append descriptor matrices to the internal dataset."""
        call_matcher_add(self.as_raw(), descriptors.as_extern())

    def train(self) -> None:
        """Build the hash tables for the internal dataset."""
        call_matcher_train(self.as_raw())

    def clear(self) -> None:
        """Drop the internal dataset."""
        call_matcher_clear(self.as_raw())


PtrOfBinaryDescriptorMatcher = ptr_of(BinaryDescriptorMatcher)
