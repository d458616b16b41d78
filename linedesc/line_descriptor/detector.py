"""
LSDDetector: line segment detection on a Gaussian pyramid.
"""

from contextlib import ExitStack

from .._logging import scoped_logger
from ..core.mat import Mat
from ..core.vector import VectorOfMat
from ..types import I32, Boxed, arg_container, ptr_of
from ._args import or_default
from ._bindings import (
    call_lsd_detector_create,
    call_lsd_detector_create_with_params,
    call_lsd_detector_detect,
    call_lsd_detector_detect_multiple,
    call_lsd_detector_new,
    call_lsd_detector_new_with_params,
)
from .types import LSDParam, VectorOfKeyLine, VectorOfVectorOfKeyLine

__all__ = ["LSDDetector", "PtrOfLSDDetector"]

logger = scoped_logger("line_descriptor")


class LSDDetector(Boxed):
    """
    Extracts lines with LSD on each octave of a Gaussian pyramid.

    ``KeyLine.class_id`` holds the extraction order inside an octave; image
    and octave coordinates coincide.
    """

    __slots__ = ()

    _native_name = "LSDDetector"

    @classmethod
    def default(cls) -> "LSDDetector":
        detector = cls.from_extern(call_lsd_detector_new())
        logger.debug("LSDDetector created", extra={"type_name": cls.__name__})
        return detector

    @classmethod
    def new(cls, params: LSDParam) -> "LSDDetector":
        """Create a detector with explicit LSD parameters (copied by native code)."""
        detector = cls.from_extern(call_lsd_detector_new_with_params(params.as_extern()))
        logger.debug("LSDDetector created", extra={"type_name": cls.__name__})
        return detector

    @staticmethod
    def create_lsd_detector() -> "LSDDetector":
        """Create a detector held by a ``cv::Ptr``."""
        return PtrOfLSDDetector.from_extern(call_lsd_detector_create())

    @staticmethod
    def create_lsd_detector_with_params(params: LSDParam) -> "LSDDetector":
        raw = call_lsd_detector_create_with_params(params.as_extern())
        return PtrOfLSDDetector.from_extern(raw)

    def detect(
        self,
        image: Mat,
        keylines: VectorOfKeyLine,
        scale: int,
        num_octaves: int,
        mask: Mat | None = None,
    ) -> None:
        """Detect lines inside an image.

        Args:
            image: Input image.
            keylines: Output vector.
            scale: Scale factor used in pyramid generation.
            num_octaves: Number of octaves inside the pyramid.
            mask: Detect only where the mask is non-zero. Defaults to no mask.
        """
        with ExitStack() as stack:
            mask = or_default(stack, mask, Mat.default)
            call_lsd_detector_detect(
                self.as_raw(),
                image.as_extern(),
                keylines.as_extern_mut(),
                arg_container(I32, scale).as_extern(),
                arg_container(I32, num_octaves).as_extern(),
                mask.as_extern(),
            )

    def detect_multiple(
        self,
        images: VectorOfMat,
        keylines: VectorOfVectorOfKeyLine,
        scale: int,
        num_octaves: int,
        masks: VectorOfMat | None = None,
    ) -> None:
        with ExitStack() as stack:
            masks = or_default(stack, masks, VectorOfMat.new)
            call_lsd_detector_detect_multiple(
                self.as_raw(),
                images.as_extern(),
                keylines.as_extern_mut(),
                arg_container(I32, scale).as_extern(),
                arg_container(I32, num_octaves).as_extern(),
                masks.as_extern(),
            )


PtrOfLSDDetector = ptr_of(LSDDetector)
