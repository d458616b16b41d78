"""
BinaryDescriptor: line detection and binary descriptor computation.

Example:
    >>> from linedesc import BinaryDescriptor, Mat, VectorOfKeyLine
    >>> with BinaryDescriptor.create_binary_descriptor() as bd, VectorOfKeyLine.new() as lines:
    ...     bd.detect(image, lines)
    ...     descriptors = Mat.default()
    ...     bd.compute(image, lines, descriptors)
"""

from contextlib import ExitStack

from .._logging import scoped_logger
from ..core.mat import Mat
from ..core.persistence import FileNode, FileStorage
from ..core.vector import VectorOfMat
from ..types import BOOL, I32, Boxed, arg_container, ptr_of
from ._args import or_default
from ._bindings import (
    call_binary_descriptor_compute,
    call_binary_descriptor_compute_multiple,
    call_binary_descriptor_create,
    call_binary_descriptor_create_with_params,
    call_binary_descriptor_detect,
    call_binary_descriptor_detect_multiple,
    call_binary_descriptor_get_int,
    call_binary_descriptor_new,
    call_binary_descriptor_query,
    call_binary_descriptor_read,
    call_binary_descriptor_set_int,
    call_binary_descriptor_write,
    call_params_get_int,
    call_params_new,
    call_params_read,
    call_params_set_int,
    call_params_write,
)
from .types import VectorOfKeyLine, VectorOfVectorOfKeyLine

__all__ = ["BinaryDescriptor", "BinaryDescriptorParams", "PtrOfBinaryDescriptor"]

logger = scoped_logger("line_descriptor")


class BinaryDescriptorParams(Boxed):
    """
    Parameters of ``BinaryDescriptor`` (cv::line_descriptor::BinaryDescriptor::Params).

    Defaults: one octave, band width 7, reduction ratio 2, ksize 5.
    """

    __slots__ = ()

    _native_name = "BinaryDescriptor_Params"

    @classmethod
    def default(cls) -> "BinaryDescriptorParams":
        params = cls.from_extern(call_params_new())
        logger.debug("Params created", extra={"type_name": "BinaryDescriptor.Params"})
        return params

    def _get(self, getter: str) -> int:
        return call_params_get_int(self.as_raw(), getter)

    def _set(self, setter: str, value: int) -> None:
        call_params_set_int(self.as_raw(), setter, arg_container(I32, value).as_extern())

    @property
    def num_of_octave(self) -> int:
        """Number of image octaves."""
        return self._get("getPropNumOfOctave__const")

    @num_of_octave.setter
    def num_of_octave(self, value: int) -> None:
        self._set("setPropNumOfOctave__int", value)

    @property
    def width_of_band(self) -> int:
        return self._get("getPropWidthOfBand__const")

    @width_of_band.setter
    def width_of_band(self, value: int) -> None:
        self._set("setPropWidthOfBand__int", value)

    @property
    def reduction_ratio(self) -> int:
        """Image reduction ratio used to build the Gaussian pyramid."""
        return self._get("getPropReductionRatio_const")

    @reduction_ratio.setter
    def reduction_ratio(self, value: int) -> None:
        self._set("setPropReductionRatio_int", value)

    @property
    def ksize(self) -> int:
        return self._get("getPropKsize__const")

    @ksize.setter
    def ksize(self, value: int) -> None:
        self._set("setPropKsize__int", value)

    def read(self, file_node: FileNode) -> None:
        """Load parameters from a file node."""
        call_params_read(self.as_raw(), file_node.as_extern())

    def write(self, file_storage: FileStorage) -> None:
        """Store parameters into an opened file storage."""
        call_params_write(self.as_raw(), file_storage.as_extern_mut())


class BinaryDescriptor(Boxed):
    """
    Line detector and binary descriptor extractor (EDLine + LBD).

    Instances come from ``new()`` (a plain object) or
    ``create_binary_descriptor()`` (a ``cv::Ptr``). Both expose the same
    methods.
    """

    __slots__ = ()

    _native_name = "BinaryDescriptor"

    @classmethod
    def new(cls, params: BinaryDescriptorParams | None = None) -> "BinaryDescriptor":
        """Create a descriptor with ``params`` (native defaults when None)."""
        with ExitStack() as stack:
            params = or_default(stack, params, BinaryDescriptorParams.default)
            descriptor = cls.from_extern(call_binary_descriptor_new(params.as_extern()))
        logger.debug("BinaryDescriptor created", extra={"type_name": cls.__name__})
        return descriptor

    @staticmethod
    def create_binary_descriptor(
        params: BinaryDescriptorParams | None = None,
    ) -> "BinaryDescriptor":
        """Create a descriptor held by a ``cv::Ptr``. Returns ``PtrOfBinaryDescriptor``."""
        if params is None:
            raw = call_binary_descriptor_create()
        else:
            raw = call_binary_descriptor_create_with_params(params.as_extern_mut())
        descriptor = PtrOfBinaryDescriptor.from_extern(raw)
        logger.debug("BinaryDescriptor created", extra={"type_name": "PtrOfBinaryDescriptor"})
        return descriptor

    # -------------------------------------------------------------------------
    # Parameters
    # -------------------------------------------------------------------------

    def get_num_of_octaves(self) -> int:
        return call_binary_descriptor_get_int(self.as_raw(), "NumOfOctaves")

    def set_num_of_octaves(self, octaves: int) -> None:
        call_binary_descriptor_set_int(
            self.as_raw(), "NumOfOctaves", arg_container(I32, octaves).as_extern()
        )

    def get_width_of_band(self) -> int:
        return call_binary_descriptor_get_int(self.as_raw(), "WidthOfBand")

    def set_width_of_band(self, width: int) -> None:
        call_binary_descriptor_set_int(
            self.as_raw(), "WidthOfBand", arg_container(I32, width).as_extern()
        )

    def get_reduction_ratio(self) -> int:
        return call_binary_descriptor_get_int(self.as_raw(), "ReductionRatio")

    def set_reduction_ratio(self, r_ratio: int) -> None:
        call_binary_descriptor_set_int(
            self.as_raw(), "ReductionRatio", arg_container(I32, r_ratio).as_extern()
        )

    num_of_octaves = property(get_num_of_octaves, set_num_of_octaves)
    width_of_band = property(get_width_of_band, set_width_of_band)
    reduction_ratio = property(get_reduction_ratio, set_reduction_ratio)

    def read(self, file_node: FileNode) -> None:
        call_binary_descriptor_read(self.as_raw(), file_node.as_extern())

    def write(self, file_storage: FileStorage) -> None:
        call_binary_descriptor_write(self.as_raw(), file_storage.as_extern_mut())

    # -------------------------------------------------------------------------
    # Detection / extraction
    # -------------------------------------------------------------------------

    def detect(self, image: Mat, keylines: VectorOfKeyLine, mask: Mat | None = None) -> None:
        """Detect lines in ``image``, replacing the content of ``keylines``.

        Args:
            image: Input image.
            keylines: Output vector.
            mask: Detect only where the mask is non-zero. Defaults to no mask.
        """
        with ExitStack() as stack:
            mask = or_default(stack, mask, Mat.default)
            call_binary_descriptor_detect(
                self.as_raw(), image.as_extern(), keylines.as_extern_mut(), mask.as_extern()
            )

    def detect_multiple(
        self,
        images: VectorOfMat,
        keylines: VectorOfVectorOfKeyLine,
        masks: VectorOfMat | None = None,
    ) -> None:
        """Detect lines in each image; ``keylines`` gets one vector per image."""
        with ExitStack() as stack:
            masks = or_default(stack, masks, VectorOfMat.new)
            call_binary_descriptor_detect_multiple(
                self.as_raw(), images.as_extern(), keylines.as_extern_mut(), masks.as_extern()
            )

    def compute(
        self,
        image: Mat,
        keylines: VectorOfKeyLine,
        descriptors: Mat,
        return_float_descr: bool = False,
    ) -> None:
        """Compute one descriptor row per keyline into ``descriptors``.

        Keylines for which no descriptor can be computed are removed.
        """
        call_binary_descriptor_compute(
            self.as_raw(),
            image.as_extern(),
            keylines.as_extern_mut(),
            descriptors.as_extern_mut(),
            arg_container(BOOL, return_float_descr).as_extern(),
        )

    def compute_multiple(
        self,
        images: VectorOfMat,
        keylines: VectorOfVectorOfKeyLine,
        descriptors: VectorOfMat,
        return_float_descr: bool = False,
    ) -> None:
        call_binary_descriptor_compute_multiple(
            self.as_raw(),
            images.as_extern(),
            keylines.as_extern_mut(),
            descriptors.as_extern_mut(),
            arg_container(BOOL, return_float_descr).as_extern(),
        )

    def descriptor_size(self) -> int:
        """Descriptor length in bytes."""
        return call_binary_descriptor_query(self.as_raw(), "descriptorSize")

    def descriptor_type(self) -> int:
        return call_binary_descriptor_query(self.as_raw(), "descriptorType")

    def default_norm(self) -> int:
        return call_binary_descriptor_query(self.as_raw(), "defaultNorm")


PtrOfBinaryDescriptor = ptr_of(BinaryDescriptor)
