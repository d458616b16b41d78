"""
FFI bindings for cv::line_descriptor.

Wrappers receive marshalled arguments (raw handles, struct pointers,
ctypes scalars) and return the unwrapped ``Result`` payload.
"""

from typing import Any

from .._bindings import check, get_lib

_LD = "cv_line_descriptor_"
_BD = _LD + "BinaryDescriptor_"
_BDP = _LD + "BinaryDescriptor_Params_"
_BDM = _LD + "BinaryDescriptorMatcher_"
_LSD = _LD + "LSDDetector_"
_KL = _LD + "KeyLine_"


def _fn(name: str) -> Any:
    return getattr(get_lib(), name)


# =============================================================================
# Drawing
# =============================================================================


def call_draw_keylines(image: Any, keylines: Any, out_image: Any, color: Any, flags: Any) -> None:
    check(
        _fn(_LD + "drawKeylines_const_MatR_const_vector_KeyLine_R_MatR_const_ScalarR_int")(
            image, keylines, out_image, color, flags
        ),
        {"operation": "drawKeylines"},
    )


def call_draw_line_matches(
    img1: Any,
    keylines1: Any,
    img2: Any,
    keylines2: Any,
    matches1to2: Any,
    out_img: Any,
    match_color: Any,
    single_line_color: Any,
    matches_mask: Any,
    flags: Any,
) -> None:
    fn = _fn(
        _LD
        + "drawLineMatches_const_MatR_const_vector_KeyLine_R_const_MatR_const_vector_KeyLine_R"
        "_const_vector_DMatch_R_MatR_const_ScalarR_const_ScalarR_const_vector_char_R_int"
    )
    check(
        fn(
            img1,
            keylines1,
            img2,
            keylines2,
            matches1to2,
            out_img,
            match_color,
            single_line_color,
            matches_mask,
            flags,
        ),
        {"operation": "drawLineMatches"},
    )


# =============================================================================
# BinaryDescriptor
# =============================================================================


def call_binary_descriptor_new(params: Any) -> int:
    return check(
        _fn(_BD + "BinaryDescriptor_const_ParamsR")(params), {"operation": "BinaryDescriptor"}
    )


def call_binary_descriptor_create() -> int:
    """Returns an owned cv::Ptr<BinaryDescriptor> handle."""
    return check(
        _fn(_BD + "createBinaryDescriptor")(), {"operation": "createBinaryDescriptor"}
    )


def call_binary_descriptor_create_with_params(params: Any) -> int:
    """Returns an owned cv::Ptr<BinaryDescriptor> handle."""
    return check(
        _fn(_BD + "createBinaryDescriptor_Params")(params),
        {"operation": "createBinaryDescriptor"},
    )


def call_binary_descriptor_get_int(handle: Any, prop: str) -> int:
    """Call ``get<prop>`` (``NumOfOctaves``, ``WidthOfBand``, ``ReductionRatio``)."""
    return check(_fn(f"{_BD}get{prop}")(handle), {"operation": f"BinaryDescriptor.get{prop}"})


def call_binary_descriptor_set_int(handle: Any, prop: str, value: Any) -> None:
    check(
        _fn(f"{_BD}set{prop}_int")(handle, value),
        {"operation": f"BinaryDescriptor.set{prop}", "value": value.value},
    )


def call_binary_descriptor_read(handle: Any, file_node: Any) -> None:
    check(
        _fn(_BD + "read_const_FileNodeR")(handle, file_node),
        {"operation": "BinaryDescriptor.read"},
    )


def call_binary_descriptor_write(handle: Any, file_storage: Any) -> None:
    check(
        _fn(_BD + "write_const_FileStorageR")(handle, file_storage),
        {"operation": "BinaryDescriptor.write"},
    )


def call_binary_descriptor_detect(handle: Any, image: Any, keylines: Any, mask: Any) -> None:
    check(
        _fn(_BD + "detect_const_MatR_vector_KeyLine_R_const_MatR")(handle, image, keylines, mask),
        {"operation": "BinaryDescriptor.detect"},
    )


def call_binary_descriptor_detect_multiple(
    handle: Any, images: Any, keylines: Any, masks: Any
) -> None:
    check(
        _fn(_BD + "detect_const_const_vector_Mat_R_vector_vector_KeyLine__R_const_vector_Mat_R")(
            handle, images, keylines, masks
        ),
        {"operation": "BinaryDescriptor.detect"},
    )


def call_binary_descriptor_compute(
    handle: Any, image: Any, keylines: Any, descriptors: Any, return_float_descr: Any
) -> None:
    check(
        _fn(_BD + "compute_const_const_MatR_vector_KeyLine_R_MatR_bool")(
            handle, image, keylines, descriptors, return_float_descr
        ),
        {"operation": "BinaryDescriptor.compute"},
    )


def call_binary_descriptor_compute_multiple(
    handle: Any, images: Any, keylines: Any, descriptors: Any, return_float_descr: Any
) -> None:
    check(
        _fn(_BD + "compute_const_const_vector_Mat_R_vector_vector_KeyLine__R_vector_Mat_R_bool")(
            handle, images, keylines, descriptors, return_float_descr
        ),
        {"operation": "BinaryDescriptor.compute"},
    )


def call_binary_descriptor_query(handle: Any, query: str) -> int:
    """Call a ``<query>_const`` getter (``descriptorSize``, ``descriptorType``, ``defaultNorm``)."""
    return check(_fn(f"{_BD}{query}_const")(handle), {"operation": f"BinaryDescriptor.{query}"})


# =============================================================================
# BinaryDescriptor::Params
# =============================================================================


def call_params_new() -> int:
    return check(_fn(_BDP + "Params")(), {"operation": "BinaryDescriptor.Params"})


def call_params_get_int(handle: Any, getter: str) -> int:
    return check(_fn(_BDP + getter)(handle), {"operation": f"BinaryDescriptor.Params.{getter}"})


def call_params_set_int(handle: Any, setter: str, value: Any) -> None:
    check(
        _fn(_BDP + setter)(handle, value),
        {"operation": f"BinaryDescriptor.Params.{setter}", "value": value.value},
    )


def call_params_read(handle: Any, file_node: Any) -> None:
    check(
        _fn(_BDP + "read_const_FileNodeR")(handle, file_node),
        {"operation": "BinaryDescriptor.Params.read"},
    )


def call_params_write(handle: Any, file_storage: Any) -> None:
    check(
        _fn(_BDP + "write_const_FileStorageR")(handle, file_storage),
        {"operation": "BinaryDescriptor.Params.write"},
    )


# =============================================================================
# BinaryDescriptorMatcher
# =============================================================================


def call_matcher_new() -> int:
    return check(_fn(_BDM + "BinaryDescriptorMatcher")(), {"operation": "BinaryDescriptorMatcher"})


def call_matcher_create() -> int:
    """Returns an owned cv::Ptr<BinaryDescriptorMatcher> handle."""
    return check(
        _fn(_BDM + "createBinaryDescriptorMatcher")(),
        {"operation": "createBinaryDescriptorMatcher"},
    )


def call_matcher_match(handle: Any, query: Any, train: Any, matches: Any, mask: Any) -> None:
    check(
        _fn(_BDM + "match_const_const_MatR_const_MatR_vector_DMatch_R_const_MatR")(
            handle, query, train, matches, mask
        ),
        {"operation": "BinaryDescriptorMatcher.match"},
    )


def call_matcher_match_query(handle: Any, query: Any, matches: Any, masks: Any) -> None:
    check(
        _fn(_BDM + "match_const_MatR_vector_DMatch_R_const_vector_Mat_R")(
            handle, query, matches, masks
        ),
        {"operation": "BinaryDescriptorMatcher.match"},
    )


def call_matcher_knn_match(
    handle: Any, query: Any, train: Any, matches: Any, k: Any, mask: Any, compact: Any
) -> None:
    fn = _fn(
        _BDM + "knnMatch_const_const_MatR_const_MatR_vector_vector_DMatch__R_int_const_MatR_bool"
    )
    check(
        fn(handle, query, train, matches, k, mask, compact),
        {"operation": "BinaryDescriptorMatcher.knnMatch", "k": k.value},
    )


def call_matcher_knn_match_query(
    handle: Any, query: Any, matches: Any, k: Any, masks: Any, compact: Any
) -> None:
    check(
        _fn(_BDM + "knnMatch_const_MatR_vector_vector_DMatch__R_int_const_vector_Mat_R_bool")(
            handle, query, matches, k, masks, compact
        ),
        {"operation": "BinaryDescriptorMatcher.knnMatch", "k": k.value},
    )


def call_matcher_radius_match(
    handle: Any, query: Any, train: Any, matches: Any, max_distance: Any, mask: Any, compact: Any
) -> None:
    fn = _fn(
        _BDM
        + "radiusMatch_const_const_MatR_const_MatR_vector_vector_DMatch__R_float_const_MatR_bool"
    )
    check(
        fn(handle, query, train, matches, max_distance, mask, compact),
        {"operation": "BinaryDescriptorMatcher.radiusMatch", "max_distance": max_distance.value},
    )


def call_matcher_radius_match_query(
    handle: Any, query: Any, matches: Any, max_distance: Any, masks: Any, compact: Any
) -> None:
    check(
        _fn(_BDM + "radiusMatch_const_MatR_vector_vector_DMatch__R_float_const_vector_Mat_R_bool")(
            handle, query, matches, max_distance, masks, compact
        ),
        {"operation": "BinaryDescriptorMatcher.radiusMatch", "max_distance": max_distance.value},
    )


def call_matcher_add(handle: Any, descriptors: Any) -> None:
    check(
        _fn(_BDM + "add_const_vector_Mat_R")(handle, descriptors),
        {"operation": "BinaryDescriptorMatcher.add"},
    )


def call_matcher_train(handle: Any) -> None:
    check(_fn(_BDM + "train")(handle), {"operation": "BinaryDescriptorMatcher.train"})


def call_matcher_clear(handle: Any) -> None:
    check(_fn(_BDM + "clear")(handle), {"operation": "BinaryDescriptorMatcher.clear"})


# =============================================================================
# KeyLine / LSDParam
# =============================================================================


def call_keyline_new() -> Any:
    """Returns a ``KeyLineC`` by value."""
    return check(_fn(_KL + "KeyLine")(), {"operation": "KeyLine"})


def call_keyline_point(keyline: Any, getter: str) -> Any:
    """Call a ``get*Point*_const`` accessor. Returns a ``Point2fC`` by value."""
    return check(_fn(f"{_KL}{getter}_const")(keyline), {"operation": f"KeyLine.{getter}"})


def call_lsd_param_new() -> Any:
    """Returns an ``LSDParamC`` by value."""
    return check(_fn(_LD + "LSDParam_LSDParam")(), {"operation": "LSDParam"})


# =============================================================================
# LSDDetector
# =============================================================================


def call_lsd_detector_new() -> int:
    return check(_fn(_LSD + "LSDDetector")(), {"operation": "LSDDetector"})


def call_lsd_detector_new_with_params(params: Any) -> int:
    return check(_fn(_LSD + "LSDDetector_LSDParam")(params), {"operation": "LSDDetector"})


def call_lsd_detector_create() -> int:
    """Returns an owned cv::Ptr<LSDDetector> handle."""
    return check(_fn(_LSD + "createLSDDetector")(), {"operation": "createLSDDetector"})


def call_lsd_detector_create_with_params(params: Any) -> int:
    """Returns an owned cv::Ptr<LSDDetector> handle."""
    return check(
        _fn(_LSD + "createLSDDetector_LSDParam")(params), {"operation": "createLSDDetector"}
    )


def call_lsd_detector_detect(
    handle: Any, image: Any, keylines: Any, scale: Any, num_octaves: Any, mask: Any
) -> None:
    check(
        _fn(_LSD + "detect_const_MatR_vector_KeyLine_R_int_int_const_MatR")(
            handle, image, keylines, scale, num_octaves, mask
        ),
        {"operation": "LSDDetector.detect", "scale": scale.value, "num_octaves": num_octaves.value},
    )


def call_lsd_detector_detect_multiple(
    handle: Any, images: Any, keylines: Any, scale: Any, num_octaves: Any, masks: Any
) -> None:
    fn = _fn(
        _LSD
        + "detect_const_const_vector_Mat_R_vector_vector_KeyLine__R_int_int_const_vector_Mat_R"
    )
    check(
        fn(handle, images, keylines, scale, num_octaves, masks),
        {"operation": "LSDDetector.detect", "scale": scale.value, "num_octaves": num_octaves.value},
    )
