"""
C structs and entry point signatures of the native shim.

Every fallible entry point returns a ``Result`` struct by value::

    struct Result_void { int error_code; void* error_msg; };
    struct Result<T>   { int error_code; void* error_msg; T result; };

``error_msg`` is a native string handle, released with
``ocvrs_string_delete`` once read. Names follow the shim convention
``cv_<module>_<Class>_<method>_<argsig>``.

``setup_signatures(lib)`` assigns ``argtypes``/``restype`` for every entry in
``SIGNATURES``. Missing argtypes make ctypes pass 64-bit pointers as C ints,
so every function the bindings call must be listed here.
"""

import ctypes
from typing import Any

# =============================================================================
# Fixed-layout structs
# =============================================================================


class Point2fC(ctypes.Structure):
    """cv::Point2f"""

    _fields_ = [
        ("x", ctypes.c_float),
        ("y", ctypes.c_float),
    ]


class ScalarC(ctypes.Structure):
    """cv::Scalar (cv::Vec<double, 4>)"""

    _fields_ = [
        ("val", ctypes.c_double * 4),
    ]


class DMatchC(ctypes.Structure):
    """cv::DMatch"""

    _fields_ = [
        ("query_idx", ctypes.c_int),
        ("train_idx", ctypes.c_int),
        ("img_idx", ctypes.c_int),
        ("distance", ctypes.c_float),
    ]


class KeyLineC(ctypes.Structure):
    """cv::line_descriptor::KeyLine"""

    _fields_ = [
        ("angle", ctypes.c_float),
        ("class_id", ctypes.c_int),
        ("octave", ctypes.c_int),
        ("pt", Point2fC),
        ("response", ctypes.c_float),
        ("size", ctypes.c_float),
        ("start_point_x", ctypes.c_float),
        ("start_point_y", ctypes.c_float),
        ("end_point_x", ctypes.c_float),
        ("end_point_y", ctypes.c_float),
        ("s_point_in_octave_x", ctypes.c_float),
        ("s_point_in_octave_y", ctypes.c_float),
        ("e_point_in_octave_x", ctypes.c_float),
        ("e_point_in_octave_y", ctypes.c_float),
        ("line_length", ctypes.c_float),
        ("num_of_pixels", ctypes.c_int),
    ]


class LSDParamC(ctypes.Structure):
    """cv::line_descriptor::LSDParam"""

    _fields_ = [
        ("scale", ctypes.c_double),
        ("sigma_scale", ctypes.c_double),
        ("quant", ctypes.c_double),
        ("ang_th", ctypes.c_double),
        ("log_eps", ctypes.c_double),
        ("density_th", ctypes.c_double),
        ("n_bins", ctypes.c_int),
    ]


class ByteStringC(ctypes.Structure):
    """Native-owned byte string returned by handle; freed with ocvrs_bytes_delete."""

    _fields_ = [
        ("data", ctypes.c_void_p),
        ("len", ctypes.c_size_t),
    ]


# =============================================================================
# Result structs
# =============================================================================


class ResultVoid(ctypes.Structure):
    """Result_void"""

    _fields_ = [
        ("error_code", ctypes.c_int),
        ("error_msg", ctypes.c_void_p),
    ]


_RESULT_TYPES: dict[Any, type[ctypes.Structure]] = {}


def result_of(ctype: Any) -> type[ctypes.Structure]:
    """Return the ``Result<ctype>`` struct class (cached per payload type)."""
    if ctype is None:
        return ResultVoid
    cls = _RESULT_TYPES.get(ctype)
    if cls is None:
        cls = type(
            f"Result_{ctype.__name__}",
            (ctypes.Structure,),
            {
                "_fields_": [
                    ("error_code", ctypes.c_int),
                    ("error_msg", ctypes.c_void_p),
                    ("result", ctype),
                ]
            },
        )
        _RESULT_TYPES[ctype] = cls
    return cls


ResultInt = result_of(ctypes.c_int)
ResultFloat = result_of(ctypes.c_float)
ResultBool = result_of(ctypes.c_bool)
ResultSize = result_of(ctypes.c_size_t)
ResultI8 = result_of(ctypes.c_int8)
ResultU8 = result_of(ctypes.c_uint8)
ResultPtr = result_of(ctypes.c_void_p)
ResultPoint2f = result_of(Point2fC)
ResultDMatch = result_of(DMatchC)
ResultKeyLine = result_of(KeyLineC)
ResultLSDParam = result_of(LSDParamC)

# =============================================================================
# Signatures
# =============================================================================

_P = ctypes.c_void_p
_INT = ctypes.c_int
_BOOL = ctypes.c_bool
_FLOAT = ctypes.c_float
_SIZE = ctypes.c_size_t
_STR = ctypes.c_char_p

# Element types of the bound std::vector specialisations:
# name -> (extern receive type, extern send type)
VECTOR_TYPES: dict[str, tuple[Any, Any]] = {
    "VectorOfKeyLine": (KeyLineC, ctypes.POINTER(KeyLineC)),
    "VectorOfDMatch": (DMatchC, ctypes.POINTER(DMatchC)),
    "VectorOfMat": (_P, _P),
    "VectorOfVectorOfKeyLine": (_P, _P),
    "VectorOfVectorOfDMatch": (_P, _P),
    "VectorOfi8": (ctypes.c_int8, ctypes.c_int8),
    "VectorOfu8": (ctypes.c_uint8, ctypes.c_uint8),
}

# Byte-like vectors that can be built from a pointer + length slice
SLICE_VECTOR_TYPES = ("VectorOfi8", "VectorOfu8")

# Classes handed out as cv::Ptr<T> by the create* factories
SMART_PTR_TYPES = ("BinaryDescriptor", "BinaryDescriptorMatcher", "LSDDetector")

_LD = "cv_line_descriptor_"
_BD = _LD + "BinaryDescriptor_"
_BDP = _LD + "BinaryDescriptor_Params_"
_BDM = _LD + "BinaryDescriptorMatcher_"
_LSD = _LD + "LSDDetector_"
_KL = _LD + "KeyLine_"

SIGNATURES: dict[str, tuple[list[Any], Any]] = {
    # Native-owned text and bytes
    "ocvrs_string_delete": ([_P], None),
    "ocvrs_bytes_delete": ([_P], None),
    # cv::Mat
    "cv_Mat_Mat": ([], ResultPtr),
    "cv_Mat_Mat_int_int_int": ([_INT, _INT, _INT], ResultPtr),
    "cv_Mat_delete": ([_P], None),
    "cv_Mat_rows_const": ([_P], ResultInt),
    "cv_Mat_cols_const": ([_P], ResultInt),
    "cv_Mat_type_const": ([_P], ResultInt),
    "cv_Mat_empty_const": ([_P], ResultBool),
    # cv::FileNode
    "cv_FileNode_FileNode": ([], ResultPtr),
    "cv_FileNode_delete": ([_P], None),
    "cv_FileNode_empty_const": ([_P], ResultBool),
    "cv_FileNode_name_const": ([_P], ResultPtr),
    # cv::FileStorage
    "cv_FileStorage_FileStorage": ([], ResultPtr),
    "cv_FileStorage_FileStorage_const_StringR_int_const_StringR": (
        [_STR, _INT, _STR],
        ResultPtr,
    ),
    "cv_FileStorage_delete": ([_P], None),
    "cv_FileStorage_isOpened_const": ([_P], ResultBool),
    "cv_FileStorage_release": ([_P], ResultVoid),
    "cv_FileStorage_releaseAndGetString": ([_P], ResultPtr),
    "cv_FileStorage_getFirstTopLevelNode_const": ([_P], ResultPtr),
    "cv_FileStorage_operator___const_const_StringR": ([_P, _STR], ResultPtr),
    # Free functions
    _LD + "drawKeylines_const_MatR_const_vector_KeyLine_R_MatR_const_ScalarR_int": (
        [_P, _P, _P, ctypes.POINTER(ScalarC), _INT],
        ResultVoid,
    ),
    _LD
    + "drawLineMatches_const_MatR_const_vector_KeyLine_R_const_MatR_const_vector_KeyLine_R"
    "_const_vector_DMatch_R_MatR_const_ScalarR_const_ScalarR_const_vector_char_R_int": (
        [_P, _P, _P, _P, _P, _P, ctypes.POINTER(ScalarC), ctypes.POINTER(ScalarC), _P, _INT],
        ResultVoid,
    ),
    # BinaryDescriptor
    "cv_BinaryDescriptor_delete": ([_P], None),
    _BD + "BinaryDescriptor_const_ParamsR": ([_P], ResultPtr),
    _BD + "createBinaryDescriptor": ([], ResultPtr),
    _BD + "createBinaryDescriptor_Params": ([_P], ResultPtr),
    _BD + "getNumOfOctaves": ([_P], ResultInt),
    _BD + "setNumOfOctaves_int": ([_P, _INT], ResultVoid),
    _BD + "getWidthOfBand": ([_P], ResultInt),
    _BD + "setWidthOfBand_int": ([_P, _INT], ResultVoid),
    _BD + "getReductionRatio": ([_P], ResultInt),
    _BD + "setReductionRatio_int": ([_P, _INT], ResultVoid),
    _BD + "read_const_FileNodeR": ([_P, _P], ResultVoid),
    _BD + "write_const_FileStorageR": ([_P, _P], ResultVoid),
    _BD + "detect_const_MatR_vector_KeyLine_R_const_MatR": ([_P, _P, _P, _P], ResultVoid),
    _BD + "detect_const_const_vector_Mat_R_vector_vector_KeyLine__R_const_vector_Mat_R": (
        [_P, _P, _P, _P],
        ResultVoid,
    ),
    _BD + "compute_const_const_MatR_vector_KeyLine_R_MatR_bool": (
        [_P, _P, _P, _P, _BOOL],
        ResultVoid,
    ),
    _BD + "compute_const_const_vector_Mat_R_vector_vector_KeyLine__R_vector_Mat_R_bool": (
        [_P, _P, _P, _P, _BOOL],
        ResultVoid,
    ),
    _BD + "descriptorSize_const": ([_P], ResultInt),
    _BD + "descriptorType_const": ([_P], ResultInt),
    _BD + "defaultNorm_const": ([_P], ResultInt),
    # BinaryDescriptor::Params
    "cv_BinaryDescriptor_Params_delete": ([_P], None),
    _BDP + "Params": ([], ResultPtr),
    _BDP + "getPropNumOfOctave__const": ([_P], ResultInt),
    _BDP + "setPropNumOfOctave__int": ([_P, _INT], ResultVoid),
    _BDP + "getPropWidthOfBand__const": ([_P], ResultInt),
    _BDP + "setPropWidthOfBand__int": ([_P, _INT], ResultVoid),
    _BDP + "getPropReductionRatio_const": ([_P], ResultInt),
    _BDP + "setPropReductionRatio_int": ([_P, _INT], ResultVoid),
    _BDP + "getPropKsize__const": ([_P], ResultInt),
    _BDP + "setPropKsize__int": ([_P, _INT], ResultVoid),
    _BDP + "read_const_FileNodeR": ([_P, _P], ResultVoid),
    _BDP + "write_const_FileStorageR": ([_P, _P], ResultVoid),
    # BinaryDescriptorMatcher
    "cv_BinaryDescriptorMatcher_delete": ([_P], None),
    _BDM + "BinaryDescriptorMatcher": ([], ResultPtr),
    _BDM + "createBinaryDescriptorMatcher": ([], ResultPtr),
    _BDM + "match_const_const_MatR_const_MatR_vector_DMatch_R_const_MatR": (
        [_P, _P, _P, _P, _P],
        ResultVoid,
    ),
    _BDM + "match_const_MatR_vector_DMatch_R_const_vector_Mat_R": ([_P, _P, _P, _P], ResultVoid),
    _BDM + "knnMatch_const_const_MatR_const_MatR_vector_vector_DMatch__R_int_const_MatR_bool": (
        [_P, _P, _P, _P, _INT, _P, _BOOL],
        ResultVoid,
    ),
    _BDM + "knnMatch_const_MatR_vector_vector_DMatch__R_int_const_vector_Mat_R_bool": (
        [_P, _P, _P, _INT, _P, _BOOL],
        ResultVoid,
    ),
    _BDM
    + "radiusMatch_const_const_MatR_const_MatR_vector_vector_DMatch__R_float_const_MatR_bool": (
        [_P, _P, _P, _P, _FLOAT, _P, _BOOL],
        ResultVoid,
    ),
    _BDM + "radiusMatch_const_MatR_vector_vector_DMatch__R_float_const_vector_Mat_R_bool": (
        [_P, _P, _P, _FLOAT, _P, _BOOL],
        ResultVoid,
    ),
    _BDM + "add_const_vector_Mat_R": ([_P, _P], ResultVoid),
    _BDM + "train": ([_P], ResultVoid),
    _BDM + "clear": ([_P], ResultVoid),
    # KeyLine
    _KL + "KeyLine": ([], ResultKeyLine),
    _KL + "getStartPoint_const": ([ctypes.POINTER(KeyLineC)], ResultPoint2f),
    _KL + "getEndPoint_const": ([ctypes.POINTER(KeyLineC)], ResultPoint2f),
    _KL + "getStartPointInOctave_const": ([ctypes.POINTER(KeyLineC)], ResultPoint2f),
    _KL + "getEndPointInOctave_const": ([ctypes.POINTER(KeyLineC)], ResultPoint2f),
    # LSDParam
    _LD + "LSDParam_LSDParam": ([], ResultLSDParam),
    # LSDDetector
    "cv_LSDDetector_delete": ([_P], None),
    _LSD + "LSDDetector": ([], ResultPtr),
    _LSD + "LSDDetector_LSDParam": ([ctypes.POINTER(LSDParamC)], ResultPtr),
    _LSD + "createLSDDetector": ([], ResultPtr),
    _LSD + "createLSDDetector_LSDParam": ([ctypes.POINTER(LSDParamC)], ResultPtr),
    _LSD + "detect_const_MatR_vector_KeyLine_R_int_int_const_MatR": (
        [_P, _P, _P, _INT, _INT, _P],
        ResultVoid,
    ),
    _LSD + "detect_const_const_vector_Mat_R_vector_vector_KeyLine__R_int_int_const_vector_Mat_R": (
        [_P, _P, _P, _INT, _INT, _P],
        ResultVoid,
    ),
}

# std::vector<T> specialisations
for _name, (_receive, _send) in VECTOR_TYPES.items():
    SIGNATURES[f"cv_{_name}_new"] = ([], ResultPtr)
    SIGNATURES[f"cv_{_name}_delete"] = ([_P], None)
    SIGNATURES[f"cv_{_name}_len"] = ([_P], ResultSize)
    SIGNATURES[f"cv_{_name}_get"] = ([_P, _SIZE], result_of(_receive))
    SIGNATURES[f"cv_{_name}_push"] = ([_P, _send], ResultVoid)
    SIGNATURES[f"cv_{_name}_clear"] = ([_P], ResultVoid)

for _name in SLICE_VECTOR_TYPES:
    SIGNATURES[f"cv_{_name}_from_slice"] = ([_P, _SIZE], ResultPtr)
SIGNATURES["cv_VectorOfu8_to_bytes"] = ([_P], ResultPtr)

# cv::Ptr<T> specialisations
for _name in SMART_PTR_TYPES:
    SIGNATURES[f"cv_PtrOf{_name}_delete"] = ([_P], None)
    SIGNATURES[f"cv_PtrOf{_name}_get_inner_ptr"] = ([_P], _P)


def setup_signatures(lib: Any) -> None:
    """Assign argtypes/restype for every known entry point on ``lib``.

    Entry points missing from the library are skipped; calling one later
    raises ``AttributeError`` from ctypes.
    """
    for name, (argtypes, restype) in SIGNATURES.items():
        try:
            fn = getattr(lib, name)
        except AttributeError:
            continue
        fn.argtypes = argtypes
        fn.restype = restype
