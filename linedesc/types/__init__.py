"""
Marshalling layer.

Converts values between their owned Python form and the representation
native code expects:

- scalars: ``CopyType`` marshallers (``I32``, ``F32``, ``BOOL``...)
- fixed-layout aggregates: ``SimpleType`` + ``opencv_type_simple``
- opaque native objects: ``Boxed`` and ``ptr_of``
- text: ``CString`` and the ``STRING`` marshaller
- byte buffers: ``ByteBuffer`` and the ``BYTES`` marshaller
"""

from .boxed import Boxed, ptr_of
from .buffer import BYTES, ByteBuffer, BytesType, receive_bytes
from .marshal import (
    BOOL,
    CONST_VOID_PTR,
    COPY_TYPES,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    ISIZE,
    MUT_VOID_PTR,
    U8,
    U16,
    U32,
    U64,
    USIZE,
    VOID,
    CopyType,
    OpenCVType,
    OpenCVTypeArg,
    OpenCVTypeExternContainer,
    ScalarContainer,
    arg_container,
    receive,
)
from .simple import SimpleType, opencv_type_simple
from .text import STRING, CString, StringType, cstring_new_nofail, receive_string

__all__ = [
    # Contracts
    "OpenCVType",
    "OpenCVTypeArg",
    "OpenCVTypeExternContainer",
    "arg_container",
    "receive",
    # Scalars
    "CopyType",
    "ScalarContainer",
    "COPY_TYPES",
    "VOID",
    "BOOL",
    "I8",
    "U8",
    "I16",
    "U16",
    "I32",
    "U32",
    "I64",
    "U64",
    "F32",
    "F64",
    "ISIZE",
    "USIZE",
    "CONST_VOID_PTR",
    "MUT_VOID_PTR",
    # Aggregates
    "SimpleType",
    "opencv_type_simple",
    # Opaque objects
    "Boxed",
    "ptr_of",
    # Text
    "CString",
    "STRING",
    "StringType",
    "cstring_new_nofail",
    "receive_string",
    # Bytes
    "ByteBuffer",
    "BYTES",
    "BytesType",
    "receive_bytes",
]
