"""
FFI bindings for the core collaborators (Mat, FileNode, FileStorage, vectors).

Justification: wrappers take already-marshalled arguments (raw handles,
extern containers) and return the unwrapped ``Result`` payload, so the
classes in this package stay free of ctypes details.
"""

from typing import Any

from .._bindings import check, get_lib

# =============================================================================
# cv::Mat
# =============================================================================


def call_mat_new() -> int:
    """Create an empty cv::Mat. Returns the owned handle."""
    return check(get_lib().cv_Mat_Mat(), {"operation": "Mat"})


def call_mat_new_rows_cols(rows: Any, cols: Any, typ: Any) -> int:
    """Create a cv::Mat of the given size and type. Returns the owned handle."""
    return check(
        get_lib().cv_Mat_Mat_int_int_int(rows, cols, typ),
        {"operation": "Mat", "rows": rows.value, "cols": cols.value},
    )


def call_mat_rows(handle: Any) -> int:
    return check(get_lib().cv_Mat_rows_const(handle), {"operation": "Mat.rows"})


def call_mat_cols(handle: Any) -> int:
    return check(get_lib().cv_Mat_cols_const(handle), {"operation": "Mat.cols"})


def call_mat_type(handle: Any) -> int:
    return check(get_lib().cv_Mat_type_const(handle), {"operation": "Mat.type"})


def call_mat_empty(handle: Any) -> bool:
    return check(get_lib().cv_Mat_empty_const(handle), {"operation": "Mat.empty"})


# =============================================================================
# cv::FileNode
# =============================================================================


def call_file_node_new() -> int:
    return check(get_lib().cv_FileNode_FileNode(), {"operation": "FileNode"})


def call_file_node_empty(handle: Any) -> bool:
    return check(get_lib().cv_FileNode_empty_const(handle), {"operation": "FileNode.empty"})


def call_file_node_name(handle: Any) -> Any:
    """Returns a native string handle owned by the caller."""
    return check(get_lib().cv_FileNode_name_const(handle), {"operation": "FileNode.name"})


# =============================================================================
# cv::FileStorage
# =============================================================================


def call_file_storage_new() -> int:
    return check(get_lib().cv_FileStorage_FileStorage(), {"operation": "FileStorage"})


def call_file_storage_open(filename: Any, flags: Any, encoding: Any, source: str) -> int:
    """Open a FileStorage. ``filename``/``encoding`` are C string pointers."""
    return check(
        get_lib().cv_FileStorage_FileStorage_const_StringR_int_const_StringR(
            filename, flags, encoding
        ),
        {"operation": "FileStorage", "source": source},
    )


def call_file_storage_is_opened(handle: Any) -> bool:
    return check(
        get_lib().cv_FileStorage_isOpened_const(handle), {"operation": "FileStorage.isOpened"}
    )


def call_file_storage_release(handle: Any) -> None:
    check(get_lib().cv_FileStorage_release(handle), {"operation": "FileStorage.release"})


def call_file_storage_release_and_get_string(handle: Any) -> Any:
    """Returns a native string handle owned by the caller."""
    return check(
        get_lib().cv_FileStorage_releaseAndGetString(handle),
        {"operation": "FileStorage.releaseAndGetString"},
    )


def call_file_storage_first_top_level_node(handle: Any) -> int:
    return check(
        get_lib().cv_FileStorage_getFirstTopLevelNode_const(handle),
        {"operation": "FileStorage.getFirstTopLevelNode"},
    )


def call_file_storage_node(handle: Any, nodename: Any, name: str) -> int:
    return check(
        get_lib().cv_FileStorage_operator___const_const_StringR(handle, nodename),
        {"operation": "FileStorage[]", "name": name},
    )


# =============================================================================
# std::vector<T>
# =============================================================================


def _vector_fn(native_name: str, suffix: str) -> Any:
    return getattr(get_lib(), f"cv_{native_name}_{suffix}")


def call_vector_new(native_name: str) -> int:
    return check(_vector_fn(native_name, "new")(), {"operation": f"{native_name}.new"})


def call_vector_len(native_name: str, handle: Any) -> int:
    return check(_vector_fn(native_name, "len")(handle), {"operation": f"{native_name}.len"})


def call_vector_get(native_name: str, handle: Any, index: int) -> Any:
    """Returns the element in its extern receive form."""
    return check(
        _vector_fn(native_name, "get")(handle, index),
        {"operation": f"{native_name}.get", "index": index},
    )


def call_vector_push(native_name: str, handle: Any, value: Any) -> None:
    check(_vector_fn(native_name, "push")(handle, value), {"operation": f"{native_name}.push"})


def call_vector_clear(native_name: str, handle: Any) -> None:
    check(_vector_fn(native_name, "clear")(handle), {"operation": f"{native_name}.clear"})


def call_vector_from_slice(native_name: str, data: Any, length: int) -> int:
    return check(
        _vector_fn(native_name, "from_slice")(data, length),
        {"operation": f"{native_name}.from_slice", "length": length},
    )


def call_vector_u8_to_bytes(handle: Any) -> Any:
    """Returns a native byte string handle owned by the caller."""
    return check(get_lib().cv_VectorOfu8_to_bytes(handle), {"operation": "VectorOfu8.to_bytes"})
