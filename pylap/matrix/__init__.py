"""
Matrix data model, views, aliasing and arithmetic.

Public API:
    Dense, DenseVector          - row-major storage and strided vectors
    new_dense, new_vector       - constructor functions
    identity(n)                 - storage-free identity
    transpose, slice_matrix, slice_exclude, slice_vec, slice_exclude_vec
                                - zero-copy views
    aliased, backing_buffer     - aliasing detector
    add, sub, mul, scale, mul_elem, mul_vec, copy, copy_blocks
                                - arithmetic (value-returning or out=)
    dot, norm, sum_elements, max_element, min_element, argmax
                                - reductions
"""

from pylap.matrix.base import Matrix, Vector
from pylap.matrix.vector import DenseVector
from pylap.matrix.dense import Dense, new_dense, new_vector
from pylap.matrix.views import (
    Exclude,
    Identity,
    Slice,
    SliceVector,
    Transpose,
    identity,
    slice_exclude,
    slice_exclude_vec,
    slice_matrix,
    slice_vec,
    transpose,
)
from pylap.matrix.aliasing import aliased, backing_buffer
from pylap.matrix.arithmetic import (
    add,
    copy,
    copy_blocks,
    mul,
    mul_elem,
    mul_vec,
    scale,
    sub,
)
from pylap.matrix.reductions import (
    argmax,
    dot,
    max_element,
    min_element,
    norm,
    sum_elements,
)

__all__ = [
    # Types
    "Matrix",
    "Vector",
    "Dense",
    "DenseVector",
    "Transpose",
    "Slice",
    "Exclude",
    "SliceVector",
    "Identity",
    # Construction
    "new_dense",
    "new_vector",
    "identity",
    # Views
    "transpose",
    "slice_matrix",
    "slice_exclude",
    "slice_vec",
    "slice_exclude_vec",
    # Aliasing
    "aliased",
    "backing_buffer",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "scale",
    "mul_elem",
    "mul_vec",
    "copy",
    "copy_blocks",
    # Reductions
    "dot",
    "norm",
    "sum_elements",
    "max_element",
    "min_element",
    "argmax",
]
