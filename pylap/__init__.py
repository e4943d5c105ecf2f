"""
pylap: compact dense/sparse linear algebra for constrained deployments.

Row-major matrices over shared float64 buffers, zero-copy views, a
buffer-aliasing detector, and two standalone algorithms: one-sided Jacobi
singular values and Gauss-Jordan inversion.

Submodules:
    matrix: Storage, views, aliasing, arithmetic and reductions
    sparse: Coordinate-format ingestion
    decomposition: One-sided Jacobi singular values
    inversion: Gauss-Jordan inverse
"""

__version__ = "0.1.0"

from pylap import matrix
from pylap import sparse
from pylap import decomposition
from pylap import inversion

from pylap.matrix import (
    Dense,
    DenseVector,
    new_dense,
    new_vector,
    identity,
    transpose,
    slice_matrix,
    slice_exclude,
    add,
    sub,
    mul,
    scale,
    dot,
    norm,
)
from pylap.decomposition import jacobi_singular_values, jacobi_svd
from pylap.inversion import invert_square

__all__ = [
    "__version__",
    "matrix",
    "sparse",
    "decomposition",
    "inversion",
    "Dense",
    "DenseVector",
    "new_dense",
    "new_vector",
    "identity",
    "transpose",
    "slice_matrix",
    "slice_exclude",
    "add",
    "sub",
    "mul",
    "scale",
    "dot",
    "norm",
    "jacobi_singular_values",
    "jacobi_svd",
    "invert_square",
]
