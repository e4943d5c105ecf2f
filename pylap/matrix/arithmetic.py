"""
Element-wise and product arithmetic.

Every operation has two call shapes:

    C = add(A, B)            - allocates and returns a new Dense result
    add(A, B, out=C)         - writes into an existing Dense/DenseVector

The in-place form lets iterative loops reuse accumulators without
reallocating. All shape and aliasing checks run before the first write, so
a rejected call leaves `out` untouched.

Aliasing rules:
    - Element-wise operations (add, sub, scale, mul_elem, copy) accept
      `out` being the very same object as an operand, since each cell is
      read once and written once at the same offset. Any other overlap is
      rejected.
    - Products (mul, mul_vec) reject every overlap, including out is A,
      because partial sums read cells that may already be overwritten.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from pylap.core.exceptions import AliasingError, DimensionError, ValidationError
from pylap.core.protocols import MatrixLike, VectorLike
from pylap.core.validation import check_same_dims
from pylap.matrix._materialize import as_array, vector_values, writable_array
from pylap.matrix.aliasing import aliased
from pylap.matrix.base import Vector
from pylap.matrix.dense import Dense
from pylap.matrix.vector import DenseVector


def _allocate(shape: tuple[int, int], like: Any) -> Dense | DenseVector:
    r, c = shape
    if isinstance(like, Vector) and c == 1:
        return DenseVector(r)
    return Dense(r, c)


def _check_out(out: Any, shape: tuple[int, int], operation: str) -> None:
    writable_array(out)
    if out.dims() != shape:
        raise DimensionError(
            f"{operation}: out has shape {out.dims()}, expected {shape}"
        )


def _reject_overlap(
    out: Any,
    operands: Sequence[Any],
    operation: str,
    allow_same: bool,
) -> None:
    for operand in operands:
        if allow_same and operand is out:
            continue
        if aliased(out, operand):
            raise AliasingError(
                f"{operation}: output shares storage with an operand",
                operation=operation,
            )


def _elementwise(
    operation: str,
    operands: Sequence[MatrixLike],
    out: Any,
) -> tuple[Any, list[np.ndarray]]:
    shape = operands[0].dims()
    for k, operand in enumerate(operands[1:], start=1):
        check_same_dims(shape, operand.dims(), ('a', 'b' if k == 1 else f'operand{k}'))
    if out is None:
        out = _allocate(shape, operands[0])
    else:
        _check_out(out, shape, operation)
        _reject_overlap(out, operands, operation, allow_same=True)
    return out, [as_array(operand) for operand in operands]


def add(a: MatrixLike, b: MatrixLike, out: Any = None) -> Dense | DenseVector:
    """Element-wise sum a + b."""
    out, (x, y) = _elementwise('add', (a, b), out)
    writable_array(out)[...] = x + y
    return out


def sub(a: MatrixLike, b: MatrixLike, out: Any = None) -> Dense | DenseVector:
    """Element-wise difference a - b."""
    out, (x, y) = _elementwise('sub', (a, b), out)
    writable_array(out)[...] = x - y
    return out


def mul_elem(a: MatrixLike, b: MatrixLike, out: Any = None) -> Dense | DenseVector:
    """Element-wise (Hadamard) product."""
    out, (x, y) = _elementwise('mul_elem', (a, b), out)
    writable_array(out)[...] = x * y
    return out


def scale(f: float, a: MatrixLike, out: Any = None) -> Dense | DenseVector:
    """Multiply every element of a by f."""
    out, (x,) = _elementwise('scale', (a,), out)
    writable_array(out)[...] = f * x
    return out


def copy(src: MatrixLike, out: Any = None) -> Dense | DenseVector:
    """
    Deep element-wise copy of src.

    With out omitted a new matrix with no shared storage is returned.

    Raises:
        DimensionError: If out does not match src's shape
    """
    out, (x,) = _elementwise('copy', (src,), out)
    if out is not src:
        writable_array(out)[...] = x
    return out


def mul(a: MatrixLike, b: MatrixLike, out: Any = None) -> Dense:
    """
    Matrix product a @ b.

    Raises:
        DimensionError: If inner dimensions or out's shape do not match
        AliasingError: If out shares any storage with a or b
    """
    n, m = a.dims()
    mb, p = b.dims()
    if m != mb:
        raise DimensionError(
            f"mul: inner dimensions differ, a is ({n}, {m}) and b is ({mb}, {p})"
        )
    if out is None:
        out = Dense(n, p)
    else:
        _check_out(out, (n, p), 'mul')
        _reject_overlap(out, (a, b), 'mul', allow_same=False)
    writable_array(out)[...] = as_array(a) @ as_array(b)
    return out


def mul_vec(a: MatrixLike, b: VectorLike, out: DenseVector | None = None) -> DenseVector:
    """
    Matrix-vector product a @ b.

    Raises:
        DimensionError: If a's columns differ from b's length, or out's
            length differs from a's rows
        AliasingError: If out shares any storage with a or b
    """
    x = vector_values(b, 'b')
    m, n = a.dims()
    if n != x.size:
        raise DimensionError(
            f"mul_vec: a has {n} columns but b has {x.size} elements"
        )
    if out is None:
        out = DenseVector(m)
    else:
        if not isinstance(out, DenseVector):
            raise ValidationError(
                f"mul_vec: out must be a DenseVector, got {type(out).__name__}"
            )
        _check_out(out, (m, 1), 'mul_vec')
        _reject_overlap(out, (a, b), 'mul_vec', allow_same=False)
    out.values()[...] = as_array(a) @ x
    return out


def copy_blocks(
    blocks: Sequence[Sequence[MatrixLike]],
    out: Dense | None = None,
) -> Dense:
    """
    Assemble a grid of matrices into one dense matrix.

    blocks[i][j] lands at block row i, block column j. All blocks in a
    block row share a height; all blocks in a block column share a width.

    Raises:
        DimensionError: If the grid is ragged or out has the wrong shape
        AliasingError: If out shares storage with any block
    """
    n_brows = len(blocks)
    n_bcols = len(blocks[0]) if n_brows else 0
    if n_brows == 0 or n_bcols == 0:
        raise DimensionError("copy_blocks: empty block grid")
    for i, row in enumerate(blocks):
        if len(row) != n_bcols:
            raise DimensionError(
                f"copy_blocks: block row {i} has {len(row)} blocks, expected {n_bcols}"
            )

    heights = [row[0].dims()[0] for row in blocks]
    widths = [blk.dims()[1] for blk in blocks[0]]
    for i, row in enumerate(blocks):
        for j, blk in enumerate(row):
            r, c = blk.dims()
            if r != heights[i]:
                raise DimensionError(
                    f"copy_blocks: matrix at {i},{j} is wrong height: {r} != {heights[i]}"
                )
            if c != widths[j]:
                raise DimensionError(
                    f"copy_blocks: matrix at {i},{j} is wrong width: {c} != {widths[j]}"
                )

    shape = (sum(heights), sum(widths))
    if out is None:
        out = Dense(*shape)
    else:
        if not isinstance(out, Dense):
            raise ValidationError(
                f"copy_blocks: out must be Dense, got {type(out).__name__}"
            )
        _check_out(out, shape, 'copy_blocks')
        _reject_overlap(out, [blk for row in blocks for blk in row], 'copy_blocks', allow_same=False)

    grid = out.as_array()
    top = 0
    for i, row in enumerate(blocks):
        left = 0
        for j, blk in enumerate(row):
            grid[top:top + heights[i], left:left + widths[j]] = as_array(blk)
            left += widths[j]
        top += heights[i]
    return out
