"""
One-sided Jacobi singular-value solver.

Provides jacobi_svd() as the full entry point returning a JacobiSolution,
and jacobi_singular_values() returning just the singular values.

Singular values are always returned in ascending order.
"""

from __future__ import annotations

import math
import warnings

import numpy as np

from pylap.core.compute.timing import Timer
from pylap.core.compute.tolerances import DEFAULT_TOLERANCES, SolverTolerances
from pylap.core.exceptions import (
    AliasingError,
    ConvergenceError,
    DimensionError,
    ValidationError,
)
from pylap.core.protocols import MatrixLike
from pylap.core.result import Result
from pylap.core.validation import check_finite
from pylap.decomposition._jacobi import rotate_columns, rotation
from pylap.decomposition.solution import JacobiParams, JacobiSolution
from pylap.matrix._materialize import as_array
from pylap.matrix.aliasing import aliased
from pylap.matrix.arithmetic import copy
from pylap.matrix.dense import Dense
from pylap.matrix.reductions import dot, norm
from pylap.matrix.vector import DenseVector
from pylap.matrix.views import identity


def _working_copy(a: MatrixLike, overwrite_a: bool) -> Dense:
    if overwrite_a:
        if not isinstance(a, Dense):
            raise ValidationError(
                f"overwrite_a requires a Dense matrix, got {type(a).__name__}"
            )
        return a
    work = Dense(*a.dims())
    work.as_array()[...] = as_array(a)
    return work


def _check_accumulator(v: Dense, n_cols: int, work: Dense) -> None:
    if not isinstance(v, Dense):
        raise ValidationError(f"v: expected Dense, got {type(v).__name__}")
    if v.dims() != (n_cols, n_cols):
        raise DimensionError(
            f"v: accumulator has shape {v.dims()}, expected ({n_cols}, {n_cols})"
        )
    if aliased(v, work):
        raise AliasingError(
            "v: accumulator shares storage with the matrix being rotated",
            operation='jacobi_svd',
        )


def _singular_values(sigma: list[float]) -> tuple[np.ndarray, np.ndarray, int]:
    """
    Ascending order and square roots of the squared column norms.

    Returns:
        (values, order, n_discarded) where n_discarded counts positive
        entries forced to zero because they follow a non-positive one
    """
    sq = np.asarray(sigma, dtype=np.float64)
    order = np.argsort(sq, kind='stable')
    sq = sq[order]
    values = np.zeros_like(sq)
    for k, s in enumerate(sq):
        # everything from the first non-positive entry on is rank-deficiency residue
        if s <= 0:
            return values, order, int(np.count_nonzero(sq[k:] > 0))
        values[k] = math.sqrt(s)
    return values, order, 0


def jacobi_svd(
    a: MatrixLike,
    *,
    compute_v: bool = False,
    v: Dense | None = None,
    overwrite_a: bool = False,
    tolerances: SolverTolerances = DEFAULT_TOLERANCES,
) -> JacobiSolution:
    """
    Singular values by one-sided Jacobi rotations.

    Column pairs (p, q), p < q, are rotated until every pair is
    orthogonal to working precision. A sweep with zero rotations ends the
    iteration.

    Parameters
    ----------
    a : MatrixLike
        Matrix with n rows and m columns.
    compute_v : bool
        Also accumulate the applied rotations into an m x m matrix started
        from the identity.
    v : Dense, optional
        Caller-owned m x m matrix that receives the accumulated rotations
        instead of a fresh allocation. Implies compute_v. Written only
        after convergence.
    overwrite_a : bool
        Rotate a (which must be Dense) in place instead of a private copy.
    tolerances : SolverTolerances
        jacobi_rtol and max_sweeps are used.

    Returns
    -------
    JacobiSolution with ascending singular values.

    Raises
    ------
    DimensionError
        If v does not have shape (m, m).
    ConvergenceError
        If rotations are still applied after max_sweeps sweeps. A
        supplied v is left unchanged.

    Warns
    -----
    RuntimeWarning
        If positive values were zeroed because a smaller sorted entry was
        non-positive (rank-deficient input). Also recorded in
        JacobiSolution.warnings.
    """
    timer = Timer()
    timer.start()

    with timer.section('setup'):
        work = _working_copy(a, overwrite_a)
        check_finite(work.as_array(), 'a')
        n_cols = work.dims()[1]
        accumulate = compute_v or v is not None
        if v is not None:
            _check_accumulator(v, n_cols, work)
        # rotations go to a private accumulator; v is written only on convergence
        acc = copy(identity(n_cols), out=Dense(n_cols, n_cols)) if accumulate else None

        cols = [work.col_view(j) for j in range(n_cols)]
        acc_cols = [acc.col_view(j) for j in range(n_cols)] if acc is not None else None
        sigma = [dot(col, col) for col in cols]
        rtol = tolerances.jacobi_rtol
        threshold = rtol * norm(work, 2)

    total_rotations = 0
    rotations = 0
    with timer.section('sweeps'):
        for sweep in range(1, tolerances.max_sweeps + 1):
            rotations = 0
            for p in range(n_cols):
                for q in range(p + 1, n_cols):
                    sp = sigma[p]
                    sq = sigma[q]
                    spq = sp * sq
                    beta = dot(cols[p], cols[q])
                    if spq > threshold and abs(beta) >= rtol * math.sqrt(spq):
                        c, s, t = rotation(sp, beta, sq)
                        rotate_columns(cols[p], cols[q], c, s)
                        if acc_cols is not None:
                            rotate_columns(acc_cols[p], acc_cols[q], c, s)
                        sigma[p] = sp - beta * t
                        sigma[q] = sq + beta * t
                        rotations += 1
            total_rotations += rotations
            if rotations == 0:
                break
        else:
            raise ConvergenceError(
                f"Jacobi did not converge in {tolerances.max_sweeps} sweeps "
                f"({rotations} rotations in the last sweep)",
                iterations=tolerances.max_sweeps,
                rotations=rotations,
                reason='max_sweeps',
                threshold=threshold,
            )

    warn_list = []
    with timer.section('postprocess'):
        values, order, n_discarded = _singular_values(sigma)
        if acc is not None:
            grid = acc.as_array()
            grid[...] = grid[:, order]
            if v is not None:
                v.as_array()[...] = grid
                acc = v

    if n_discarded:
        msg = (
            f"{n_discarded} positive squared column norm(s) follow a "
            f"non-positive one and were set to zero"
        )
        warnings.warn(msg, RuntimeWarning, stacklevel=2)
        warn_list.append(msg)

    timer.stop()

    result = Result(
        params=JacobiParams(
            singular_values=DenseVector(n_cols, values),
            v=acc,
        ),
        info={
            'method': 'one_sided_jacobi',
            'converged': True,
            'sweeps': sweep,
            'rotations': total_rotations,
            'threshold': threshold,
            'order': 'ascending',
            'tolerances': tolerances.name,
        },
        timing=timer.result(),
        solver_name='jacobi_svd',
        warnings=tuple(warn_list),
    )
    return JacobiSolution(_result=result)


def jacobi_singular_values(
    a: MatrixLike,
    *,
    overwrite_a: bool = False,
    tolerances: SolverTolerances = DEFAULT_TOLERANCES,
) -> DenseVector:
    """
    Singular values of a, ascending. See jacobi_svd().
    """
    return jacobi_svd(
        a, overwrite_a=overwrite_a, tolerances=tolerances,
    ).singular_values
