"""
One-sided Jacobi rotation kernel.

A rotation G = [c, s; -s, c] applied on the right to a column pair makes
the pair orthogonal. It is the plane similarity transformation

    [ c  s ]T [ alpha  beta  ] [ c  s ]   [ l1  0  ]
    [-s  c ]  [ beta   gamma ] [-s  c ] = [ 0   l2 ]

where alpha, gamma are the squared column norms and beta their inner
product.
"""

from __future__ import annotations

import math

from pylap.matrix.vector import DenseVector


def rotation(alpha: float, beta: float, gamma: float) -> tuple[float, float, float]:
    """
    Jacobi rotation annihilating beta.

    Returns:
        (c, s, t) where t = s/c is the smaller-magnitude root of
        t^2 + 2*tau*t - 1 = 0, tau = (gamma - alpha) / (2*beta)
    """
    if beta == 0:
        return 1.0, 0.0, 0.0
    tau = (gamma - alpha) / (2.0 * beta)
    # sign(0) is taken as +1
    if tau >= 0:
        t = 1.0 / (tau + math.sqrt(1.0 + tau * tau))
    else:
        t = -1.0 / (-tau + math.sqrt(1.0 + tau * tau))
    c = 1.0 / math.sqrt(1.0 + t * t)
    return c, t * c, t


def rotate_columns(col_p: DenseVector, col_q: DenseVector, c: float, s: float) -> None:
    """Replace (p, q) by (c*p - s*q, s*p + c*q) in place."""
    xp = col_p.values()
    xq = col_q.values()
    new_p = c * xp - s * xq
    new_q = s * xp + c * xq
    xp[...] = new_p
    xq[...] = new_q
