"""
Sparse ingestion.

Public API:
    SparseAccum     - coordinate triple accumulator
    Sparse          - dictionary-backed sparse matrix
    from_coo        - Sparse from parallel (row, col, value) lists
"""

from pylap.sparse.accum import Sparse, SparseAccum, from_coo

__all__ = [
    "Sparse",
    "SparseAccum",
    "from_coo",
]
