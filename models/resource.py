"""
Resource vector helpers for the Banker's Safety Checker.

A resource vector holds one non-negative count per resource type. The same
shape is used for system availability, a process's maximum demand, its
current allocation and its remaining need.
"""

import numpy as np
from typing import Sequence


class MalformedSnapshot(ValueError):
    """Exception raised when a snapshot violates its dimension or value invariants."""
    pass


def _as_int_array(values, name: str) -> np.ndarray:
    """Convert values to an integer ndarray, rejecting ragged or non-integer data."""
    try:
        array = np.array(values)
    except ValueError as e:
        raise MalformedSnapshot(f"{name}: rows have inconsistent lengths ({e})")

    # Empty lists come back as float64; there is nothing to truncate
    if array.size == 0:
        return array.astype(np.int64)

    if not np.issubdtype(array.dtype, np.integer):
        raise MalformedSnapshot(
            f"{name}: expected integer resource counts, got dtype {array.dtype}"
        )

    # Counts in [2**63, 2**64) arrive as uint64 and would wrap on conversion
    if array.dtype.kind == 'u' and int(array.max()) > np.iinfo(np.int64).max:
        raise MalformedSnapshot(
            f"{name}: resource count {int(array.max())} exceeds the int64 range"
        )
    return array.astype(np.int64)


def resource_vector(values: Sequence[int], name: str = "vector") -> np.ndarray:
    """
    Build a read-only resource vector [R].

    Args:
        values: One count per resource type
        name: Label used in error messages

    Returns:
        Frozen 1-D integer array

    Raises:
        MalformedSnapshot: If values are not a flat sequence of integers
    """
    vector = _as_int_array(values, name)
    if vector.ndim != 1:
        raise MalformedSnapshot(f"{name}: expected a 1-D vector, got shape {vector.shape}")
    vector.flags.writeable = False
    return vector


def resource_matrix(rows, num_rows: int, num_cols: int, name: str = "matrix") -> np.ndarray:
    """
    Build a read-only [P][R] matrix, one resource vector per process.

    Args:
        rows: Sequence of per-process rows
        num_rows: Expected number of processes (P)
        num_cols: Expected number of resource types (R)
        name: Label used in error messages

    Returns:
        Frozen 2-D integer array of shape (num_rows, num_cols)

    Raises:
        MalformedSnapshot: If the row count or any row length is wrong
    """
    if len(rows) != num_rows:
        raise MalformedSnapshot(
            f"{name}: expected {num_rows} process rows, got {len(rows)}"
        )
    for i, row in enumerate(rows):
        if np.ndim(row) != 1 or len(row) != num_cols:
            raise MalformedSnapshot(
                f"{name}: row for P{i} must have {num_cols} entries, got {np.shape(row)}"
            )

    matrix = _as_int_array(rows, name).reshape(num_rows, num_cols)
    matrix.flags.writeable = False
    return matrix
