# -*- coding: utf-8 -*-
"""
Shared types for the TOPSIS pipeline: error taxonomy, the ranked
``Alternative`` result and the column-major matrix builder.
"""

import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np


# =========================================================================
# Errors
# =========================================================================

class TOPSISError(ValueError):
    """Base class for every input error raised by the ranking pipeline."""


class ShapeMismatchError(TOPSISError):
    """Weights and directions describe a different number of criteria."""


class InvalidShapeError(TOPSISError):
    """The flat alternatives sequence cannot form an R x C matrix."""


class InvalidWeightError(TOPSISError):
    """A criterion weight is negative or not finite."""


class DegenerateColumnError(TOPSISError):
    """One or more criterion columns have a zero Euclidean norm.

    Attributes
    ----------
    columns : list of int
        Zero-based indices of the offending criteria.
    """

    def __init__(self, columns: Sequence[int]):
        self.columns = list(columns)
        super().__init__(
            f"Criterion column(s) {self.columns} have zero Euclidean norm; "
            f"vector normalization is undefined")


# =========================================================================
# Result entity
# =========================================================================

@dataclass(frozen=True)
class Alternative:
    """One ranked alternative.

    ``id`` is the zero-based row index in the input matrix and ``score``
    its relative closeness to the ideal solution (higher is better).
    """
    id: int
    score: float

    @property
    def is_degenerate(self) -> bool:
        return math.isnan(self.score)


# =========================================================================
# Validation & Matrix Builder
# =========================================================================

def validate_criteria(weights: Sequence[float],
                      directions: Sequence[bool]) -> np.ndarray:
    """Check weights against directions and return them as a float array."""
    if len(weights) != len(directions):
        raise ShapeMismatchError(
            f"criteria_weights has {len(weights)} entries but "
            f"criteria_directions has {len(directions)}")
    if len(weights) == 0:
        raise InvalidShapeError("At least one criterion is required")

    w = np.asarray(weights, dtype=float)
    bad = [j for j, v in enumerate(w) if not np.isfinite(v) or v < 0]
    if bad:
        raise InvalidWeightError(
            f"Weights must be finite and non-negative; offending criteria: {bad}")
    return w


def build_matrix(alternatives_flat: Sequence[float], n_criteria: int) -> np.ndarray:
    """
    Interpret a column-major flat sequence as an (R, C) decision matrix.

    Column ``j`` of the result is ``alternatives_flat[j*R:(j+1)*R]``.

    Raises
    ------
    InvalidShapeError
        If ``n_criteria`` is zero, the sequence is empty, or its length is
        not a multiple of ``n_criteria``.
    """
    if n_criteria <= 0:
        raise InvalidShapeError("At least one criterion is required")

    flat = np.asarray(alternatives_flat, dtype=float).ravel()
    if flat.size == 0:
        raise InvalidShapeError("At least one alternative is required")
    if flat.size % n_criteria != 0:
        raise InvalidShapeError(
            f"{flat.size} values cannot be split into {n_criteria} "
            f"criterion columns of equal length")

    n_alternatives = flat.size // n_criteria
    return flat.reshape((n_alternatives, n_criteria), order='F')


def criterion_columns(matrix: np.ndarray) -> List[np.ndarray]:
    """Return the criterion columns of an (R, C) matrix, left to right."""
    return [matrix[:, j] for j in range(matrix.shape[1])]


__all__ = [
    'TOPSISError',
    'ShapeMismatchError',
    'InvalidShapeError',
    'InvalidWeightError',
    'DegenerateColumnError',
    'Alternative',
    'validate_criteria',
    'build_matrix',
    'criterion_columns',
]
