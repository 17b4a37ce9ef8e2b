# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

TOPSIS ranking of alternatives against weighted benefit / cost criteria.

Usage
-----
>>> from mcdm import rank
>>> ranking = rank([0.5, 0.5], [True, False], [3, 1, 2, 4, 2, 6])
>>> [a.id for a in ranking]

>>> from mcdm import TOPSISCalculator
>>> TOPSISCalculator(cost_criteria=['price']).calculate(df, weights)
"""

from .base import (
    TOPSISError,
    ShapeMismatchError,
    InvalidShapeError,
    InvalidWeightError,
    DegenerateColumnError,
    Alternative,
    build_matrix,
)
from .topsis import (
    rank,
    compute_topsis,
    TOPSISArtifacts,
    TOPSISCalculator,
    TOPSISResult,
)


__all__ = [
    # Entry point
    'rank',
    'Alternative',

    # Pipeline internals
    'compute_topsis',
    'TOPSISArtifacts',
    'build_matrix',

    # DataFrame front end
    'TOPSISCalculator', 'TOPSISResult',

    # Errors
    'TOPSISError',
    'ShapeMismatchError',
    'InvalidShapeError',
    'InvalidWeightError',
    'DegenerateColumnError',
]
