# -*- coding: utf-8 -*-
"""
TOPSIS: Technique for Order Preference by Similarity to Ideal Solution

Ranks alternatives by their relative closeness to a synthetic ideal
profile and distance from a synthetic anti-ideal profile.

Steps
-----
1. Vector-normalise each criterion column:  r_ij = x_ij / ||x_j||.
2. Weight:                                  v_ij = w_j × r_ij.
3. Ideal (A⁺) and anti-ideal (A⁻) per criterion, respecting the
   benefit / cost direction.
4. Euclidean separations:
       D⁺_i = sqrt(Σ_j (v_ij − A⁺_j)²),   D⁻_i = sqrt(Σ_j (v_ij − A⁻_j)²)
5. Relative closeness  C_i = D⁻_i / (D⁺_i + D⁻_i),  ranked descending.

Degenerate inputs
-----------------
- An all-zero column has no defined vector normalisation.  Depending on
  ``TOPSISConfig.zero_norm_policy`` it either raises
  :class:`DegenerateColumnError` or turns into NaN that reaches every
  affected score; NaN scores rank after all finite ones.
- When D⁺ + D⁻ = 0 (every column constant, e.g. a single alternative) the
  closeness is ``TOPSISConfig.degenerate_score`` (0.5).

References
----------
[1] Hwang, C.L. & Yoon, K. (1981). "Multiple Attribute Decision Making:
    Methods and Applications." Springer-Verlag, Berlin.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from config import TOPSISConfig, ZeroNormPolicy, get_config
from loggers import log_context, log_execution
from .base import (
    Alternative,
    DegenerateColumnError,
    build_matrix,
    criterion_columns,
    validate_criteria,
)

logger = logging.getLogger('topsis.mcdm')


# =========================================================================
# Pipeline stages
# =========================================================================

def normalize_and_weight(matrix: np.ndarray,
                         weights: np.ndarray,
                         zero_norm_policy: ZeroNormPolicy = ZeroNormPolicy.PROPAGATE,
                         ) -> np.ndarray:
    """
    Vector-normalise every column to unit length, then apply its weight.

    A zero-weight column comes out all zero whatever its values, so an
    all-zero column only counts as degenerate when its weight is nonzero.
    """
    weights = np.asarray(weights, dtype=float)
    norms = np.sqrt((matrix ** 2).sum(axis=0))

    zero_cols = np.flatnonzero((norms == 0) & (weights != 0)).tolist()
    if zero_cols:
        if zero_norm_policy is ZeroNormPolicy.RAISE:
            raise DegenerateColumnError(zero_cols)
        logger.warning(f"Zero-norm criterion column(s) {zero_cols}: "
                       f"scores of affected alternatives will be NaN")

    with np.errstate(divide='ignore', invalid='ignore'):
        normalized = matrix / norms
    weighted = normalized * weights
    weighted[:, weights == 0] = 0.0
    return weighted


def ideal_solutions(weighted: np.ndarray,
                    directions: Sequence[bool],
                    ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Positive-ideal and negative-ideal profiles, one value per criterion.

    Benefit criteria take (max, min), cost criteria (min, max).
    """
    n = weighted.shape[1]
    pis = np.zeros(n, dtype=float)
    nis = np.zeros(n, dtype=float)
    for j, (col, is_benefit) in enumerate(zip(criterion_columns(weighted), directions)):
        col_max, col_min = col.max(), col.min()
        if is_benefit:
            pis[j], nis[j] = col_max, col_min
        else:
            pis[j], nis[j] = col_min, col_max
    return pis, nis


def separation_distances(weighted: np.ndarray,
                         pis: np.ndarray,
                         nis: np.ndarray,
                         ) -> Tuple[np.ndarray, np.ndarray]:
    """Euclidean distance of every alternative to A⁺ (D⁺) and A⁻ (D⁻)."""
    d_pos = np.sqrt(((weighted - pis) ** 2).sum(axis=1))
    d_neg = np.sqrt(((weighted - nis) ** 2).sum(axis=1))
    return d_pos, d_neg


def relative_closeness(d_pos: np.ndarray,
                       d_neg: np.ndarray,
                       degenerate_score: float = 0.5) -> np.ndarray:
    """C_i = D⁻ / (D⁺ + D⁻); ``degenerate_score`` where both are zero."""
    total = d_pos + d_neg
    with np.errstate(divide='ignore', invalid='ignore'):
        closeness = d_neg / total
    return np.where(total == 0, degenerate_score, closeness)


def order_by_closeness(closeness: np.ndarray) -> List[Alternative]:
    """
    Sort alternatives by descending closeness.

    Ties keep their original row order and NaN scores come last.
    """
    # Stable sort of the negated scores: NaN stays NaN and sorts to the end.
    order = np.argsort(-closeness, kind='stable')
    return [Alternative(id=int(i), score=float(closeness[i])) for i in order]


# =========================================================================
# Full pipeline
# =========================================================================

@dataclass(frozen=True)
class TOPSISArtifacts:
    """Intermediate results of one TOPSIS evaluation."""
    weighted_matrix: np.ndarray   # v_ij, shape (R, C)
    ideal: np.ndarray             # A⁺, shape (C,)
    anti_ideal: np.ndarray        # A⁻, shape (C,)
    d_positive: np.ndarray        # D⁺, shape (R,)
    d_negative: np.ndarray        # D⁻, shape (R,)
    closeness: np.ndarray         # C_i, shape (R,)


def compute_topsis(criteria_weights: Sequence[float],
                   criteria_directions: Sequence[bool],
                   alternatives_flat: Sequence[float],
                   config: Optional[TOPSISConfig] = None,
                   ) -> TOPSISArtifacts:
    """
    Run every TOPSIS stage and keep the intermediate arrays.

    Parameters
    ----------
    criteria_weights : sequence of float
        Non-negative weight per criterion; used as given, not rescaled.
    criteria_directions : sequence of bool
        ``True`` for benefit criteria, ``False`` for cost criteria.
    alternatives_flat : sequence of float
        R × C decision matrix flattened in column-major order.
    config : TOPSISConfig, optional
        Defaults to the global configuration.

    Returns
    -------
    TOPSISArtifacts

    Raises
    ------
    ShapeMismatchError, InvalidShapeError, InvalidWeightError
        On malformed input, before any computation.
    DegenerateColumnError
        On a zero-norm column when the policy is ``RAISE``.
    """
    if config is None:
        config = get_config().topsis

    weights = validate_criteria(criteria_weights, criteria_directions)
    matrix = build_matrix(alternatives_flat, len(weights))
    directions = [bool(d) for d in criteria_directions]

    with log_context(alternatives=matrix.shape[0], criteria=matrix.shape[1]):
        logger.debug(f"TOPSIS on {matrix.shape[0]} alternatives x "
                     f"{matrix.shape[1]} criteria")

        weighted = normalize_and_weight(matrix, weights, config.zero_norm_policy)
        pis, nis = ideal_solutions(weighted, directions)
        d_pos, d_neg = separation_distances(weighted, pis, nis)
        closeness = relative_closeness(d_pos, d_neg, config.degenerate_score)

        n_nan = int(np.isnan(closeness).sum())
        if n_nan:
            logger.warning(f"{n_nan} alternative(s) have undefined (NaN) closeness")

    return TOPSISArtifacts(
        weighted_matrix=weighted,
        ideal=pis,
        anti_ideal=nis,
        d_positive=d_pos,
        d_negative=d_neg,
        closeness=closeness,
    )


@log_execution()
def rank(criteria_weights: Sequence[float],
         criteria_directions: Sequence[bool],
         alternatives_flat: Sequence[float],
         config: Optional[TOPSISConfig] = None,
         ) -> List[Alternative]:
    """
    Rank alternatives from closest-to-ideal to closest-to-worst.

    Returns one :class:`Alternative` per matrix row, sorted by descending
    relative closeness.  See :func:`compute_topsis` for the parameters and
    raised errors.

    Examples
    --------
    >>> ranking = rank([0.64339, 0.28284, 0.07377], [True, True, True],
    ...                [80, 70, 91, 90, 80, 71, 90, 78, 0, 1, 0, 4])
    >>> [a.id for a in ranking]
    [3, 2, 0, 1]
    """
    artifacts = compute_topsis(criteria_weights, criteria_directions,
                               alternatives_flat, config)
    return order_by_closeness(artifacts.closeness)


# =========================================================================
# DataFrame front end
# =========================================================================

@dataclass
class TOPSISResult:
    """Result container for TOPSIS on a labelled decision matrix."""
    scores: pd.Series
    ranks: pd.Series
    d_positive: pd.Series
    d_negative: pd.Series
    ideal: pd.Series
    anti_ideal: pd.Series
    weighted_matrix: pd.DataFrame
    weights: Dict[str, float]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({
            'Score': self.scores,
            'Rank': self.ranks,
            'd+': self.d_positive,
            'd-': self.d_negative,
        }).sort_values('Rank')

    def top_n(self, n: int = 10) -> pd.DataFrame:
        return self.to_frame().head(n)

    def summary(self) -> str:
        lines = [
            f"\n{'='*60}",
            "TOPSIS RESULTS",
            f"{'='*60}",
            f"\nAlternatives: {len(self.ranks)}",
            f"Criteria: {len(self.weights)}",
        ]
        top10 = self.top_n(10)
        lines.append("\nTop 10 Alternatives:")
        for i, (idx, row) in enumerate(top10.iterrows(), 1):
            lines.append(f"  {i}. {idx}: Score={row['Score']:.4f}")
        lines.append("=" * 60)
        return "\n".join(lines)


class TOPSISCalculator:
    """
    TOPSIS calculator for a pandas decision matrix.

    Parameters
    ----------
    cost_criteria : list, optional
        Criteria where lower values are preferred; all others are benefit.
    config : TOPSISConfig, optional
        Defaults to the global configuration.
    """

    def __init__(self,
                 cost_criteria: Optional[List[str]] = None,
                 config: Optional[TOPSISConfig] = None):
        self.cost_criteria = cost_criteria or []
        self.config = config

    def calculate(self,
                  data: pd.DataFrame,
                  weights: Optional[Dict[str, float]] = None,
                  ) -> TOPSISResult:
        """
        Calculate TOPSIS scores and rankings.

        Parameters
        ----------
        data : pd.DataFrame
            Decision matrix (alternatives × criteria).
        weights : dict, optional
            Criterion weights; missing criteria get ``1 / n_criteria``.

        Returns
        -------
        TOPSISResult
        """
        criteria = list(data.columns)
        w = self._resolve_weights(weights, criteria)
        directions = [c not in self.cost_criteria for c in criteria]

        flat = data.values.astype(float).ravel(order='F')
        art = compute_topsis([w[c] for c in criteria], directions, flat, self.config)

        index = data.index
        scores = pd.Series(art.closeness, index=index, name='TOPSIS_Score')
        ranks = scores.rank(ascending=False, method='first',
                            na_option='bottom').astype(int)
        ranks.name = 'TOPSIS_Rank'

        return TOPSISResult(
            scores=scores,
            ranks=ranks,
            d_positive=pd.Series(art.d_positive, index=index, name='d+'),
            d_negative=pd.Series(art.d_negative, index=index, name='d-'),
            ideal=pd.Series(art.ideal, index=criteria, name='A+'),
            anti_ideal=pd.Series(art.anti_ideal, index=criteria, name='A-'),
            weighted_matrix=pd.DataFrame(art.weighted_matrix, index=index,
                                         columns=criteria),
            weights=w,
        )

    @staticmethod
    def _resolve_weights(weights, criteria):
        if not criteria:
            return {}
        if weights is None:
            return {c: 1.0 / len(criteria) for c in criteria}
        return {c: weights.get(c, 1.0 / len(criteria)) for c in criteria}
