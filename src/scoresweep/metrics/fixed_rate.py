"""Measures at a threshold chosen to fix a rate on one of the samples.

The threshold is taken by rank from the reference sample: the score at index
``ceil(r * (n - 1))`` of the ascending sample, where ``r`` is the fraction of
reference scores that should lie at or below the threshold. The tie run of
that score is then treated as a whole, so duplicated scores never split
across the threshold.

With instance weights the rank is taken in the sample expanded by its
weights: an instance of weight 2 ranks like two tied instances, and
``n - 1`` becomes the total weight minus 1.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from scoresweep.exceptions import ConfigurationError
from scoresweep.metrics.sweep import ThresholdMeasurePair, _counts_at
from scoresweep.samples import as_weighted_samples

logger = logging.getLogger(__name__)

SENSITIVITY_FOR_FIXED_SPECIFICITY = "Sensitivity for fixed specificity"
FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY = "False positive rate for fixed sensitivity"
POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY = "Positive predictive value for fixed sensitivity"

# absorbs rounding in products such as (1 - 0.95) * 20
_RANK_TOLERANCE = 1e-9


def check_rate(rate: float, name: str = "rate") -> float:
    """Validate a rate parameter in [0, 1]."""
    try:
        rate = float(rate)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {rate!r}") from exc
    if not 0.0 <= rate <= 1.0:
        raise ConfigurationError(f"{name} must be in [0, 1], got {rate}")
    return rate


def _rank(rate: float, n: int, weights: Optional[np.ndarray] = None) -> int:
    if weights is None:
        k = math.ceil(rate * (n - 1) - _RANK_TOLERANCE)
        return min(max(k, 0), n - 1)
    # rank in the sample with every instance repeated by its weight
    cumulative = np.cumsum(weights)
    k = max(math.ceil(rate * (cumulative[-1] - 1) - _RANK_TOLERANCE), 0)
    return min(int(np.searchsorted(cumulative, k, side="right")), n - 1)


def _largest_below(neg: np.ndarray, pos: np.ndarray, value: float) -> float:
    """Largest score of either sample strictly below ``value``, or ``-inf``."""
    below = -math.inf
    for sample in (neg, pos):
        idx = int(np.searchsorted(sample, value, side="left"))
        if idx > 0:
            below = max(below, float(sample[idx - 1]))
    return below


def _threshold_for_sensitivity(
    neg: np.ndarray,
    pos: np.ndarray,
    sensitivity: float,
    weights1: Optional[np.ndarray] = None,
) -> float:
    value = float(pos[_rank(1.0 - sensitivity, pos.size, weights1)])
    # keep the whole tie run of ``value`` on the positive side
    return _largest_below(neg, pos, value)


def sensitivity_for_fixed_specificity(
    class0: Any,
    class1: Any,
    specificity: float,
    weights0: Any = None,
    weights1: Any = None,
) -> ThresholdMeasurePair:
    """
    Sensitivity at the threshold that fixes the specificity.

    Parameters
    ----------
    class0 : array-like
        Sorted scores of negative instances (reference sample)
    class1 : array-like
        Sorted scores of positive instances
    specificity : float
        Required specificity in [0, 1]
    weights0, weights1 : array-like, optional
        Non-negative instance weights; the rank is then taken in ``class0``
        with every score repeated by its weight

    Returns
    -------
    ThresholdMeasurePair
        Threshold taken from ``class0`` and the fraction of ``class1``
        scored above it
    """
    specificity = check_rate(specificity, "specificity")
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    threshold = float(neg[_rank(specificity, neg.size, w0)])
    # every negative tied with the threshold is a true negative
    counts = _counts_at(neg, pos, threshold, w0, w1)
    logger.debug("Specificity %.4f reached at threshold %r", counts.specificity, threshold)
    return ThresholdMeasurePair(threshold, counts.sensitivity)


def false_positive_rate_for_fixed_sensitivity(
    class0: Any,
    class1: Any,
    sensitivity: float,
    weights0: Any = None,
    weights1: Any = None,
) -> ThresholdMeasurePair:
    """False positive rate at the threshold that fixes the sensitivity."""
    sensitivity = check_rate(sensitivity, "sensitivity")
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    threshold = _threshold_for_sensitivity(neg, pos, sensitivity, w1)
    counts = _counts_at(neg, pos, threshold, w0, w1)
    return ThresholdMeasurePair(threshold, counts.false_positive_rate)


def positive_predictive_value_for_fixed_sensitivity(
    class0: Any,
    class1: Any,
    sensitivity: float,
    weights0: Any = None,
    weights1: Any = None,
) -> ThresholdMeasurePair:
    """Positive predictive value at the threshold that fixes the sensitivity."""
    sensitivity = check_rate(sensitivity, "sensitivity")
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    threshold = _threshold_for_sensitivity(neg, pos, sensitivity, w1)
    counts = _counts_at(neg, pos, threshold, w0, w1)
    return ThresholdMeasurePair(threshold, counts.precision)


def sensitivities_for_specificities(
    class0: Any,
    class1: Any,
    specificities: Iterable[float],
    weights0: Any = None,
    weights1: Any = None,
) -> pd.DataFrame:
    """
    Partial ROC: sensitivity for each of several fixed specificities.

    Returns
    -------
    pd.DataFrame
        Columns ``specificity``, ``threshold``, ``sensitivity``, sorted by
        specificity
    """
    rates = sorted(check_rate(s, "specificity") for s in specificities)
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    rows = []
    for specificity in rates:
        threshold, sensitivity = sensitivity_for_fixed_specificity(neg, pos, specificity, w0, w1)
        rows.append(
            {"specificity": specificity, "threshold": threshold, "sensitivity": sensitivity}
        )
    return pd.DataFrame(rows, columns=["specificity", "threshold", "sensitivity"])
