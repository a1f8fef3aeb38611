"""Maximum of a confusion-count measure over all thresholds."""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from scoresweep.exceptions import ComputationError, ConfigurationError
from scoresweep.metrics.sweep import ThresholdMeasurePair, _sweep
from scoresweep.samples import as_weighted_samples

logger = logging.getLogger(__name__)

MAXIMUM_CORRELATION_COEFFICIENT = "Maximum correlation coefficient"
MAXIMUM_F_MEASURE = "Maximum F-measure"

CountMeasure = Callable[[int, int, int, int], float]


def matthews_correlation(tp: float, fp: float, fn: float, tn: float) -> float:
    """Matthews correlation coefficient; NaN if any marginal is zero."""
    # floats throughout, integer products overflow for large samples
    tp, fp, fn, tn = float(tp), float(fp), float(fn), float(tn)
    den = math.sqrt((tp + fn) * (tn + fp) * (tp + fp) * (tn + fn))
    if den == 0:
        return math.nan
    return (tp * tn - fn * fp) / den


def check_beta(beta: float) -> float:
    """Validate the F-measure weight."""
    try:
        beta = float(beta)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"beta must be a number, got {beta!r}") from exc
    if not math.isfinite(beta) or beta < 0:
        raise ConfigurationError(f"beta must be finite and >= 0, got {beta}")
    return beta


def f_measure(tp: float, fp: float, fn: float, tn: float, beta: float = 1.0) -> float:
    """F-beta measure; NaN where precision or the harmonic mean is undefined."""
    if tp + fp == 0 or tp + fn == 0:
        return math.nan
    precision = tp / (tp + fp)
    recall = tp / (tp + fn)
    beta2 = beta * beta
    den = beta2 * precision + recall
    if den == 0:
        return math.nan
    return (1.0 + beta2) * precision * recall / den


def maximum_of_measure(
    class0: Any,
    class1: Any,
    measure: CountMeasure,
    weights0: Any = None,
    weights1: Any = None,
) -> ThresholdMeasurePair:
    """
    Find the threshold maximising ``measure(tp, fp, fn, tn)``.

    Every distinct score present in either sample is a candidate threshold,
    starting at the smallest one. Among equal maxima the smallest threshold
    wins; NaN values are never selected.

    Parameters
    ----------
    class0 : array-like
        Sorted scores of negative instances
    class1 : array-like
        Sorted scores of positive instances
    measure : Callable[[int, int, int, int], float]
        Pure function of the confusion counts
    weights0, weights1 : array-like, optional
        Non-negative instance weights; the measure then receives weight sums

    Returns
    -------
    ThresholdMeasurePair
        ``(threshold, value)`` of the maximum

    Raises
    ------
    ComputationError
        If ``measure`` is NaN at every candidate threshold
    """
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)

    steps = _sweep(neg.tolist(), pos.tolist(), w0, w1)
    next(steps)  # -inf: every instance predicted positive

    best_threshold = math.nan
    best_value = -math.inf
    found = False
    for threshold, counts in steps:
        value = measure(counts.tp, counts.fp, counts.fn, counts.tn)
        if value > best_value:
            best_threshold, best_value = threshold, value
            found = True

    if not found:
        raise ComputationError(
            "Measure is undefined at every threshold "
            f"(class0 scores in [{neg[0]}, {neg[-1]}], class1 scores in [{pos[0]}, {pos[-1]}]); "
            "all scores may be identical across both samples"
        )

    logger.debug("Maximum %.6f at threshold %r", best_value, best_threshold)
    return ThresholdMeasurePair(best_threshold, best_value)


def maximum_correlation_coefficient(
    class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
) -> ThresholdMeasurePair:
    """Maximum Matthews correlation coefficient over all thresholds."""
    return maximum_of_measure(class0, class1, matthews_correlation, weights0, weights1)


def maximum_f_measure(
    class0: Any,
    class1: Any,
    beta: float = 1.0,
    weights0: Any = None,
    weights1: Any = None,
) -> ThresholdMeasurePair:
    """Maximum F-beta measure over all thresholds."""
    beta = check_beta(beta)
    return maximum_of_measure(
        class0,
        class1,
        lambda tp, fp, fn, tn: f_measure(tp, fp, fn, tn, beta),
        weights0,
        weights1,
    )
