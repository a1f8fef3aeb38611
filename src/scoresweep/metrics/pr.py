"""Precision-recall curve and its area.

Precision is not linear between the corner points of the sweep. When a step
removes ``dtp`` positives and ``dfp`` negatives at once (a tie block), the
curve is interpolated per removed positive, with ``dfp / dtp`` negatives
removed alongside each one (Davis & Goadrich, 2006). The area is accumulated
between these unit steps.

The integral variant treats FP as linear in TP within a block and integrates
precision over recall exactly (Keilwagen, Grosse & Grau, 2014). It is the only
area defined for weighted instances; the Davis & Goadrich area is reported
only when every weight is 1.
"""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Tuple

import numpy as np

from scoresweep.exceptions import InvalidInputError
from scoresweep.metrics.sweep import _merge, _split_sums
from scoresweep.samples import as_weighted_samples, has_unit_weights
from scoresweep.schemas import Curve, CurveKind

logger = logging.getLogger(__name__)

AUC_PR = "AUC-PR"
AUC_PR_INTEGRAL = "AUC-PR (Integral)"
PR_CURVE = "Precision-Recall curve"


def _precision(tp: float, fp: float, previous: float) -> float:
    """Precision with the terminal ``tp = fp = 0`` point carrying ``previous``."""
    if tp > 0:
        return tp / (tp + fp)
    if fp > 0:
        return 0.0
    return previous


def _block_integral(
    tp_start: float, tp_end: float, fp_end: float, slope: float, total: float
) -> float:
    """Exact area under precision(recall) for one block, FP linear in TP."""
    r_start = tp_start / total
    r_end = tp_end / total
    a = 1.0 + slope
    b = (fp_end - slope * tp_end) / total
    if b == 0:
        return (r_start - r_end) / a
    return (r_start - r_end) / a - b / (a * a) * (
        math.log(a * r_start + b) - math.log(a * r_end + b)
    )


def _pr(
    neg: np.ndarray,
    pos: np.ndarray,
    weights0: Optional[np.ndarray] = None,
    weights1: Optional[np.ndarray] = None,
    points: Optional[List[Tuple[Optional[float], float, float]]] = None,
) -> Tuple[float, float]:
    """Interpolated and integral areas from a single sweep.

    A block is interpolated once per positive instance it removes, so weighted
    curves get the same point density as unweighted ones.
    """
    _, tail0 = _split_sums(weights0, neg.size)
    _, tail1 = _split_sums(weights1, pos.size)
    total = tail1[0]

    tp_prev, fp_prev, j_prev = tail1[0], tail0[0], 0
    recall = 1.0
    precision = tp_prev / (tp_prev + fp_prev)
    if points is not None:
        points.append((-math.inf, recall, precision))

    auc_gd = 0.0
    auc_integral = 0.0
    for threshold, i, j in _merge(neg.tolist(), pos.tolist()):
        tp, fp = tail1[j], tail0[i]
        dtp = tp_prev - tp
        dfp = fp_prev - fp

        if dtp == 0:
            # only negatives removed: vertical move at constant recall
            precision = _precision(tp, fp, precision)
            if points is not None:
                points.append((threshold, recall, precision))
        else:
            steps = j - j_prev
            for k in range(1, steps + 1):
                if k == steps:
                    tp_k, fp_k = tp, fp
                else:
                    tp_k = tp_prev - (k * dtp) / steps
                    fp_k = fp_prev - (k * dfp) / steps
                r_k = tp_k / total
                p_k = _precision(tp_k, fp_k, precision)
                auc_gd += (precision + p_k) / 2.0 * (recall - r_k)
                recall, precision = r_k, p_k
                if points is not None:
                    points.append((threshold if k == steps else None, r_k, p_k))
            auc_integral += _block_integral(tp_prev, tp, fp, dfp / dtp, total)

        tp_prev, fp_prev, j_prev = tp, fp, j

    return auc_gd, auc_integral


def pr_curve(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Curve:
    """
    Compute the interpolated precision-recall curve of two sorted score samples.

    Parameters
    ----------
    class0 : array-like
        Sorted scores of negative instances
    class1 : array-like
        Sorted scores of positive instances
    weights0, weights1 : array-like, optional
        Non-negative instance weights

    Returns
    -------
    Curve
        Points ``(recall, precision)`` from recall 1 down to recall 0. Corner
        points carry their threshold, interpolated points carry ``None``.
        ``auc`` is the Davis & Goadrich area, or the integral area if any
        weight differs from 1; ``summary`` holds the integral area under
        ``"AUC-PR (Integral)"``.
    """
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    points: List[Tuple[Optional[float], float, float]] = []
    auc_gd, auc_integral = _pr(neg, pos, w0, w1, points)
    logger.debug("PR curve with %d points, AUC=%.6f, integral=%.6f", len(points), auc_gd, auc_integral)
    return Curve(
        kind=CurveKind.PR,
        measure=PR_CURVE,
        x=[r for _, r, _ in points],
        y=[p for _, _, p in points],
        thresholds=[t for t, _, _ in points],
        auc=auc_gd if has_unit_weights(w0, w1) else auc_integral,
        summary={AUC_PR_INTEGRAL: auc_integral},
    )


def auc_pr(class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> float:
    """Interpolated (Davis & Goadrich) area under the precision-recall curve.

    Raises
    ------
    InvalidInputError
        If any weight differs from 1; use :func:`auc_pr_integral` instead
    """
    auc_gd, _ = pr_areas(class0, class1, weights0, weights1)
    if auc_gd is None:
        raise InvalidInputError(
            "The Davis & Goadrich AUC-PR is only defined for unit weights; use auc_pr_integral"
        )
    return auc_gd


def auc_pr_integral(class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> float:
    """Area under the continuously interpolated precision-recall curve."""
    return pr_areas(class0, class1, weights0, weights1)[1]


def pr_areas(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Tuple[Optional[float], float]:
    """Both areas ``(davis_goadrich, integral)`` from a single sweep.

    The first entry is ``None`` if any weight differs from 1.
    """
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    auc_gd, auc_integral = _pr(neg, pos, w0, w1)
    if not has_unit_weights(w0, w1):
        return None, auc_integral
    return auc_gd, auc_integral
