"""Receiver operating characteristic curve and its area."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Tuple

import numpy as np

from scoresweep.metrics.sweep import _sweep
from scoresweep.samples import as_weighted_samples
from scoresweep.schemas import Curve, CurveKind

logger = logging.getLogger(__name__)

AUC_ROC = "AUC-ROC"
ROC_CURVE = "ROC curve"


def _roc(
    neg: np.ndarray,
    pos: np.ndarray,
    weights0: Optional[np.ndarray] = None,
    weights1: Optional[np.ndarray] = None,
    points: Optional[List[Tuple[float, float, float]]] = None,
) -> float:
    steps = _sweep(neg.tolist(), pos.tolist(), weights0, weights1)
    threshold, counts = next(steps)
    # total weight of each class
    m, d = counts.fp, counts.tp
    if points is not None:
        points.append((threshold, 1.0, 1.0))

    area = 0.0
    x_prev = y_prev = 1.0
    for threshold, counts in steps:
        x, y = counts.fp / m, counts.tp / d
        # x is non-increasing along the sweep
        area += (y_prev + y) / 2.0 * (x_prev - x)
        x_prev, y_prev = x, y
        if points is not None:
            points.append((threshold, x, y))
    return area


def roc_curve(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Curve:
    """
    Compute the ROC curve of two sorted score samples.

    Parameters
    ----------
    class0 : array-like
        Sorted scores of negative instances
    class1 : array-like
        Sorted scores of positive instances
    weights0, weights1 : array-like, optional
        Non-negative instance weights; rates become fractions of class weight

    Returns
    -------
    Curve
        Points ``(FPR, TPR)`` from ``(1, 1)`` to ``(0, 0)``, one per distinct
        threshold, with the trapezoidal AUC
    """
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    points: List[Tuple[float, float, float]] = []
    area = _roc(neg, pos, w0, w1, points)
    logger.debug("ROC curve with %d points, AUC=%.6f", len(points), area)
    return Curve(
        kind=CurveKind.ROC,
        measure=ROC_CURVE,
        x=[x for _, x, _ in points],
        y=[y for _, _, y in points],
        thresholds=[t for t, _, _ in points],
        auc=area,
    )


def auc_roc(class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> float:
    """Area under the ROC curve, without materialising its points."""
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    return _roc(neg, pos, w0, w1)
