"""Classification rate at the natural decision boundary."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from sklearn.metrics import accuracy_score

from scoresweep.exceptions import InvalidInputError
from scoresweep.metrics.sweep import _counts_at
from scoresweep.samples import as_sample_weights, as_weighted_samples

logger = logging.getLogger(__name__)

CLASSIFICATION_RATE = "Classification rate"


def classification_rate(class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> float:
    """Fraction of instances (or weight) on the correct side of score 0 (positive iff score > 0)."""
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    counts = _counts_at(neg, pos, 0.0, w0, w1)
    return (counts.tn + counts.tp) / (counts.positives + counts.negatives)


def multiclass_classification_rate(scores: Any, labels: Any, sample_weight: Any = None) -> float:
    """
    Fraction of instances whose highest class score belongs to the true class.

    Parameters
    ----------
    scores : array-like
        Class scores, shape (n_instances, n_classes)
    labels : array-like
        True class indices in ``[0, n_classes)``
    sample_weight : array-like, optional
        Non-negative weight of each instance

    Returns
    -------
    float
        Classification rate; ties in the scores go to the lowest class index
    """
    scores = np.asarray(scores, dtype=float)
    labels = np.asarray(labels)

    if scores.ndim != 2 or scores.shape[0] == 0 or scores.shape[1] < 2:
        raise InvalidInputError(
            f"scores must have shape (n_instances, n_classes >= 2), got {scores.shape}"
        )
    if not np.isfinite(scores).all():
        raise InvalidInputError("scores contains NaN or infinite values")
    if labels.shape != (scores.shape[0],):
        raise InvalidInputError(
            f"labels must have shape ({scores.shape[0]},), got {labels.shape}"
        )
    if not np.issubdtype(labels.dtype, np.integer):
        raise InvalidInputError(f"labels must be integer class indices, got dtype {labels.dtype}")
    if labels.min() < 0 or labels.max() >= scores.shape[1]:
        raise InvalidInputError(
            f"labels must lie in [0, {scores.shape[1]}), got range [{labels.min()}, {labels.max()}]"
        )

    sample_weight = as_sample_weights(sample_weight, scores.shape[0], "sample_weight")

    predicted = np.argmax(scores, axis=1)
    logger.debug("Arg-max classification of %d instances over %d classes", *scores.shape)
    return float(accuracy_score(labels, predicted, sample_weight=sample_weight))
