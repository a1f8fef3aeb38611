"""Score sample validation and the two-class split used by callers."""

from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import numpy as np

from scoresweep.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


def as_score_sample(values: Any, name: str = "scores") -> np.ndarray:
    """
    Validate and freeze a sorted sample of classification scores.

    Parameters
    ----------
    values : array-like
        Scores, sorted ascending by the caller
    name : str
        Name used in error messages (e.g. ``"class0"``)

    Returns
    -------
    sample : np.ndarray
        Read-only 1-D float64 copy of ``values``

    Raises
    ------
    InvalidInputError
        If the sample is empty, not one-dimensional, contains non-finite
        values or is not sorted ascending
    """
    try:
        sample = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} could not be converted to float scores: {exc}") from exc

    if sample.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {sample.shape}")
    if sample.size == 0:
        raise InvalidInputError(f"{name} must contain at least one score")
    if not np.isfinite(sample).all():
        raise InvalidInputError(f"{name} contains NaN or infinite scores")
    if sample.size > 1 and (np.diff(sample) < 0).any():
        first = int(np.argmax(np.diff(sample) < 0))
        raise InvalidInputError(
            f"{name} must be sorted ascending; "
            f"found {sample[first]!r} before {sample[first + 1]!r} at position {first}"
        )

    sample.setflags(write=False)
    return sample


def as_score_samples(class0: Any, class1: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Validate both samples of a two-class evaluation."""
    return as_score_sample(class0, "class0"), as_score_sample(class1, "class1")


def split_scores_by_class(
    y_true: Any,
    scores: Any,
    pos_label: Any = 1,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split per-instance scores into sorted negative and positive samples.

    This is the caller-side step that produces the two pre-sorted samples
    every measure expects.

    Parameters
    ----------
    y_true : array-like
        True labels, one per instance
    scores : array-like
        Score for the positive class, one per instance
    pos_label : Any
        Label of the positive class

    Returns
    -------
    class0, class1 : Tuple[np.ndarray, np.ndarray]
        Sorted negative and positive score samples
    """
    y_arr = np.asarray(y_true)
    s_arr = np.asarray(scores, dtype=float)
    if y_arr.shape != s_arr.shape or y_arr.ndim != 1:
        raise InvalidInputError(
            f"y_true and scores must be 1-D of equal length, got {y_arr.shape} and {s_arr.shape}"
        )

    is_pos = y_arr == pos_label
    logger.debug("Splitting %d scores into %d positives", s_arr.size, int(is_pos.sum()))
    return as_score_samples(np.sort(s_arr[~is_pos]), np.sort(s_arr[is_pos]))


def as_sample_weights(weights: Any, size: int, name: str = "weights") -> Optional[np.ndarray]:
    """
    Validate per-instance weights of one score sample.

    Parameters
    ----------
    weights : array-like or None
        Non-negative weights aligned with the sorted sample; ``None`` means
        every instance has weight 1
    size : int
        Length of the sample the weights belong to
    name : str
        Name used in error messages (e.g. ``"weights0"``)

    Returns
    -------
    weights : np.ndarray or None
        Read-only 1-D float64 copy, or ``None`` if no weights were given
    """
    if weights is None:
        return None
    try:
        w = np.array(weights, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} could not be converted to float weights: {exc}") from exc

    if w.shape != (size,):
        raise InvalidInputError(f"{name} must have shape ({size},), got {w.shape}")
    if not np.isfinite(w).all():
        raise InvalidInputError(f"{name} contains NaN or infinite weights")
    if (w < 0).any():
        raise InvalidInputError(f"{name} must be non-negative")
    if w.sum() <= 0:
        raise InvalidInputError(f"{name} must have a positive total weight")

    w.setflags(write=False)
    return w


def as_weighted_samples(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Tuple[np.ndarray, np.ndarray, Optional[np.ndarray], Optional[np.ndarray]]:
    """Validate both samples of a two-class evaluation together with their weights."""
    neg, pos = as_score_samples(class0, class1)
    return (
        neg,
        pos,
        as_sample_weights(weights0, neg.size, "weights0"),
        as_sample_weights(weights1, pos.size, "weights1"),
    )


def has_unit_weights(*weights: Optional[np.ndarray]) -> bool:
    """True if every given weight vector is ``None`` or all ones."""
    return all(w is None or bool((w == 1.0).all()) for w in weights)


def split_weighted_scores_by_class(
    y_true: Any,
    scores: Any,
    sample_weight: Any,
    pos_label: Any = 1,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Split weighted per-instance scores into sorted samples and aligned weights.

    Returns
    -------
    class0, class1, weights0, weights1
        Sorted negative and positive scores with their weights in the same order
    """
    y_arr = np.asarray(y_true)
    s_arr = np.asarray(scores, dtype=float)
    w_arr = np.asarray(sample_weight, dtype=float)
    if not (y_arr.shape == s_arr.shape == w_arr.shape) or y_arr.ndim != 1:
        raise InvalidInputError(
            "y_true, scores and sample_weight must be 1-D of equal length, "
            f"got {y_arr.shape}, {s_arr.shape} and {w_arr.shape}"
        )

    is_pos = y_arr == pos_label
    split = []
    for mask in (~is_pos, is_pos):
        order = np.argsort(s_arr[mask], kind="stable")
        split.append((s_arr[mask][order], w_arr[mask][order]))
    (class0, w0), (class1, w1) = split
    return as_weighted_samples(class0, class1, w0, w1)
