"""Tie-aware confusion-count sweep over two sorted score samples.

An instance is predicted positive iff its score is strictly greater than the
threshold. The sweep starts at ``-inf`` (everything positive) and then visits
every distinct score present in either sample in ascending order, so the last
step predicts everything negative.

With per-instance weights the counts are sums of weights instead of numbers
of instances.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterator, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from scoresweep.samples import as_weighted_samples

logger = logging.getLogger(__name__)

Count = Union[int, float]


def _ratio(num: float, den: float) -> float:
    return num / den if den else math.nan


class ConfusionCounts(NamedTuple):
    """Confusion counts (or weight sums) at one threshold."""

    tp: Count
    fp: Count
    tn: Count
    fn: Count

    @property
    def positives(self) -> Count:
        return self.tp + self.fn

    @property
    def negatives(self) -> Count:
        return self.fp + self.tn

    @property
    def sensitivity(self) -> float:
        return _ratio(self.tp, self.positives)

    @property
    def specificity(self) -> float:
        return _ratio(self.tn, self.negatives)

    @property
    def false_positive_rate(self) -> float:
        return _ratio(self.fp, self.negatives)

    @property
    def precision(self) -> float:
        return _ratio(self.tp, self.tp + self.fp)


class SweepStep(NamedTuple):
    """A candidate threshold and the confusion counts it induces."""

    threshold: float
    counts: ConfusionCounts


class ThresholdMeasurePair(NamedTuple):
    """A measure value and the threshold at which it is reached."""

    threshold: float
    value: float


def _split_sums(
    weights: Optional[np.ndarray], n: int
) -> Tuple[Sequence[Count], Sequence[Count]]:
    """Weight below and at-or-above every split index ``0..n``.

    Unweighted samples use ranges, so plain instance counts cost no memory.
    """
    if weights is None:
        return range(n + 1), range(n, -1, -1)
    head = np.concatenate([[0.0], np.cumsum(weights)])
    # summed from the top so the last entry is exactly 0
    tail = np.concatenate([np.cumsum(weights[::-1])[::-1], [0.0]])
    return head.tolist(), tail.tolist()


def _merge(neg: Sequence[float], pos: Sequence[float]) -> Iterator[Tuple[float, int, int]]:
    """Distinct scores in ascending order with the split indices after each one."""
    m, d = len(neg), len(pos)
    i = j = 0
    while i < m or j < d:
        if j >= d or (i < m and neg[i] <= pos[j]):
            value = neg[i]
        else:
            value = pos[j]
        # Equal values in both samples are consumed in the same step
        while i < m and neg[i] == value:
            i += 1
        while j < d and pos[j] == value:
            j += 1
        yield value, i, j


def _sweep(
    neg: Sequence[float],
    pos: Sequence[float],
    weights0: Optional[np.ndarray] = None,
    weights1: Optional[np.ndarray] = None,
) -> Iterator[SweepStep]:
    """Two-pointer merge over already validated samples.

    Callers pass ``ndarray.tolist()`` copies: indexing a list is several
    times faster than indexing an array element by element, which outweighs
    the one O(m + d) copy per sweep.
    """
    head0, tail0 = _split_sums(weights0, len(neg))
    head1, tail1 = _split_sums(weights1, len(pos))

    yield SweepStep(-math.inf, ConfusionCounts(tp=tail1[0], fp=tail0[0], tn=0, fn=0))
    for value, i, j in _merge(neg, pos):
        yield SweepStep(value, ConfusionCounts(tp=tail1[j], fp=tail0[i], tn=head0[i], fn=head1[j]))


def confusion_sweep(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Iterator[SweepStep]:
    """
    Sweep all distinct thresholds of two sorted score samples.

    Parameters
    ----------
    class0 : array-like
        Sorted scores of negative instances
    class1 : array-like
        Sorted scores of positive instances
    weights0, weights1 : array-like, optional
        Non-negative instance weights aligned with ``class0`` and ``class1``

    Yields
    ------
    SweepStep
        ``(threshold, counts)``, first at ``-inf`` with
        ``tp=|class1|, fp=|class0|`` and last at the largest score with
        ``tp=fp=0``
    """
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    logger.debug("Sweeping %d negative and %d positive scores", neg.size, pos.size)
    return _sweep(neg.tolist(), pos.tolist(), w0, w1)


def iter_confusion_counts(
    class0: Any,
    class1: Any,
    weights0: Any = None,
    weights1: Any = None,
) -> Iterator[ConfusionCounts]:
    """Yield only the confusion counts of :func:`confusion_sweep`."""
    for step in confusion_sweep(class0, class1, weights0, weights1):
        yield step.counts


def confusion_counts_at(
    class0: Any,
    class1: Any,
    threshold: float,
    weights0: Any = None,
    weights1: Any = None,
) -> ConfusionCounts:
    """Confusion counts at an arbitrary threshold, by binary search."""
    neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
    return _counts_at(neg, pos, threshold, w0, w1)


def _counts_at(
    neg: np.ndarray,
    pos: np.ndarray,
    threshold: float,
    weights0: Optional[np.ndarray] = None,
    weights1: Optional[np.ndarray] = None,
) -> ConfusionCounts:
    i = int(np.searchsorted(neg, threshold, side="right"))
    j = int(np.searchsorted(pos, threshold, side="right"))
    tn, fp = _split_at(weights0, i, neg.size)
    fn, tp = _split_at(weights1, j, pos.size)
    return ConfusionCounts(tp=tp, fp=fp, tn=tn, fn=fn)


def _split_at(weights: Optional[np.ndarray], index: int, n: int) -> Tuple[Count, Count]:
    if weights is None:
        return index, n - index
    return float(weights[:index].sum()), float(weights[index:].sum())
