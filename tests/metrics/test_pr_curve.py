"""Tests for the precision-recall curve builder."""

from __future__ import annotations

import math

import pytest

from scoresweep.metrics import (
    auc_pr,
    auc_pr_integral,
    confusion_sweep,
    pr_areas,
    pr_curve,
)
from scoresweep.metrics.pr import AUC_PR_INTEGRAL
from scoresweep.schemas import CurveKind


def test_pr_perfect_separation(separated_scores):
    curve = pr_curve(*separated_scores)

    assert curve.kind == CurveKind.PR
    assert curve.auc == pytest.approx(1.0)
    assert curve.summary[AUC_PR_INTEGRAL] == pytest.approx(1.0)
    # precision climbs to 1 at full recall, then stays there down to recall 0
    assert curve.points[0] == pytest.approx((1.0, 0.5))
    assert curve.points[-1] == (0.0, 1.0)


def test_pr_all_tied(tied_scores):
    interpolated, integral = pr_areas(*tied_scores)

    assert interpolated == pytest.approx(0.5)
    assert integral == pytest.approx(0.5)


def test_pr_known_curve(small_tied_scores):
    curve = pr_curve(*small_tied_scores)

    assert curve.thresholds == [-math.inf, 0.1, 0.4, 0.6, 0.8, 0.9]
    assert curve.x == pytest.approx([1.0, 1.0, 2 / 3, 1 / 3, 1 / 3, 0.0])
    assert curve.y == pytest.approx([3 / 7, 0.5, 2 / 3, 0.5, 1.0, 1.0])
    assert curve.auc == pytest.approx(13 / 18)


def test_pr_integral_known_value(small_tied_scores):
    expected = (1 + math.log(2)) / 9 + (1 + math.log(2 / 3)) / 3 + 1 / 3

    assert auc_pr_integral(*small_tied_scores) == pytest.approx(expected)


def test_pr_tie_block_interpolated_per_positive():
    class0 = [0.5, 0.5, 0.9]
    class1 = [0.5, 0.5, 0.7, 0.8]

    curve = pr_curve(class0, class1)

    # the block at 0.5 removes two positives and two negatives at once
    assert curve.thresholds == [-math.inf, None, 0.5, 0.7, 0.8, 0.9]
    assert curve.x == pytest.approx([1.0, 0.75, 0.5, 0.25, 0.0, 0.0])
    assert curve.y == pytest.approx([4 / 7, 3 / 5, 2 / 3, 0.5, 0.0, 0.0])

    expected = 41 / 280 + 19 / 120 + 7 / 48 + 1 / 16
    assert curve.auc == pytest.approx(expected)

    # a single trapezoid across the block would overestimate the area
    block_trapezoid = (4 / 7 + 2 / 3) / 2 * 0.5
    assert block_trapezoid != pytest.approx(41 / 280 + 19 / 120)


def test_pr_positives_exhausted_first(reversed_scores):
    curve = pr_curve(*reversed_scores)

    assert curve.auc == pytest.approx(0.5 * (3 / 6 + 2 / 5) / 3 + 0.5 * (2 / 5 + 1 / 4) / 3 + 0.5 * (1 / 4) / 3)
    # once every positive is predicted negative precision is 0
    assert curve.points[-1] == (0.0, 0.0)


def test_pr_matches_generic_sweep(random_tied_scores):
    class0, class1 = random_tied_scores
    curve = pr_curve(class0, class1)
    by_threshold = {
        t: (x, y) for t, x, y in zip(curve.thresholds, curve.x, curve.y) if t is not None
    }

    for threshold, counts in confusion_sweep(class0, class1):
        if counts.tp + counts.fp == 0:
            continue
        assert by_threshold[threshold] == (counts.sensitivity, counts.precision)


def test_pr_areas_in_unit_interval(random_tied_scores):
    interpolated, integral = pr_areas(*random_tied_scores)

    assert 0.0 <= interpolated <= 1.0
    assert 0.0 <= integral <= 1.0
    assert auc_pr(*random_tied_scores) == interpolated


def test_pr_recall_non_increasing(random_tied_scores):
    curve = pr_curve(*random_tied_scores)

    assert curve.x[0] == 1.0
    assert curve.x[-1] == 0.0
    assert all(x1 <= x0 for x0, x1 in zip(curve.x, curve.x[1:]))
    assert all(0.0 <= y <= 1.0 for y in curve.y)


def test_pr_curve_area_matches_scalar(random_tied_scores):
    curve = pr_curve(*random_tied_scores)

    assert curve.auc == auc_pr(*random_tied_scores)
    assert curve.summary[AUC_PR_INTEGRAL] == auc_pr_integral(*random_tied_scores)
