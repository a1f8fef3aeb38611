"""Tests for fixed-specificity and fixed-sensitivity measures."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
import pytest

from scoresweep.exceptions import ConfigurationError
from scoresweep.metrics import (
    confusion_counts_at,
    false_positive_rate_for_fixed_sensitivity,
    positive_predictive_value_for_fixed_sensitivity,
    sensitivities_for_specificities,
    sensitivity_for_fixed_specificity,
)


def test_sensitivity_full_specificity(separated_scores):
    result = sensitivity_for_fixed_specificity(*separated_scores, specificity=1.0)

    assert result.threshold == 0.0
    assert result.value == 1.0


def test_sensitivity_threshold_keeps_tie_run_negative():
    class0 = [0.0, 1.0, 1.0, 1.0, 2.0]
    class1 = [1.0, 2.0, 3.0]

    result = sensitivity_for_fixed_specificity(class0, class1, 0.25)

    assert result.threshold == 1.0
    assert result.value == pytest.approx(2 / 3)
    assert confusion_counts_at(class0, class1, result.threshold).specificity == 0.8


def test_sensitivity_zero_specificity():
    result = sensitivity_for_fixed_specificity([0.0, 1.0, 1.0, 1.0, 2.0], [1.0, 2.0, 3.0], 0.0)

    assert result.threshold == 0.0
    assert result.value == 1.0


def test_fixed_specificity_reached(random_tied_scores):
    class0, class1 = random_tied_scores

    for specificity in (0.0, 0.5, 0.9, 0.95, 0.999, 1.0):
        threshold, value = sensitivity_for_fixed_specificity(class0, class1, specificity)
        counts = confusion_counts_at(class0, class1, threshold)
        assert counts.specificity >= specificity
        assert value == counts.sensitivity


def test_false_positive_rate_and_ppv_known():
    class0 = [0.0, 1.0, 2.0, 3.0]
    class1 = [1.0, 2.0, 2.0, 4.0]

    fpr = false_positive_rate_for_fixed_sensitivity(class0, class1, 0.5)
    ppv = positive_predictive_value_for_fixed_sensitivity(class0, class1, 0.5)

    # rank 2 of class1 is 2.0; the largest score below it is 1.0
    assert fpr.threshold == 1.0
    assert fpr.value == 0.5
    assert ppv.threshold == 1.0
    assert ppv.value == pytest.approx(0.6)


def test_false_positive_rate_full_sensitivity():
    class0 = [0.0, 1.0, 2.0, 3.0]
    class1 = [1.0, 2.0, 2.0, 4.0]

    result = false_positive_rate_for_fixed_sensitivity(class0, class1, 1.0)

    assert result.threshold == 0.0
    assert result.value == 0.75


def test_fixed_sensitivity_nothing_below():
    fpr = false_positive_rate_for_fixed_sensitivity([5.0, 6.0], [1.0, 2.0], 1.0)
    ppv = positive_predictive_value_for_fixed_sensitivity([5.0, 6.0], [1.0, 2.0], 1.0)

    assert fpr.threshold == -math.inf
    assert fpr.value == 1.0
    assert ppv.value == 0.5


def test_fixed_sensitivity_perfect_separation(separated_scores):
    fpr = false_positive_rate_for_fixed_sensitivity(*separated_scores, 0.95)
    ppv = positive_predictive_value_for_fixed_sensitivity(*separated_scores, 0.95)

    # rank 1 of class1 is 2.0; the largest score below it is 1.0
    assert fpr.threshold == 1.0
    assert fpr.value == 0.0
    assert ppv.value == 1.0


def test_fixed_sensitivity_rank_rounding():
    # (1 - 0.95) * 20 is slightly above 1.0 in floating point
    class0 = np.array([-1.0])
    class1 = np.arange(21, dtype=float)

    result = false_positive_rate_for_fixed_sensitivity(class0, class1, 0.95)
    counts = confusion_counts_at(class0, class1, result.threshold)

    assert result.threshold == 0.0
    assert counts.tp == 20
    assert counts.sensitivity >= 0.95


def test_fixed_sensitivity_consistent_with_counts(random_tied_scores):
    class0, class1 = random_tied_scores

    for sensitivity in (0.5, 0.8, 0.95):
        fpr = false_positive_rate_for_fixed_sensitivity(class0, class1, sensitivity)
        ppv = positive_predictive_value_for_fixed_sensitivity(class0, class1, sensitivity)
        counts = confusion_counts_at(class0, class1, fpr.threshold)

        assert fpr.threshold == ppv.threshold
        assert fpr.value == counts.false_positive_rate
        assert ppv.value == counts.precision


@pytest.mark.parametrize("rate", [-0.1, 1.5, float("nan"), "high"])
def test_invalid_rate(separated_scores, rate):
    with pytest.raises(ConfigurationError):
        sensitivity_for_fixed_specificity(*separated_scores, rate)
    with pytest.raises(ConfigurationError):
        false_positive_rate_for_fixed_sensitivity(*separated_scores, rate)
    with pytest.raises(ConfigurationError):
        positive_predictive_value_for_fixed_sensitivity(*separated_scores, rate)


def test_partial_roc_frame(small_tied_scores):
    frame = sensitivities_for_specificities(*small_tied_scores, [0.75, 0.0, 1.0])

    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["specificity", "threshold", "sensitivity"]
    assert frame["specificity"].tolist() == [0.0, 0.75, 1.0]
    assert frame["threshold"].tolist() == [0.1, 0.8, 0.8]
    assert frame["sensitivity"].tolist() == pytest.approx([1.0, 1 / 3, 1 / 3])
