"""Pytest configuration and fixtures."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


@pytest.fixture
def separated_scores():
    """Perfectly separated samples: every positive scores above every negative."""
    return np.array([-2.0, -1.0, 0.0]), np.array([1.0, 2.0, 3.0])


@pytest.fixture
def reversed_scores():
    """Every positive scores below every negative."""
    return np.array([1.0, 2.0, 3.0]), np.array([-2.0, -1.0, 0.0])


@pytest.fixture
def tied_scores():
    """All scores identical across both samples."""
    return np.zeros(3), np.zeros(3)


@pytest.fixture
def small_tied_scores():
    """Small samples sharing the score 0.4."""
    return np.array([0.1, 0.4, 0.4, 0.8]), np.array([0.4, 0.6, 0.9])


@pytest.fixture
def random_tied_scores():
    """Overlapping samples rounded to one decimal, so ties are frequent."""
    rng = np.random.RandomState(42)
    class0 = np.sort(np.round(rng.normal(0.0, 1.0, size=60), 1))
    class1 = np.sort(np.round(rng.normal(0.8, 1.0, size=40), 1))
    return class0, class1


@pytest.fixture
def labelled():
    """Flatten two samples into (y_true, scores) for scikit-learn oracles."""

    def _labelled(class0, class1):
        y_true = np.concatenate(
            [np.zeros(len(class0), dtype=int), np.ones(len(class1), dtype=int)]
        )
        scores = np.concatenate([class0, class1])
        return y_true, scores

    return _labelled
