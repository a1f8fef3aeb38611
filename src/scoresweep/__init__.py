"""
scoresweep: Score-based performance measures for binary classifiers.

This package provides:
- A tie-aware confusion-count sweep over sorted class scores
- ROC and precision-recall curves with their areas
- Maximum correlation coefficient and F-measure over all thresholds
- Sensitivity, false positive rate and PPV at fixed rates
- Configurable measure sets with serializable results
"""

__version__ = "0.1.0"

from scoresweep.config import EvaluationConfig
from scoresweep.exceptions import (
    ComputationError,
    ConfigurationError,
    InvalidInputError,
    ScoreSweepError,
)
from scoresweep.measures import MeasureKind, MeasureSet, create_measure
from scoresweep.samples import (
    as_score_sample,
    split_scores_by_class,
    split_weighted_scores_by_class,
)
from scoresweep.schemas import Curve, CurveKind, EvaluationReport, MeasureResult

__all__ = [
    "__version__",
    "EvaluationConfig",
    "ComputationError",
    "ConfigurationError",
    "InvalidInputError",
    "ScoreSweepError",
    "MeasureKind",
    "MeasureSet",
    "create_measure",
    "as_score_sample",
    "split_scores_by_class",
    "split_weighted_scores_by_class",
    "Curve",
    "CurveKind",
    "EvaluationReport",
    "MeasureResult",
]
