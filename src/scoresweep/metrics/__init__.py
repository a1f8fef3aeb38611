"""Score-sweep performance measures and curves."""

from scoresweep.metrics.sweep import (
    ConfusionCounts,
    SweepStep,
    ThresholdMeasurePair,
    confusion_sweep,
    confusion_counts_at,
    iter_confusion_counts,
)
from scoresweep.metrics.roc import auc_roc, roc_curve
from scoresweep.metrics.pr import auc_pr, auc_pr_integral, pr_areas, pr_curve
from scoresweep.metrics.maximum import (
    f_measure,
    matthews_correlation,
    maximum_correlation_coefficient,
    maximum_f_measure,
    maximum_of_measure,
)
from scoresweep.metrics.fixed_rate import (
    false_positive_rate_for_fixed_sensitivity,
    positive_predictive_value_for_fixed_sensitivity,
    sensitivities_for_specificities,
    sensitivity_for_fixed_specificity,
)
from scoresweep.metrics.classification_rate import (
    classification_rate,
    multiclass_classification_rate,
)

__all__ = [
    "ConfusionCounts",
    "SweepStep",
    "ThresholdMeasurePair",
    "confusion_sweep",
    "confusion_counts_at",
    "iter_confusion_counts",
    "auc_roc",
    "roc_curve",
    "auc_pr",
    "auc_pr_integral",
    "pr_areas",
    "pr_curve",
    "f_measure",
    "matthews_correlation",
    "maximum_correlation_coefficient",
    "maximum_f_measure",
    "maximum_of_measure",
    "false_positive_rate_for_fixed_sensitivity",
    "positive_predictive_value_for_fixed_sensitivity",
    "sensitivities_for_specificities",
    "sensitivity_for_fixed_specificity",
    "classification_rate",
    "multiclass_classification_rate",
]
