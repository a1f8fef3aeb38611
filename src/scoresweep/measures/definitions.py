"""Concrete performance measures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from scoresweep.measures.base import MeasureKind, PerformanceMeasure
from scoresweep.metrics.classification_rate import (
    CLASSIFICATION_RATE,
    classification_rate,
    multiclass_classification_rate,
)
from scoresweep.metrics.fixed_rate import (
    FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY,
    POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY,
    SENSITIVITY_FOR_FIXED_SPECIFICITY,
    check_rate,
    false_positive_rate_for_fixed_sensitivity,
    positive_predictive_value_for_fixed_sensitivity,
    sensitivity_for_fixed_specificity,
)
from scoresweep.metrics.maximum import (
    MAXIMUM_CORRELATION_COEFFICIENT,
    MAXIMUM_F_MEASURE,
    check_beta,
    maximum_correlation_coefficient,
    maximum_f_measure,
)
from scoresweep.metrics.pr import AUC_PR, PR_CURVE, pr_areas, pr_curve
from scoresweep.metrics.roc import AUC_ROC, ROC_CURVE, auc_roc, roc_curve
from scoresweep.metrics.sweep import ThresholdMeasurePair
from scoresweep.schemas import Curve, MeasureResult


def _threshold_result(measure: PerformanceMeasure, pair: ThresholdMeasurePair) -> MeasureResult:
    return MeasureResult(
        measure=measure.label,
        scalars={"value": pair.value, "threshold": pair.threshold},
        parameters=measure.parameters,
    )


@dataclass(frozen=True)
class ClassificationRate(PerformanceMeasure):
    """Fraction of correctly classified instances at decision boundary 0."""

    kind = MeasureKind.CLASSIFICATION_RATE
    name = CLASSIFICATION_RATE
    allowed_classes = 0

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        rate = classification_rate(class0, class1, weights0, weights1)
        return MeasureResult(measure=self.label, scalars={"value": rate})

    def compute_multiclass(
        self, scores: Any, labels: Any, sample_weight: Any = None
    ) -> MeasureResult:
        """Arg-max classification rate for an (n_instances, n_classes) score matrix."""
        return MeasureResult(
            measure=self.label,
            scalars={"value": multiclass_classification_rate(scores, labels, sample_weight)},
        )


@dataclass(frozen=True)
class SensitivityForFixedSpecificity(PerformanceMeasure):
    specificity: float = 0.999

    kind = MeasureKind.SENSITIVITY_FOR_FIXED_SPECIFICITY
    name = SENSITIVITY_FOR_FIXED_SPECIFICITY

    def __post_init__(self):
        object.__setattr__(self, "specificity", check_rate(self.specificity, "specificity"))

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        pair = sensitivity_for_fixed_specificity(
            class0, class1, self.specificity, weights0, weights1
        )
        return _threshold_result(self, pair)


@dataclass(frozen=True)
class FalsePositiveRateForFixedSensitivity(PerformanceMeasure):
    sensitivity: float = 0.95

    kind = MeasureKind.FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY
    name = FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY

    def __post_init__(self):
        object.__setattr__(self, "sensitivity", check_rate(self.sensitivity, "sensitivity"))

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        pair = false_positive_rate_for_fixed_sensitivity(
            class0, class1, self.sensitivity, weights0, weights1
        )
        return _threshold_result(self, pair)


@dataclass(frozen=True)
class PositivePredictiveValueForFixedSensitivity(PerformanceMeasure):
    sensitivity: float = 0.95

    kind = MeasureKind.POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY
    name = POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY

    def __post_init__(self):
        object.__setattr__(self, "sensitivity", check_rate(self.sensitivity, "sensitivity"))

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        pair = positive_predictive_value_for_fixed_sensitivity(
            class0, class1, self.sensitivity, weights0, weights1
        )
        return _threshold_result(self, pair)


@dataclass(frozen=True)
class AucROC(PerformanceMeasure):
    kind = MeasureKind.AUC_ROC
    name = AUC_ROC

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        area = auc_roc(class0, class1, weights0, weights1)
        return MeasureResult(measure=self.label, scalars={"value": area})


@dataclass(frozen=True)
class AucPR(PerformanceMeasure):
    """Interpolated area under the PR curve, with the integral area alongside.

    With non-unit weights only the integral area exists, and it is also
    reported as ``value``.
    """

    kind = MeasureKind.AUC_PR
    name = AUC_PR

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        interpolated, integral = pr_areas(class0, class1, weights0, weights1)
        if interpolated is None:
            interpolated = integral
        return MeasureResult(
            measure=self.label,
            scalars={"value": interpolated, "integral": integral},
        )


@dataclass(frozen=True)
class ROCCurve(PerformanceMeasure):
    kind = MeasureKind.ROC_CURVE
    name = ROC_CURVE
    numerical = False

    def compute(self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> Curve:
        return roc_curve(class0, class1, weights0, weights1)


@dataclass(frozen=True)
class PRCurve(PerformanceMeasure):
    kind = MeasureKind.PR_CURVE
    name = PR_CURVE
    numerical = False

    def compute(self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None) -> Curve:
        return pr_curve(class0, class1, weights0, weights1)


@dataclass(frozen=True)
class MaximumCorrelationCoefficient(PerformanceMeasure):
    kind = MeasureKind.MAXIMUM_CORRELATION_COEFFICIENT
    name = MAXIMUM_CORRELATION_COEFFICIENT

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        pair = maximum_correlation_coefficient(class0, class1, weights0, weights1)
        return _threshold_result(self, pair)


@dataclass(frozen=True)
class MaximumFMeasure(PerformanceMeasure):
    beta: float = 1.0

    kind = MeasureKind.MAXIMUM_F_MEASURE
    name = MAXIMUM_F_MEASURE

    def __post_init__(self):
        object.__setattr__(self, "beta", check_beta(self.beta))

    def compute(
        self, class0: Any, class1: Any, weights0: Any = None, weights1: Any = None
    ) -> MeasureResult:
        pair = maximum_f_measure(class0, class1, self.beta, weights0, weights1)
        return _threshold_result(self, pair)
