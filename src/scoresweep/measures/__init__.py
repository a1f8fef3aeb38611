"""Configured performance measures and measure sets."""

from scoresweep.measures.base import MeasureKind, PerformanceMeasure
from scoresweep.measures.definitions import (
    AucPR,
    AucROC,
    ClassificationRate,
    FalsePositiveRateForFixedSensitivity,
    MaximumCorrelationCoefficient,
    MaximumFMeasure,
    PositivePredictiveValueForFixedSensitivity,
    PRCurve,
    ROCCurve,
    SensitivityForFixedSpecificity,
)
from scoresweep.measures.registry import (
    MEASURE_REGISTRY,
    available_measures,
    create_measure,
    get_measure_kind,
    measure_from_dict,
)
from scoresweep.measures.measure_set import MeasureSet

__all__ = [
    "MeasureKind",
    "PerformanceMeasure",
    "AucPR",
    "AucROC",
    "ClassificationRate",
    "FalsePositiveRateForFixedSensitivity",
    "MaximumCorrelationCoefficient",
    "MaximumFMeasure",
    "PositivePredictiveValueForFixedSensitivity",
    "PRCurve",
    "ROCCurve",
    "SensitivityForFixedSpecificity",
    "MEASURE_REGISTRY",
    "available_measures",
    "create_measure",
    "get_measure_kind",
    "measure_from_dict",
    "MeasureSet",
]
