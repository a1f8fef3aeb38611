"""Static registry of performance measures."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Type, Union

from scoresweep.exceptions import ConfigurationError
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

MEASURE_REGISTRY: Dict[MeasureKind, Type[PerformanceMeasure]] = {
    MeasureKind.CLASSIFICATION_RATE: ClassificationRate,
    MeasureKind.SENSITIVITY_FOR_FIXED_SPECIFICITY: SensitivityForFixedSpecificity,
    MeasureKind.FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY: FalsePositiveRateForFixedSensitivity,
    MeasureKind.POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY: PositivePredictiveValueForFixedSensitivity,
    MeasureKind.AUC_ROC: AucROC,
    MeasureKind.AUC_PR: AucPR,
    MeasureKind.ROC_CURVE: ROCCurve,
    MeasureKind.PR_CURVE: PRCurve,
    MeasureKind.MAXIMUM_CORRELATION_COEFFICIENT: MaximumCorrelationCoefficient,
    MeasureKind.MAXIMUM_F_MEASURE: MaximumFMeasure,
}


def get_measure_kind(kind: Union[str, MeasureKind]) -> MeasureKind:
    """Normalize a measure kind."""
    try:
        return MeasureKind(kind)
    except ValueError as exc:
        valid = [k.value for k in MeasureKind]
        raise ConfigurationError(f"Unsupported measure: {kind!r}; expected one of {valid}") from exc


def create_measure(kind: Union[str, MeasureKind], **params: Any) -> PerformanceMeasure:
    """
    Instantiate a registered measure.

    Parameters
    ----------
    kind : str or MeasureKind
        Measure kind, e.g. ``"maximum_f_measure"``
    **params
        Measure parameters, e.g. ``beta=2.0``

    Returns
    -------
    PerformanceMeasure
    """
    cls = MEASURE_REGISTRY[get_measure_kind(kind)]
    try:
        return cls(**params)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid parameters for {cls.name}: {params}") from exc


def measure_from_dict(payload: Mapping[str, Any]) -> PerformanceMeasure:
    """Inverse of ``PerformanceMeasure.to_dict``."""
    data = dict(payload)
    if "kind" not in data:
        raise ConfigurationError(f"Measure payload has no 'kind': {payload}")
    kind = data.pop("kind")
    return create_measure(kind, **data)


def available_measures(num_classes: int = 2, numerical: bool = False) -> List[PerformanceMeasure]:
    """
    Default instances of every measure usable for ``num_classes`` classes.

    Parameters
    ----------
    num_classes : int
        Number of classes; 0 lists only measures for any number of classes
    numerical : bool
        Restrict to measures with scalar results (no curves)
    """
    found = []
    for cls in MEASURE_REGISTRY.values():
        if numerical and not cls.numerical:
            continue
        if cls.allowed_classes == 0 or cls.allowed_classes == num_classes:
            found.append(cls())
    return found
