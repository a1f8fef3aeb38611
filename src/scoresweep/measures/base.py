"""Base class and kinds of configured performance measures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Dict, Union

from scoresweep.schemas import Curve, MeasureResult


class MeasureKind(str, Enum):
    """Closed set of available performance measures."""

    CLASSIFICATION_RATE = "classification_rate"
    SENSITIVITY_FOR_FIXED_SPECIFICITY = "sensitivity_for_fixed_specificity"
    FALSE_POSITIVE_RATE_FOR_FIXED_SENSITIVITY = "false_positive_rate_for_fixed_sensitivity"
    POSITIVE_PREDICTIVE_VALUE_FOR_FIXED_SENSITIVITY = "positive_predictive_value_for_fixed_sensitivity"
    AUC_ROC = "auc_roc"
    AUC_PR = "auc_pr"
    ROC_CURVE = "roc_curve"
    PR_CURVE = "pr_curve"
    MAXIMUM_CORRELATION_COEFFICIENT = "maximum_correlation_coefficient"
    MAXIMUM_F_MEASURE = "maximum_f_measure"


@dataclass(frozen=True)
class PerformanceMeasure(ABC):
    """A configured measure computed from two sorted score samples.

    Subclasses are frozen dataclasses whose fields are the measure's
    parameters; they validate them in ``__post_init__``.
    """

    kind: ClassVar[MeasureKind]
    name: ClassVar[str]
    # 0 = any number of classes
    allowed_classes: ClassVar[int] = 2
    # False for measures that return a Curve
    numerical: ClassVar[bool] = True

    @abstractmethod
    def compute(
        self,
        class0: Any,
        class1: Any,
        weights0: Any = None,
        weights1: Any = None,
    ) -> Union[MeasureResult, Curve]:
        """Compute the measure for sorted negative and positive scores and optional weights."""

    @property
    def parameters(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def label(self) -> str:
        """Name including parameter values, unique within a measure set."""
        if not self.parameters:
            return self.name
        params = ", ".join(f"{k}={v:g}" for k, v in self.parameters.items())
        return f"{self.name} ({params})"

    def supports(self, num_classes: int) -> bool:
        return self.allowed_classes == 0 or self.allowed_classes == num_classes

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, **self.parameters}
