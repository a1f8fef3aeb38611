"""Ordered collection of measures evaluated together."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

import numpy as np

from scoresweep.config import EvaluationConfig
from scoresweep.exceptions import ConfigurationError, InvalidInputError
from scoresweep.measures.base import PerformanceMeasure
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
from scoresweep.measures.registry import measure_from_dict
from scoresweep.samples import as_weighted_samples
from scoresweep.schemas import Curve, EvaluationReport

logger = logging.getLogger(__name__)


class MeasureSet:
    """
    An immutable, ordered set of configured measures.

    Parameters
    ----------
    measures : Iterable[PerformanceMeasure]
        Measures in reporting order
    num_classes : int
        Number of classes the measures will be evaluated for
    """

    def __init__(self, measures: Iterable[PerformanceMeasure], num_classes: int = 2):
        self._measures = tuple(measures)
        self.num_classes = int(num_classes)

        if self.num_classes < 2:
            raise ConfigurationError(f"num_classes must be >= 2, got {num_classes}")
        for measure in self._measures:
            if not isinstance(measure, PerformanceMeasure):
                raise ConfigurationError(f"Not a performance measure: {measure!r}")
            if not measure.supports(self.num_classes):
                raise ConfigurationError(
                    f"Measure '{measure.label}' is not available for {self.num_classes} classes"
                )

        labels = [m.label for m in self._measures]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate measures: {duplicates}")

    @classmethod
    def from_config(cls, config: Optional[EvaluationConfig] = None) -> MeasureSet:
        """Default two-class measure set configured by ``config``."""
        config = config or EvaluationConfig()
        measures: List[PerformanceMeasure] = [
            ClassificationRate(),
            SensitivityForFixedSpecificity(config.specificity_for_sensitivity),
            FalsePositiveRateForFixedSensitivity(config.sensitivity_for_fpr),
            PositivePredictiveValueForFixedSensitivity(config.sensitivity_for_ppv),
        ]
        if config.numerical:
            measures += [AucROC(), AucPR()]
        else:
            measures += [ROCCurve(), PRCurve()]
        measures += [MaximumCorrelationCoefficient(), MaximumFMeasure(config.beta)]
        return cls(measures)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> MeasureSet:
        """Inverse of :meth:`to_dict`."""
        try:
            items = payload["measures"]
        except KeyError as exc:
            raise ConfigurationError("Measure set payload has no 'measures'") from exc
        return cls(
            [measure_from_dict(item) for item in items],
            num_classes=payload.get("num_classes", 2),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "num_classes": self.num_classes,
            "measures": [m.to_dict() for m in self._measures],
        }

    @property
    def numerical(self) -> bool:
        """True if no measure in the set returns a curve."""
        return all(m.numerical for m in self._measures)

    def __iter__(self) -> Iterator[PerformanceMeasure]:
        return iter(self._measures)

    def __len__(self) -> int:
        return len(self._measures)

    def __repr__(self) -> str:
        return f"MeasureSet({[m.label for m in self._measures]!r}, num_classes={self.num_classes})"

    def evaluate(
        self,
        class0: Any,
        class1: Any,
        weights0: Any = None,
        weights1: Any = None,
    ) -> EvaluationReport:
        """
        Evaluate all measures on two sorted score samples.

        Parameters
        ----------
        class0 : array-like
            Sorted scores of negative instances
        class1 : array-like
            Sorted scores of positive instances
        weights0, weights1 : array-like, optional
            Non-negative instance weights aligned with the samples

        Returns
        -------
        EvaluationReport
            Scalar results and curves in measure order
        """
        if self.num_classes != 2:
            raise ConfigurationError(
                f"Two-sample evaluation needs a 2-class measure set, got {self.num_classes} classes"
            )
        neg, pos, w0, w1 = as_weighted_samples(class0, class1, weights0, weights1)
        logger.debug("Evaluating %d measures on %d/%d scores", len(self), neg.size, pos.size)

        report = EvaluationReport()
        for measure in self._measures:
            outcome = measure.compute(neg, pos, w0, w1)
            if isinstance(outcome, Curve):
                report.curves.append(outcome)
            else:
                report.results.append(outcome)
        return report

    def evaluate_multiclass(
        self, scores: Any, labels: Any, sample_weight: Any = None
    ) -> EvaluationReport:
        """
        Evaluate measures defined for any number of classes on a score matrix.

        Only measures that need no reduction to two classes qualify (currently
        the arg-max classification rate). ``scores`` must have one column per
        class of the set.
        """
        unsupported = [m.label for m in self._measures if m.allowed_classes != 0]
        if unsupported:
            raise ConfigurationError(
                f"Measures without a multi-class form: {unsupported}"
            )
        shape = np.shape(scores)
        if len(shape) != 2 or shape[1] != self.num_classes:
            raise InvalidInputError(
                f"scores must have shape (n_instances, {self.num_classes}), got {shape}"
            )
        report = EvaluationReport()
        for measure in self._measures:
            report.results.append(measure.compute_multiclass(scores, labels, sample_weight))
        return report
