"""Tests for configured measures and the measure registry."""

from __future__ import annotations

import dataclasses

import pytest

from scoresweep import ConfigurationError, Curve, MeasureKind, MeasureResult, create_measure
from scoresweep.measures import (
    MEASURE_REGISTRY,
    AucPR,
    ClassificationRate,
    MaximumFMeasure,
    ROCCurve,
    SensitivityForFixedSpecificity,
    available_measures,
    get_measure_kind,
    measure_from_dict,
)


class TestMeasureRegistry:
    """Tests for the static measure registry."""

    def test_every_kind_registered(self):
        assert set(MEASURE_REGISTRY) == set(MeasureKind)
        for kind, cls in MEASURE_REGISTRY.items():
            assert cls.kind == kind

    def test_create_by_string(self):
        measure = create_measure("maximum_f_measure", beta=2.0)

        assert isinstance(measure, MaximumFMeasure)
        assert measure.beta == 2.0

    def test_unknown_kind(self):
        with pytest.raises(ConfigurationError, match="Unsupported measure"):
            get_measure_kind("youden_index")

    def test_unknown_parameter(self):
        with pytest.raises(ConfigurationError, match="Invalid parameters"):
            create_measure(MeasureKind.AUC_ROC, beta=1.0)

    def test_invalid_parameter_value(self):
        with pytest.raises(ConfigurationError):
            create_measure(MeasureKind.SENSITIVITY_FOR_FIXED_SPECIFICITY, specificity=2.0)

    def test_dict_roundtrip(self):
        measure = SensitivityForFixedSpecificity(specificity=0.9)

        payload = measure.to_dict()

        assert payload == {"kind": "sensitivity_for_fixed_specificity", "specificity": 0.9}
        assert measure_from_dict(payload) == measure

    def test_from_dict_without_kind(self):
        with pytest.raises(ConfigurationError, match="kind"):
            measure_from_dict({"beta": 1.0})

    def test_available_two_class(self):
        kinds = {m.kind for m in available_measures(2)}

        assert kinds == set(MeasureKind)

    def test_available_numerical(self):
        kinds = {m.kind for m in available_measures(2, numerical=True)}

        assert MeasureKind.ROC_CURVE not in kinds
        assert MeasureKind.PR_CURVE not in kinds
        assert MeasureKind.AUC_PR in kinds

    def test_available_multiclass(self):
        assert [m.kind for m in available_measures(3)] == [MeasureKind.CLASSIFICATION_RATE]
        assert [m.kind for m in available_measures(0)] == [MeasureKind.CLASSIFICATION_RATE]


class TestPerformanceMeasure:
    """Tests for measure labels, parameters and results."""

    def test_labels(self):
        assert ClassificationRate().label == "Classification rate"
        assert SensitivityForFixedSpecificity().label == (
            "Sensitivity for fixed specificity (specificity=0.999)"
        )
        assert MaximumFMeasure().label == "Maximum F-measure (beta=1)"
        assert create_measure("auc_roc").label == "AUC-ROC"

    def test_frozen_and_hashable(self):
        measure = MaximumFMeasure(beta=2.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            measure.beta = 1.0
        assert len({measure, MaximumFMeasure(beta=2.0)}) == 1

    def test_supports(self):
        assert ClassificationRate().supports(5)
        assert AucPR().supports(2)
        assert not AucPR().supports(3)

    def test_threshold_result(self, small_tied_scores):
        result = MaximumFMeasure().compute(*small_tied_scores)

        assert isinstance(result, MeasureResult)
        assert result.measure == "Maximum F-measure (beta=1)"
        assert result.parameters == {"beta": 1.0}
        assert result.value == pytest.approx(2 / 3)
        assert result.threshold is not None

    def test_auc_pr_reports_both_areas(self, separated_scores):
        result = AucPR().compute(*separated_scores)

        assert result.threshold is None
        assert result.value == pytest.approx(1.0)
        assert result.scalars["integral"] == pytest.approx(1.0)

    def test_curve_measure(self, separated_scores):
        curve = ROCCurve().compute(*separated_scores)

        assert isinstance(curve, Curve)
        assert curve.measure == ROCCurve().label
        assert ROCCurve.numerical is False
