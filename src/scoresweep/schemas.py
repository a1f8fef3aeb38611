"""Result schemas for performance measures and curves.

Results are Pydantic models so they can be dumped to plain dicts or JSON by
whatever tooling surrounds the measures. Non-finite thresholds (the ``-inf``
start of the sweep) are written as ``-Infinity`` in JSON and read back as such.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurveKind(str, Enum):
    """Type of performance curve."""

    ROC = "roc"
    PR = "pr"


class MeasureResult(BaseModel):
    """Named scalar results of a single measure."""

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    measure: str = Field(..., description="Name of the measure that produced the result")
    scalars: Dict[str, float] = Field(
        ...,
        description="Named scalar values, e.g. {'value': 0.91, 'threshold': 0.3}",
    )
    parameters: Dict[str, float] = Field(
        default_factory=dict,
        description="Configuration of the measure (rates, beta)",
    )

    @property
    def value(self) -> float:
        return self.scalars["value"]

    @property
    def threshold(self) -> Optional[float]:
        return self.scalars.get("threshold")


class Curve(BaseModel):
    """A performance curve with its area.

    ``x`` is the false positive rate (ROC) or recall (PR) and ``y`` the true
    positive rate (ROC) or precision (PR). Points are ordered by increasing
    threshold, so ``x`` is non-increasing.
    """

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    kind: CurveKind = Field(..., description="Type of curve: 'roc' or 'pr'")
    measure: str = Field(..., description="Name of the measure that produced the curve")
    x: List[float] = Field(..., description="X-axis values (FPR for ROC, recall for PR)")
    y: List[float] = Field(..., description="Y-axis values (TPR for ROC, precision for PR)")
    thresholds: Optional[List[Optional[float]]] = Field(
        default=None,
        description="Threshold of each point; None for interpolated points",
    )
    auc: float = Field(..., description="Area under the curve")
    summary: Dict[str, float] = Field(
        default_factory=dict,
        description="Additional named areas, e.g. {'AUC-PR (Integral)': 0.87}",
    )

    @model_validator(mode="after")
    def _check_lengths(self) -> "Curve":
        if len(self.x) != len(self.y):
            raise ValueError(f"x and y differ in length ({len(self.x)} != {len(self.y)})")
        if self.thresholds is not None and len(self.thresholds) != len(self.x):
            raise ValueError("thresholds must have one entry per point")
        return self

    @property
    def points(self) -> List[Tuple[float, float]]:
        return list(zip(self.x, self.y))

    def __len__(self) -> int:
        return len(self.x)


class EvaluationReport(BaseModel):
    """Results of evaluating a set of measures on one pair of samples."""

    model_config = ConfigDict(ser_json_inf_nan="constants")

    results: List[MeasureResult] = Field(default_factory=list)
    curves: List[Curve] = Field(default_factory=list)

    def get(self, name: str) -> Union[MeasureResult, Curve]:
        """Return the result or curve produced by the measure ``name``."""
        for item in [*self.results, *self.curves]:
            if item.measure == name:
                return item
        raise KeyError(f"No result for measure '{name}'")

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Flatten to ``{measure: {scalar_name: value}}``, curves contributing their areas."""
        out: Dict[str, Dict[str, float]] = {}
        for result in self.results:
            out[result.measure] = dict(result.scalars)
        for curve in self.curves:
            out[curve.measure] = {"auc": curve.auc, **curve.summary}
        return out

    def to_frame(self) -> pd.DataFrame:
        """One row per named scalar: ``measure``, ``scalar``, ``value``."""
        rows = [
            {"measure": measure, "scalar": scalar, "value": value}
            for measure, scalars in self.to_dict().items()
            for scalar, value in scalars.items()
        ]
        return pd.DataFrame(rows, columns=["measure", "scalar", "value"])
