"""Configuration dataclasses for measure evaluation."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from scoresweep.exceptions import ConfigurationError
from scoresweep.metrics.fixed_rate import check_rate
from scoresweep.metrics.maximum import check_beta

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationConfig:
    """Configuration of the default measure set.

    Attributes:
        specificity_for_sensitivity: Fixed specificity for the sensitivity measure
        sensitivity_for_fpr: Fixed sensitivity for the false positive rate measure
        sensitivity_for_ppv: Fixed sensitivity for the positive predictive value measure
        beta: Weight of recall in the maximum F-measure
        numerical: Report only scalar areas (True) or full ROC/PR curves (False)
    """

    specificity_for_sensitivity: float = 0.999
    sensitivity_for_fpr: float = 0.95
    sensitivity_for_ppv: float = 0.95
    beta: float = 1.0
    numerical: bool = True

    def __post_init__(self):
        """Validate rates and beta."""
        for name in ("specificity_for_sensitivity", "sensitivity_for_fpr", "sensitivity_for_ppv"):
            object.__setattr__(self, name, check_rate(getattr(self, name), name))
        object.__setattr__(self, "beta", check_beta(self.beta))
        if not isinstance(self.numerical, bool):
            raise ConfigurationError(f"numerical must be a bool, got {self.numerical!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a plain dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> EvaluationConfig:
        """Create config from a dict, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ConfigurationError(f"Unknown evaluation config keys: {unknown}")
        return cls(**payload)
