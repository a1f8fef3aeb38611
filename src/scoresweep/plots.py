"""Drawing ROC and PR curves with matplotlib."""

from __future__ import annotations

import logging
from typing import Any, Optional

import matplotlib.pyplot as plt

from scoresweep.schemas import Curve, CurveKind

logger = logging.getLogger(__name__)

_AXIS_LABELS = {
    CurveKind.ROC: ("False Positive Rate", "True Positive Rate"),
    CurveKind.PR: ("Recall", "Precision"),
}


def plot_curve(
    curve: Curve,
    ax: Optional[plt.Axes] = None,
    label: Optional[str] = None,
    show_chance: bool = True,
    **plot_kwargs: Any,
) -> plt.Axes:
    """
    Draw a ROC or PR curve onto a matplotlib Axes.

    Parameters
    ----------
    curve : Curve
        Curve returned by ``roc_curve`` or ``pr_curve``
    ax : plt.Axes, optional
        Target axes; a new figure is created if omitted
    label : str, optional
        Legend label; defaults to the measure name with its AUC
    show_chance : bool
        Draw the diagonal of a random classifier (ROC only)
    **plot_kwargs
        Passed to ``Axes.plot``

    Returns
    -------
    plt.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    plot_kwargs.setdefault("linewidth", 2)
    ax.plot(curve.x, curve.y, label=label or f"{curve.measure} (AUC={curve.auc:.3f})", **plot_kwargs)

    if show_chance and curve.kind == CurveKind.ROC:
        ax.plot([0, 1], [0, 1], "k--", linewidth=1, label="Random")

    xlabel, ylabel = _AXIS_LABELS[curve.kind]
    ax.set_xlabel(xlabel, fontsize=12)
    ax.set_ylabel(ylabel, fontsize=12)
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.05)
    ax.legend(loc="lower right" if curve.kind == CurveKind.ROC else "lower left", fontsize=9)
    ax.grid(alpha=0.3)

    logger.debug("Plotted %s with %d points", curve.measure, len(curve))
    return ax
