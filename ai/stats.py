"""
stats.py  –  Per-match decision statistics.

DecisionStats counts the intents a fighter emitted during one match
(one record per frame), logs a summary at match end and can save an
action-mix bar chart via matplotlib.
"""

from __future__ import annotations

import logging

import numpy as np

import matplotlib
matplotlib.use("Agg")  # non-interactive backend so the plot doesn't block pygame
import matplotlib.pyplot as plt

from ai.actions import INTENT_KINDS

logger = logging.getLogger(__name__)


class DecisionStats:
    """Tracks emitted intents for one fighter over one match.

    Attributes tracked:
        label    – str   (e.g. "hard AI (right)")
        counts   – dict[str, int]  keyed by intent kind
        frames   – int   total records
    """

    def __init__(self, label: str):
        self.label = label
        self._counts = np.zeros(len(INTENT_KINDS), dtype=np.int64)

    def record(self, intent) -> None:
        """Call once per frame with the intent the fighter acted on."""
        self._counts[INTENT_KINDS.index(intent.kind)] += 1

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    @property
    def counts(self) -> dict[str, int]:
        return {kind: int(n) for kind, n in zip(INTENT_KINDS, self._counts)}

    def fractions(self) -> dict[str, float]:
        """Share of frames spent on each intent kind (all 0.0 when empty)."""
        total = self._counts.sum()
        if total == 0:
            return {kind: 0.0 for kind in INTENT_KINDS}
        shares = self._counts / total
        return {kind: float(s) for kind, s in zip(INTENT_KINDS, shares)}

    # ===========================================================
    #  Reports
    # ===========================================================

    def log_summary(self) -> None:
        shares = self.fractions()
        logger.info(
            "%s: %d frames | %s", self.label, self.total,
            "  ".join(f"{k}={shares[k]:.0%}" for k in INTENT_KINDS),
        )

    def plot_action_mix(self, path: str) -> str | None:
        """Save a bar chart of the action mix to *path*.

        Returns the path, or None when nothing was recorded.
        """
        if self.total == 0:
            return None

        shares = self.fractions()
        fig, ax = plt.subplots()
        ax.bar(list(INTENT_KINDS), [shares[k] for k in INTENT_KINDS])
        ax.set_ylabel("Share of frames")
        ax.set_ylim(0, 1)
        ax.set_title(f"Action Mix  –  {self.label}")
        ax.grid(True, axis="y")

        fig.savefig(path, dpi=100, bbox_inches="tight")
        plt.close(fig)
        logger.info("Action mix chart saved to %s", path)
        return path

    def as_dict(self) -> dict:
        return {
            "label": self.label,
            "frames": self.total,
            "counts": self.counts,
        }
