"""Mapping of clause scores onto the eight interpretive states."""

from typing import Optional

from ..config.models import AnalysisSettings
from ..models.scoring import RuliadState, ScoreResult


STATE_LABELS = {
    0: "Defective",
    1: "Clear Only",
    2: "Binding Only",
    3: "Clear and Binding",
    4: "Balanced Only",
    5: "Clear and Balanced",
    6: "Binding and Balanced",
    7: "Sound",
}

STATE_SUMMARIES = {
    0: "The clause is unclear, unlikely to bind, and risky.",
    1: "The clause reads clearly but neither binds the parties nor limits risk.",
    2: "The clause binds the parties but is unclear and risky.",
    3: "The clause is clear and binding but exposes a party to significant risk.",
    4: "The clause carries little risk but is unclear and unlikely to bind.",
    5: "The clause is clear and low-risk but unlikely to bind the parties.",
    6: "The clause binds the parties with limited risk but is unclear.",
    7: "The clause is clear, binding and carries limited risk.",
}


class StateMapper:
    """
    Derives a RuliadState from clarity, enforceability and risk.

    Each bit is set when its governing score reaches the configured
    threshold: ``q`` for clarity, ``l`` for enforceability, and ``k`` for
    safety (``1 - risk``).
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or AnalysisSettings()

    def map_scores(self, clarity: float, enforceability: float, risk: float) -> RuliadState:
        """Map raw scores to a state."""
        threshold = self.settings.state_bit_threshold
        safety = round(1.0 - risk, 4)
        q = int(clarity >= threshold)
        l = int(enforceability >= threshold)
        k = int(safety >= threshold)
        index = q + 2 * l + 4 * k

        explanation = (
            f"{STATE_SUMMARIES[index]} "
            f"Clarity {clarity:.2f} {'meets' if q else 'is below'} the {threshold:.2f} threshold; "
            f"enforceability {enforceability:.2f} {'meets' if l else 'is below'} it; "
            f"safety {safety:.2f} {'meets' if k else 'is below'} it."
        )
        return RuliadState(q=q, l=l, k=k, label=STATE_LABELS[index], explanation=explanation)

    def map(self, clarity: ScoreResult, enforceability: ScoreResult, risk: ScoreResult) -> RuliadState:
        """Map scorer results to a state."""
        return self.map_scores(clarity.score, enforceability.score, risk.score)
