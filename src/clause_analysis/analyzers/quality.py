"""Overall quality from the four dimension scores."""

from ..models.scoring import ScoreResult, clamp


def overall_quality(
    clarity: ScoreResult,
    enforceability: ScoreResult,
    risk: ScoreResult,
    completeness: ScoreResult,
) -> float:
    """
    Average of clarity, enforceability, safety and completeness.

    Safety is ``1 - risk``. The result lies in [0, 1].
    """
    total = clarity.score + enforceability.score + (1.0 - risk.score) + completeness.score
    return round(clamp(total / 4.0), 4)
