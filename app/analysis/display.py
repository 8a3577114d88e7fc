from __future__ import annotations

import random
from typing import Literal

from app.core.config.scoring import get_scoring_value

ScoreBand = Literal["strong", "moderate", "weak"]


def score_band(score: int) -> ScoreBand:
    if score >= int(get_scoring_value("bands.strong", 80)):
        return "strong"
    if score >= int(get_scoring_value("bands.moderate", 60)):
        return "moderate"
    return "weak"


def potential_improvement(score: int, rng: random.Random) -> int:
    """Cosmetic "potential improvement" percentage, bounded by the headroom left below 100."""
    headroom = max(0, 100 - score)
    if headroom == 0:
        return 0
    low = min(int(get_scoring_value("potential_improvement.min", 10)), headroom)
    high = min(int(get_scoring_value("potential_improvement.max", 35)), headroom)
    return rng.randint(low, max(low, high))
