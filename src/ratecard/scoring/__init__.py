"""Deal-quality scoring and its legacy fit-score projection.

Re-exports key functions and types for convenient access:
    from ratecard.scoring import score, to_fit_score, ScoreResult
"""

from ratecard.scoring.deal_quality import has_niche_match, quality_band, score
from ratecard.scoring.fit_score import to_fit_score
from ratecard.scoring.models import (
    FitComponent,
    FitScoreBreakdown,
    FitScoreResult,
    ScoreBreakdown,
    ScoreComponent,
    ScoreResult,
)

__all__ = [
    "FitComponent",
    "FitScoreBreakdown",
    "FitScoreResult",
    "ScoreBreakdown",
    "ScoreComponent",
    "ScoreResult",
    "has_niche_match",
    "quality_band",
    "score",
    "to_fit_score",
]
