"""Result models for deal-quality scoring."""

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ratecard.domain.types import FitLevel, QualityLevel, Recommendation


class ScoreComponent(BaseModel, frozen=True):
    """One scored dimension of a deal.

    Attributes:
        score: Points earned, between 0 and ``max_points``.
        max_points: Points available for this dimension.
        weight: Share of the 100-point total this dimension carries.
        rationale: Why the dimension scored as it did.
    """

    score: Decimal
    max_points: int
    weight: Decimal
    rationale: str

    @model_validator(mode="after")
    def score_within_allocation(self) -> "ScoreComponent":
        """Ensure the score never exceeds its point allocation."""
        if self.score < 0 or self.score > self.max_points:
            raise ValueError(
                f"score ({self.score}) must be between 0 and {self.max_points}"
            )
        return self

    @property
    def percentage(self) -> Decimal:
        """Share of the available points earned, 0-100."""
        return self.score / self.max_points * 100


class ScoreBreakdown(BaseModel, frozen=True):
    """The six dimensions of a deal-quality score."""

    rate_fairness: ScoreComponent
    brand_legitimacy: ScoreComponent
    portfolio_value: ScoreComponent
    growth_potential: ScoreComponent
    terms_fairness: ScoreComponent
    creative_freedom: ScoreComponent

    def items(self) -> list[tuple[str, ScoreComponent]]:
        """Return (dimension name, component) pairs in a stable order."""
        return [(name, getattr(self, name)) for name in type(self).model_fields]


class ScoreResult(BaseModel, frozen=True):
    """Six-dimension assessment of how favorable a deal is to the creator.

    ``total_score`` is the plain sum of the six component scores; the
    component weights only describe how the 100 points are allocated.
    """

    total_score: Decimal
    breakdown: ScoreBreakdown
    quality_level: QualityLevel
    recommendation: Recommendation
    recommendation_text: str = ""
    price_adjustment: Decimal
    red_flags: list[str] = Field(default_factory=list)
    green_flags: list[str] = Field(default_factory=list)
    insights: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def total_matches_components(self) -> "ScoreResult":
        """Ensure the total is exactly the sum of the components."""
        expected = sum(
            (component.score for _, component in self.breakdown.items()), Decimal("0")
        )
        if self.total_score != expected:
            raise ValueError(
                f"total_score ({self.total_score}) must equal component sum ({expected})"
            )
        return self


class FitComponent(BaseModel, frozen=True):
    """One dimension of the legacy fit score, expressed as 0-100."""

    score: Decimal
    weight: Decimal
    insight: str


class FitScoreBreakdown(BaseModel, frozen=True):
    """The five dimensions of the legacy fit score."""

    niche_match: FitComponent
    demographic_match: FitComponent
    platform_match: FitComponent
    engagement_quality: FitComponent
    content_capability: FitComponent


class FitScoreResult(BaseModel, frozen=True):
    """Legacy five-dimension view of a deal-quality score."""

    total_score: Decimal
    fit_level: FitLevel
    price_adjustment: Decimal
    breakdown: FitScoreBreakdown
    insights: list[str] = Field(default_factory=list)
