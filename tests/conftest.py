"""Shared pytest fixtures for the deal valuation engine test suite."""

from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

import pytest

from ratecard.domain.models import (
    BrandInfo,
    ContentSpec,
    CreatorProfile,
    DealBrief,
    PlatformMetrics,
)
from ratecard.domain.types import ContentFormat, Platform
from ratecard.pricing.benchmarks import ENGAGEMENT_BENCHMARKS
from ratecard.pricing.tiers import resolve_tier

ProfileFactory = Callable[..., CreatorProfile]
BriefFactory = Callable[..., DealBrief]


@pytest.fixture
def make_profile() -> ProfileFactory:
    """Build a single-platform creator profile.

    Engagement defaults to the tier benchmark so the engagement layer is
    neutral unless a test sets it.
    """

    def _make(
        followers: int = 25_000,
        platform: Platform = Platform.INSTAGRAM,
        engagement: Decimal | None = None,
        niches: Sequence[str] = ("lifestyle",),
        **kwargs: Any,
    ) -> CreatorProfile:
        if engagement is None:
            engagement = ENGAGEMENT_BENCHMARKS[resolve_tier(followers)]
        kwargs.setdefault("display_name", "Maya Chen")
        kwargs.setdefault("handle", "mayacreates")
        return CreatorProfile(
            platforms={
                platform: PlatformMetrics(followers=followers, engagement_rate=engagement)
            },
            niches=list(niches),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_brief() -> BriefFactory:
    """Build a deal brief for Glow Co with neutral defaults."""

    def _make(
        platform: Platform = Platform.INSTAGRAM,
        content_format: ContentFormat = ContentFormat.STATIC,
        quantity: int = 1,
        industry: str = "",
        **kwargs: Any,
    ) -> DealBrief:
        return DealBrief(
            brand=BrandInfo(name="Glow Co", industry=industry),
            content=ContentSpec(platform=platform, format=content_format, quantity=quantity),
            **kwargs,
        )

    return _make


@pytest.fixture
def micro_profile(make_profile: ProfileFactory) -> CreatorProfile:
    """A 25K-follower Instagram lifestyle creator (micro tier)."""
    return make_profile()


@pytest.fixture
def static_brief(make_brief: BriefFactory) -> DealBrief:
    """One static Instagram post with no usage rights."""
    return make_brief()
