"""Shared test fixtures — a 20-person, 5-night, $1,000 retreat."""

from __future__ import annotations

from decimal import Decimal

import pytest

from retreat_economics.config import (
    PlatformConfig,
    RetreatEconomicsInput,
    TeamMemberAgreement,
)


@pytest.fixture
def platform() -> PlatformConfig:
    return PlatformConfig(
        platform_fee_rate=Decimal("0.30"),
        deposit_pct=Decimal("0.50"),
        final_payout_days_before_start=7,
    )


@pytest.fixture
def venue() -> TeamMemberAgreement:
    return TeamMemberAgreement(role="venue", fee_type="flat", fee_amount=Decimal("500"),
                               description="Venue rental")


@pytest.fixture
def chef() -> TeamMemberAgreement:
    return TeamMemberAgreement(role="chef", fee_type="per_person", fee_amount=Decimal("50"),
                               description="Meals")


@pytest.fixture
def cohost() -> TeamMemberAgreement:
    return TeamMemberAgreement(role="cohost", fee_type="percentage", fee_amount=Decimal("10"),
                               description="Co-host share")


@pytest.fixture
def retreat(platform: PlatformConfig) -> RetreatEconomicsInput:
    """Retreat numbers with no team."""
    return RetreatEconomicsInput(
        price_per_person=Decimal("1000"),
        max_attendees=20,
        num_nights=5,
        platform=platform,
    )


@pytest.fixture
def retreat_with_team(
    retreat: RetreatEconomicsInput,
    venue: TeamMemberAgreement,
    chef: TeamMemberAgreement,
    cohost: TeamMemberAgreement,
) -> RetreatEconomicsInput:
    return retreat.model_copy(update={"team_members": [venue, chef, cohost]})
