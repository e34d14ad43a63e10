"""Pydantic validation tests — invalid inputs are rejected at the model boundary."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from retreat_economics.config import (
    FeeType,
    PlatformConfig,
    RetreatEconomicsInput,
    TeamMemberAgreement,
    TeamRole,
)


# ═══════════════════════════════════════════════════════════════════════════
# TeamMemberAgreement
# ═══════════════════════════════════════════════════════════════════════════

class TestTeamMemberValidation:

    def test_defaults_are_valid(self):
        m = TeamMemberAgreement()
        assert m.role is TeamRole.STAFF
        assert m.known_fee_type is FeeType.FLAT

    def test_negative_fee_rejected(self):
        with pytest.raises(ValidationError):
            TeamMemberAgreement(fee_amount=-1)

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            TeamMemberAgreement(role="dj")

    def test_any_fee_type_with_any_role(self):
        m = TeamMemberAgreement(role="venue", fee_type="percentage", fee_amount=Decimal("5"))
        assert m.known_fee_type is FeeType.PERCENTAGE

    def test_unrecognized_fee_type_accepted(self):
        assert TeamMemberAgreement(fee_type="hourly").known_fee_type is None

    def test_numeric_strings_coerced_to_decimal(self):
        assert TeamMemberAgreement(fee_amount="12.34").fee_amount == Decimal("12.34")


# ═══════════════════════════════════════════════════════════════════════════
# RetreatEconomicsInput
# ═══════════════════════════════════════════════════════════════════════════

class TestRetreatInputValidation:

    def test_defaults_are_valid(self):
        inputs = RetreatEconomicsInput()
        assert inputs.max_attendees == 0
        assert inputs.platform.platform_fee_rate == Decimal("0.30")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            RetreatEconomicsInput(price_per_person=-1)

    def test_negative_attendees_rejected(self):
        with pytest.raises(ValidationError):
            RetreatEconomicsInput(max_attendees=-1)

    def test_negative_nights_rejected(self):
        with pytest.raises(ValidationError):
            RetreatEconomicsInput(num_nights=-1)

    def test_fractional_attendees_rejected(self):
        with pytest.raises(ValidationError):
            RetreatEconomicsInput(max_attendees=2.5)

    def test_nested_member_validated(self):
        with pytest.raises(ValidationError):
            RetreatEconomicsInput(team_members=[{"fee_amount": -10}])


# ═══════════════════════════════════════════════════════════════════════════
# PlatformConfig
# ═══════════════════════════════════════════════════════════════════════════

class TestPlatformValidation:

    def test_rate_above_one_rejected(self):
        with pytest.raises(ValidationError):
            PlatformConfig(platform_fee_rate=Decimal("1.5"))

    def test_negative_deposit_rejected(self):
        with pytest.raises(ValidationError):
            PlatformConfig(deposit_pct=Decimal("-0.1"))

    def test_negative_days_rejected(self):
        with pytest.raises(ValidationError):
            PlatformConfig(final_payout_days_before_start=-1)

    def test_edge_values_accepted(self):
        p = PlatformConfig(platform_fee_rate=0, deposit_pct=1, final_payout_days_before_start=0)
        assert p.platform_fee_rate == 0
